"""Detect non-inclusive terms inside documentation text."""

from __future__ import annotations

from typing import Optional, Sequence

from inclusivity.matching import first_match
from inclusivity.result import Diagnostic, Location
from inclusivity.terms import TermEntry, lookup_candidates

from . import Rule, ScanUnit, UnitKind


class DocRule:
    """Flag documentation blocks containing a term from the table.

    The matched term itself is reported, anchored to the whole block; no
    attempt is made to pinpoint the word inside the text.
    """

    name = "docs"
    kind = UnitKind.DOC

    def __init__(self, terms: Optional[Sequence[TermEntry]] = None) -> None:
        self._terms = tuple(terms) if terms is not None else lookup_candidates()

    def scan(self, unit: ScanUnit) -> Optional[Diagnostic]:
        if not isinstance(unit.text, str) or not unit.text.strip():
            return None
        found = first_match(unit.text, self._terms)
        if found is None:
            return None
        entry, _span = found
        return Diagnostic(
            location=unit.location,
            matched_text=entry.term,
            suggestion_text=entry.suggestion_text,
            term=entry.term,
            kind=UnitKind.DOC.value,
            symbol_kind=unit.symbol_kind,
        )


def scan_doc(doc_text: Optional[str], location: Optional[Location] = None, symbol_kind: str = "docstring") -> Optional[Diagnostic]:
    """Scan one documentation block against the built-in table."""

    unit = ScanUnit(kind=UnitKind.DOC, text=doc_text, location=location or Location(), symbol_kind=symbol_kind)
    return DocRule().scan(unit)


def get_rule() -> Rule:
    return DocRule()
