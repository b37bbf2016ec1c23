"""Detect non-inclusive terms inside declared identifiers."""

from __future__ import annotations

from typing import Optional, Sequence

from inclusivity.matching import first_match
from inclusivity.result import Diagnostic, Location
from inclusivity.terms import TermEntry, lookup_candidates

from . import Rule, ScanUnit, UnitKind


class NameRule:
    """Flag identifiers containing a term from the table.

    The whole identifier is reported as the matched text so the diagnostic
    names the symbol a rename would target.
    """

    name = "names"
    kind = UnitKind.NAME

    def __init__(self, terms: Optional[Sequence[TermEntry]] = None) -> None:
        self._terms = tuple(terms) if terms is not None else lookup_candidates()

    def scan(self, unit: ScanUnit) -> Optional[Diagnostic]:
        found = first_match(unit.text, self._terms)
        if found is None:
            return None
        entry, _span = found
        return Diagnostic(
            location=unit.location,
            matched_text=unit.text,
            suggestion_text=entry.suggestion_text,
            term=entry.term,
            kind=UnitKind.NAME.value,
            symbol_kind=unit.symbol_kind,
        )


def scan_name(name: Optional[str], location: Optional[Location] = None, symbol_kind: str = "") -> Optional[Diagnostic]:
    """Scan one identifier against the built-in table."""

    unit = ScanUnit(kind=UnitKind.NAME, text=name, location=location or Location(), symbol_kind=symbol_kind)
    return NameRule().scan(unit)


def get_rule() -> Rule:
    return NameRule()
