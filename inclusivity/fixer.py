"""Propose replacement identifiers for name diagnostics.

Nothing here touches source files. A proposal is handed back to whatever
performs the rename, which owns updating references.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Optional, Sequence

from .matching import find_term
from .result import Diagnostic
from .rules import UnitKind
from .terms import TermEntry, get_entry

logger = logging.getLogger(__name__)


class NoMatchFound(LookupError):
    """The matched term could not be located in the name at fix time."""


@dataclass(frozen=True)
class Fix:
    """A proposed rename, not yet applied to any source."""

    original_name: str
    matched_substring: str
    replacement: str
    new_name: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _locate(original_name: str, matched_term: str, suggestions: Sequence[str]):
    if not suggestions:
        raise NoMatchFound(f"No suggestion available for {matched_term!r}")
    span = find_term(original_name, matched_term)
    if span is None:
        raise NoMatchFound(f"{matched_term!r} not found in {original_name!r}")
    return span


def propose_fix(original_name: str, matched_term: str, suggestions: Sequence[str]) -> str:
    """Return ``original_name`` with the first occurrence of ``matched_term`` replaced.

    The replacement is ``suggestions[0]`` inserted as written; surrounding
    characters keep their original casing and the inserted text is not
    re-cased to the identifier's style.
    """

    start, end = _locate(original_name, matched_term, suggestions)
    return original_name[:start] + suggestions[0] + original_name[end:]


def build_fix(diagnostic: Diagnostic, entry: Optional[TermEntry] = None) -> Optional[Fix]:
    """Return a :class:`Fix` for a name diagnostic, or ``None`` when none applies.

    ``entry`` defaults to the built-in table entry for ``diagnostic.term``.
    """

    if diagnostic.kind != UnitKind.NAME.value:
        return None
    if entry is None:
        entry = get_entry(diagnostic.term)
    if entry is None:
        logger.debug("No table entry for term %r", diagnostic.term)
        return None
    suggestions = entry.suggestions
    name = diagnostic.matched_text
    try:
        start, end = _locate(name, entry.term, suggestions)
    except NoMatchFound as exc:
        logger.debug("Declining fix for %s: %s", diagnostic.location, exc)
        return None
    replacement = suggestions[0]
    return Fix(
        original_name=name,
        matched_substring=name[start:end],
        replacement=replacement,
        new_name=name[:start] + replacement + name[end:],
    )
