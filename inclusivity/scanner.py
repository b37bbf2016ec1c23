"""Dispatch scan units to rules and collect the results."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Sequence

from .fixer import build_fix
from .result import Diagnostic, ScanResult
from .rules import Rule, ScanUnit, UnitKind
from .rules.docs import DocRule
from .rules.names import NameRule
from .terms import TermEntry

logger = logging.getLogger(__name__)


def load_rules(terms: Optional[Sequence[TermEntry]] = None) -> Dict[UnitKind, Rule]:
    return {
        UnitKind.NAME: NameRule(terms),
        UnitKind.DOC: DocRule(terms),
    }


class Scanner:
    """Run the name and documentation rules over independent units.

    A scanner holds no per-scan state, so one instance can be shared across
    threads. A failure while scanning one unit is logged and recorded; it
    never stops the remaining units.
    """

    def __init__(
        self,
        terms: Optional[Sequence[TermEntry]] = None,
        allow_names: Iterable[str] = (),
        scan_names: bool = True,
        scan_docs: bool = True,
        propose_fixes: bool = False,
    ) -> None:
        self._rules = load_rules(terms)
        self._entries = {entry.term: entry for entry in terms} if terms is not None else {}
        self._allow_names = frozenset(name.lower() for name in allow_names)
        self._enabled = {UnitKind.NAME: scan_names, UnitKind.DOC: scan_docs}
        self._propose_fixes = propose_fixes

    def scan_unit(self, unit: ScanUnit) -> Optional[Diagnostic]:
        """Return the diagnostic for one unit, or ``None``."""

        if not self._enabled.get(unit.kind, False):
            return None
        if unit.kind == UnitKind.NAME and isinstance(unit.text, str) and unit.text.lower() in self._allow_names:
            return None
        return self._rules[unit.kind].scan(unit)

    def scan(self, units: Iterable[ScanUnit], result: Optional[ScanResult] = None) -> ScanResult:
        """Scan every unit into ``result`` (a new one when omitted)."""

        if result is None:
            result = ScanResult()
        for unit in units:
            try:
                diagnostic = self.scan_unit(unit)
            except Exception as exc:  # pylint: disable=broad-except
                logger.warning("Skipping %s at %s: %s", unit.kind.value, unit.location, exc)
                result.add_error(f"{unit.location}: {exc}")
                continue
            if diagnostic is None:
                continue
            fix = build_fix(diagnostic, self._entries.get(diagnostic.term)) if self._propose_fixes else None
            logger.debug("%s: %s", diagnostic.location, diagnostic.message)
            result.add_diagnostic(diagnostic, fix)
        return result
