"""Rule registry for scanner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol

from inclusivity.result import Diagnostic, Location


class UnitKind(str, Enum):
    """The two textual surfaces a unit can come from."""

    NAME = "name"
    DOC = "doc"


@dataclass(frozen=True)
class ScanUnit:
    """One piece of text offered to the rules, with where it came from."""

    kind: UnitKind
    text: Optional[str]
    location: Location = field(default_factory=Location)
    symbol_kind: str = ""


class Rule(Protocol):
    """Protocol implemented by all rule evaluators."""

    name: str
    kind: UnitKind

    def scan(self, unit: ScanUnit) -> Optional[Diagnostic]:
        """Return a diagnostic for ``unit`` or ``None`` when it is clean."""
