"""Core result data structures for the scanner."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

from .severity import Severity

if TYPE_CHECKING:
    from .fixer import Fix

RULE_ID = "Inclusive"
MESSAGE_FORMAT = "{matched} is non-inclusive terminology, consider using {suggestions} instead"

SEVERITY_ORDER: Sequence[Severity] = (Severity.WARNING,)


@dataclass(frozen=True)
class Location:
    """Where a scanned unit came from. Columns are 1-based."""

    path: str = "<unknown>"
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Diagnostic:
    """A single non-inclusive term finding."""

    location: Location
    matched_text: str
    suggestion_text: str
    term: str
    kind: str
    symbol_kind: str = ""
    rule_id: str = RULE_ID
    severity: Severity = Severity.WARNING

    @property
    def message(self) -> str:
        return MESSAGE_FORMAT.format(matched=self.matched_text, suggestions=self.suggestion_text)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data.pop("location")
        data["severity"] = self.severity.value
        data["path"] = self.location.path
        data["line"] = self.location.line
        data["column"] = self.location.column
        data["message"] = self.message
        return data


@dataclass
class Summary:
    """Aggregate diagnostic counts by severity."""

    warning: int = 0

    def increment(self, severity: Severity) -> None:
        attr = severity.value.lower()
        setattr(self, attr, getattr(self, attr) + 1)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, getattr(self, severity.value.lower())) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, severity.value.lower()) for severity in SEVERITY_ORDER)


@dataclass
class ScanResult:
    """Bundle scan summary, diagnostics and proposed fixes."""

    summary: Summary = field(default_factory=Summary)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    fixes: Dict[int, "Fix"] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.summary.warning == 0

    def add_diagnostic(self, diagnostic: Diagnostic, fix: Optional["Fix"] = None) -> None:
        self.summary.increment(diagnostic.severity)
        if fix is not None:
            self.fixes[len(self.diagnostics)] = fix
        self.diagnostics.append(diagnostic)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def extend(self, other: "ScanResult") -> None:
        """Append everything from ``other``, keeping fixes attached to their diagnostics."""

        for index, diagnostic in enumerate(other.diagnostics):
            self.add_diagnostic(diagnostic, other.fixes.get(index))
        self.errors.extend(other.errors)

    def fix_for(self, index: int) -> Optional["Fix"]:
        return self.fixes.get(index)

    def to_dict(self) -> Dict[str, object]:
        diagnostics = []
        for index, diagnostic in enumerate(self.diagnostics):
            data = diagnostic.to_dict()
            fix = self.fixes.get(index)
            if fix is not None:
                data["fix"] = fix.to_dict()
            diagnostics.append(data)
        return {
            "summary": self.summary.to_dict(),
            "diagnostics": diagnostics,
            "errors": list(self.errors),
            "passed": self.passed,
        }

    def exit_code(self) -> int:
        return 1 if self.summary.warning > 0 else 0

    def top_diagnostics(self, limit: int = 5) -> List[Diagnostic]:
        """Return diagnostics ordered by severity ranking."""

        severity_rank = {severity: idx for idx, severity in enumerate(SEVERITY_ORDER)}
        ordered = sorted(
            self.diagnostics,
            key=lambda diagnostic: (
                severity_rank[diagnostic.severity],
                diagnostic.location.path,
                diagnostic.location.line,
                diagnostic.location.column,
            ),
        )
        return ordered[:limit]


def format_diagnostic(diagnostic: Diagnostic) -> str:
    return f"{diagnostic.location}: [{diagnostic.severity.value}] {diagnostic.rule_id}: {diagnostic.message}"


def format_summary_table(result: ScanResult, max_findings: int = 5) -> str:
    """Create a human-readable summary table for console output."""

    lines: List[str] = []
    lines.append("Scan Summary")
    lines.append("=" * 40)
    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity, count in result.summary.as_rows():
        lines.append(f"{severity:<10} | {count:>5}")
    lines.append("-" * len(header))
    status = "PASS" if result.passed else "FAIL"
    lines.append(f"Status    : {status}")
    lines.append(f"Findings  : {result.summary.total}")
    if result.errors:
        lines.append(f"Skipped   : {len(result.errors)}")

    diagnostics = result.top_diagnostics(max_findings)
    if diagnostics:
        lines.append("")
        lines.append("Top Findings")
        lines.append("-" * 40)
        for diagnostic in diagnostics:
            lines.append(
                f"[{diagnostic.severity.value}] {diagnostic.matched_text} ({diagnostic.term}) -> {diagnostic.suggestion_text}"
            )
            lines.append(f"  Location: {diagnostic.location}")
    return "\n".join(lines)
