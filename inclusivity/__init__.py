"""Inclusivity scanner package."""

from importlib.metadata import version, PackageNotFoundError

from .fixer import Fix, NoMatchFound, build_fix, propose_fix
from .result import Diagnostic, Location, ScanResult
from .rules import ScanUnit, UnitKind
from .rules.docs import scan_doc
from .rules.names import scan_name
from .scanner import Scanner
from .terms import TermEntry, lookup_candidates

try:
    __version__ = version("inclusivity-scanner")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    "Diagnostic",
    "Fix",
    "Location",
    "NoMatchFound",
    "ScanResult",
    "ScanUnit",
    "Scanner",
    "TermEntry",
    "UnitKind",
    "build_fix",
    "lookup_candidates",
    "propose_fix",
    "scan_doc",
    "scan_name",
]
