"""Severity definitions for scanner diagnostics."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the supported severity levels for diagnostics.

    Every non-inclusive term is reported as a warning.
    """

    WARNING = "WARNING"
