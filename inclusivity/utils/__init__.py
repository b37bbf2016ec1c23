"""Utility helpers for the scanner."""

from .fileio import read_yaml_file, read_text_file
from .code import iter_code_files
from .source import iter_source_units, module_name

__all__ = [
    "read_yaml_file",
    "read_text_file",
    "iter_code_files",
    "iter_source_units",
    "module_name",
]
