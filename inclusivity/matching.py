"""Case-insensitive term search over identifiers and free text."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Optional, Tuple

from .terms import TermEntry

# Terms this short only count when they sit on identifier word boundaries.
SHORT_TERM_LENGTH = 4


@lru_cache(maxsize=None)
def _compile(term: str) -> re.Pattern:
    # re.IGNORECASE on str patterns uses Unicode simple case folding and never
    # consults the process locale.
    return re.compile(re.escape(term), re.IGNORECASE)


def is_word_boundary(text: str, index: int) -> bool:
    """Return True when ``index`` falls between two identifier words.

    Boundaries are the ends of the text, any non-alphanumeric neighbour,
    a lower-to-upper camel case transition, a letter/digit transition, and
    the last capital of an acronym run (``HTTPServer`` splits before ``S``).
    """

    if index <= 0 or index >= len(text):
        return True
    prev, cur = text[index - 1], text[index]
    if not prev.isalnum() or not cur.isalnum():
        return True
    if prev.isdigit() != cur.isdigit():
        return True
    if prev.islower() and cur.isupper():
        return True
    if prev.isupper() and cur.isupper():
        following = text[index + 1] if index + 1 < len(text) else ""
        return following.islower()
    return False


def find_term(text: Optional[str], term: str) -> Optional[Tuple[int, int]]:
    """Return the ``(start, end)`` span of the first occurrence of ``term``.

    Long terms match anywhere as a substring. Short terms must also start and
    end on word boundaries so that ``he`` is found in ``get_he`` but not in
    ``check``.
    """

    if not text or not term or not isinstance(text, str):
        return None
    pattern = _compile(term.lower())
    short = len(term) <= SHORT_TERM_LENGTH
    position = 0
    while True:
        match = pattern.search(text, position)
        if match is None:
            return None
        start, end = match.span()
        if not short or (is_word_boundary(text, start) and is_word_boundary(text, end)):
            return start, end
        position = start + 1


def first_match(text: Optional[str], entries: Iterable[TermEntry]) -> Optional[Tuple[TermEntry, Tuple[int, int]]]:
    """Return the first entry in ``entries`` whose term occurs in ``text``."""

    if not text or not isinstance(text, str):
        return None
    for entry in entries:
        span = find_term(text, entry.term)
        if span is not None:
            return entry, span
    return None
