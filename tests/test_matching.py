import pytest

from inclusivity.matching import find_term, first_match, is_word_boundary
from inclusivity.terms import TermEntry


@pytest.mark.parametrize(
    "text, index, expected",
    [
        ("check", 0, True),
        ("check", 1, False),
        ("getHe", 3, True),
        ("get_he", 4, True),
        ("HTTPServer", 4, True),
        ("HEADER", 2, False),
        ("node2he", 5, True),
    ],
)
def test_word_boundaries(text, index, expected):
    assert is_word_boundary(text, index) is expected


def test_long_terms_match_as_substrings():
    assert find_term("DoWorkWhiteListThing", "whitelist") == (6, 15)
    assert find_term("whitelistvalue", "whitelist") == (0, 9)


def test_short_terms_need_word_boundaries():
    assert find_term("check", "he") is None
    assert find_term("history", "his") is None
    assert find_term("he", "he") == (0, 2)
    assert find_term("theValueForHe", "he") == (11, 13)
    assert find_term("the he", "he") == (4, 6)


def test_find_term_handles_missing_text():
    assert find_term(None, "he") is None
    assert find_term("", "he") is None
    assert find_term(42, "he") is None


def test_first_match_uses_table_order():
    entries = (TermEntry("slave", ("replica",)), TermEntry("master", ("primary",)))
    entry, span = first_match("masterSlave", entries)
    assert entry.term == "slave"
    assert span == (6, 11)
