from inclusivity.result import Location
from inclusivity.rules import ScanUnit, UnitKind
from inclusivity.rules.docs import DocRule, scan_doc


def test_blacklist_comment():
    location = Location(path="app.py", line=11, column=12)
    diagnostic = scan_doc("/// blacklist here", location)
    assert diagnostic.matched_text == "blacklist"
    assert diagnostic.suggestion_text == "deny list, blocklist, exclude list"
    assert diagnostic.location == location
    assert diagnostic.kind == "doc"


def test_missing_or_blank_doc_is_skipped():
    assert scan_doc(None) is None
    assert scan_doc("") is None
    assert scan_doc("   \n  ") is None


def test_clean_doc_has_no_diagnostic():
    assert scan_doc("Return the checked value for this request.") is None


def test_doc_reports_term_not_text():
    diagnostic = scan_doc("Ask the chairman before merging.")
    assert diagnostic.matched_text == "chairman"
    assert diagnostic.term == "chairman"


def test_multi_word_terms_in_docs():
    diagnostic = scan_doc("Run a Sanity Check before release.")
    assert diagnostic.matched_text == "sanity check"
    assert diagnostic.suggestion_text == "quick check, confidence check, coherence check"


def test_doc_rule_ignores_non_string_text():
    assert DocRule().scan(ScanUnit(kind=UnitKind.DOC, text=b"blacklist")) is None
