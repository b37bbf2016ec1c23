from dataclasses import replace

import pytest

from inclusivity.fixer import NoMatchFound, build_fix, propose_fix
from inclusivity.rules.docs import scan_doc
from inclusivity.rules.names import scan_name
from inclusivity.terms import TermEntry


def test_propose_fix_whole_name():
    assert propose_fix("WhiteList", "WhiteList", ["AllowList"]) == "AllowList"


def test_propose_fix_keeps_prefix_and_suffix():
    assert propose_fix("DoWorkWhiteListThing", "WhiteList", ["AllowList"]) == "DoWorkAllowListThing"


def test_propose_fix_replaces_first_occurrence_only():
    assert propose_fix("masterToMaster", "master", ["primary"]) == "primaryToMaster"


def test_propose_fix_does_not_recase_replacement():
    assert propose_fix("getSlaveNode", "slave", ["replica", "standby"]) == "getreplicaNode"


def test_propose_fix_missing_term():
    with pytest.raises(NoMatchFound):
        propose_fix("PrimaryNode", "master", ["primary"])


def test_propose_fix_without_suggestions():
    with pytest.raises(NoMatchFound):
        propose_fix("MasterNode", "master", [])


def test_build_fix_from_name_diagnostic():
    fix = build_fix(scan_name("get_BlacklistNumber"))
    assert fix.original_name == "get_BlacklistNumber"
    assert fix.matched_substring == "Blacklist"
    assert fix.replacement == "deny list"
    assert fix.new_name == "get_deny listNumber"


def test_build_fix_uses_word_boundaries_for_short_terms():
    fix = build_fix(scan_name("theHe"))
    assert fix.new_name == "thethey"


def test_build_fix_not_offered_for_docs():
    assert build_fix(scan_doc("blacklist here")) is None


def test_build_fix_takes_first_table_suggestion():
    fix = build_fix(scan_name("slave_count"))
    assert fix.replacement == "replica"
    assert fix.new_name == "replica_count"


def test_build_fix_with_explicit_entry():
    entry = TermEntry("master", ("leader", "primary"))
    fix = build_fix(scan_name("MasterNode"), entry)
    assert fix.new_name == "leaderNode"


def test_build_fix_unknown_term():
    diagnostic = replace(scan_name("MasterNode"), term="overseer")
    assert build_fix(diagnostic) is None
