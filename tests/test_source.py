import textwrap
from pathlib import Path

import pytest

from inclusivity.rules import UnitKind
from inclusivity.scanner import Scanner
from inclusivity.utils import iter_source_units, module_name


def units_for(source, path="pkg/module.py"):
    return iter_source_units(textwrap.dedent(source), path=path)


def names(units):
    return [(unit.text, unit.symbol_kind) for unit in units if unit.kind == UnitKind.NAME]


def test_class_name_location():
    units = units_for("class he:\n    pass\n", path="<string>")
    assert names(units) == [("he", "class")]
    assert (units[0].location.line, units[0].location.column) == (1, 7)


def test_module_and_package_names():
    assert module_name(Path("src/whitelist_tools.py")) == "whitelist_tools"
    assert module_name(Path("src/master/__init__.py")) == "master"
    units = units_for("", path="src/whitelist_tools.py")
    assert names(units) == [("whitelist_tools", "module")]


def test_functions_parameters_and_fields():
    units = units_for(
        """
        LIMIT = 3


        class Registry:
            size: int = 0

            def __init__(self, whiteList, *slaves, force=False, **extra):
                self.items = []
                self.items = list(whiteList)

            @staticmethod
            async def fetch(url):
                local_value = url
                return local_value
        """
    )
    assert names(units) == [
        ("module", "module"),
        ("LIMIT", "variable"),
        ("Registry", "class"),
        ("size", "field"),
        ("__init__", "method"),
        ("self", "parameter"),
        ("whiteList", "parameter"),
        ("slaves", "parameter"),
        ("force", "parameter"),
        ("extra", "parameter"),
        ("items", "field"),
        ("fetch", "method"),
        ("url", "parameter"),
    ]


def test_property_synthesizes_accessor_names():
    units = units_for(
        """
        class Settings:
            @property
            def BlacklistNumber(self):
                return 1

            @BlacklistNumber.setter
            def BlacklistNumber(self, value):
                pass
        """
    )
    result = Scanner().scan(units)
    assert [d.matched_text for d in result.diagnostics] == [
        "BlacklistNumber",
        "get_BlacklistNumber",
        "set_BlacklistNumber",
    ]
    assert {d.suggestion_text for d in result.diagnostics} == {"deny list, blocklist, exclude list"}


def test_docstrings_become_doc_units():
    units = units_for(
        '''
        """Module docs."""


        def run():
            """Skip anything on the blacklist."""


        class Empty:
            pass
        '''
    )
    docs = [unit for unit in units if unit.kind == UnitKind.DOC]
    assert [unit.text for unit in docs] == ["Module docs.", "Skip anything on the blacklist."]
    result = Scanner().scan(units)
    assert [(d.kind, d.matched_text) for d in result.diagnostics] == [("doc", "blacklist")]
    assert result.diagnostics[0].location.line == 6


def test_name_and_doc_both_reported():
    units = units_for(
        '''
        class MasterNode:
            """Tracks every slave."""
        '''
    )
    result = Scanner().scan(units)
    assert [(d.kind, d.term) for d in result.diagnostics] == [("name", "master"), ("doc", "slave")]


def test_syntax_error_propagates():
    with pytest.raises(SyntaxError):
        units_for("def broken(:\n")
