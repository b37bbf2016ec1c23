"""Turn Python source into name and documentation scan units."""

from __future__ import annotations

import ast
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set, Union

from inclusivity.result import Location
from inclusivity.rules import ScanUnit, UnitKind

FunctionNode = Union[ast.FunctionDef, ast.AsyncFunctionDef]

_DEF_KEYWORD = re.compile(r"(?:async\s+)?(?:def|class)\s+")
_PROPERTY_DECORATORS = {"property", "cached_property"}
_ACCESSOR_PREFIXES = {"setter": "set_", "deleter": "del_"}


@dataclass
class _Scope:
    kind: str
    seen: Set[str] = field(default_factory=set)
    self_name: Optional[str] = None
    owner: Optional["_Scope"] = None


def module_name(path: Path) -> str:
    """Return the namespace name a file declares (the package name for ``__init__.py``)."""

    if path.stem == "__init__":
        return path.parent.name or path.stem
    return path.stem


class _UnitCollector(ast.NodeVisitor):
    def __init__(self, path: str, lines: List[str]) -> None:
        self._path = path
        self._lines = lines
        self._scopes: List[_Scope] = []
        self.units: List[ScanUnit] = []

    # ------------------------------------------------------------------
    # Unit helpers
    # ------------------------------------------------------------------
    def _location(self, node: ast.AST, column: Optional[int] = None) -> Location:
        line = getattr(node, "lineno", 1)
        if column is None:
            column = getattr(node, "col_offset", 0) + 1
        return Location(path=self._path, line=line, column=column)

    def _name_column(self, node: ast.AST) -> int:
        col_offset = getattr(node, "col_offset", 0)
        lineno = getattr(node, "lineno", 1)
        if 0 < lineno <= len(self._lines):
            match = _DEF_KEYWORD.match(self._lines[lineno - 1], col_offset)
            if match:
                return match.end() + 1
        return col_offset + 1

    def _add_name(self, name: Optional[str], location: Location, symbol_kind: str) -> None:
        if name:
            self.units.append(ScanUnit(kind=UnitKind.NAME, text=name, location=location, symbol_kind=symbol_kind))

    def _add_docstring(self, node: Union[ast.Module, ast.ClassDef, FunctionNode]) -> None:
        body = node.body
        if not body or not isinstance(body[0], ast.Expr):
            return
        value = body[0].value
        if isinstance(value, ast.Constant) and isinstance(value.value, str) and value.value.strip():
            self.units.append(
                ScanUnit(kind=UnitKind.DOC, text=value.value, location=self._location(value), symbol_kind="docstring")
            )

    def _add_field(self, name: str, node: ast.AST, scope: _Scope) -> None:
        if name in scope.seen:
            return
        scope.seen.add(name)
        symbol_kind = "field" if scope.kind == "class" else "variable"
        self._add_name(name, self._location(node), symbol_kind)

    # ------------------------------------------------------------------
    # Visitors
    # ------------------------------------------------------------------
    def collect(self, tree: ast.Module, namespace: str) -> List[ScanUnit]:
        self._add_name(namespace, Location(path=self._path, line=1, column=1), "module")
        self._add_docstring(tree)
        self._scopes.append(_Scope(kind="module"))
        self.generic_visit(tree)
        self._scopes.pop()
        return self.units

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        self._add_name(node.name, self._location(node, self._name_column(node)), "class")
        self._add_docstring(node)
        self._scopes.append(_Scope(kind="class"))
        self.generic_visit(node)
        self._scopes.pop()

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self._visit_function(node)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:
        self._visit_function(node)

    def _visit_function(self, node: FunctionNode) -> None:
        location = self._location(node, self._name_column(node))
        enclosing = self._scopes[-1] if self._scopes else None
        in_class = enclosing is not None and enclosing.kind == "class"
        role = self._property_role(node) if in_class else None
        if role is None:
            self._add_name(node.name, location, "method" if in_class else "function")
        elif role == "getter":
            self._add_name(node.name, location, "property")
            self._add_name(f"get_{node.name}", location, "accessor")
        else:
            self._add_name(f"{_ACCESSOR_PREFIXES[role]}{node.name}", location, "accessor")
        self._add_docstring(node)

        arguments = node.args
        params = [*arguments.posonlyargs, *arguments.args]
        for arg in [*params, arguments.vararg, *arguments.kwonlyargs, arguments.kwarg]:
            if arg is not None:
                self._add_name(arg.arg, self._location(arg), "parameter")

        scope = _Scope(kind="function")
        if in_class and params and not self._is_staticmethod(node):
            scope.self_name = params[0].arg
            scope.owner = enclosing
        self._scopes.append(scope)
        for statement in node.body:
            self.visit(statement)
        self._scopes.pop()

    def _property_role(self, node: FunctionNode) -> Optional[str]:
        for decorator in node.decorator_list:
            if isinstance(decorator, ast.Name) and decorator.id in _PROPERTY_DECORATORS:
                return "getter"
            if isinstance(decorator, ast.Attribute):
                if decorator.attr in _PROPERTY_DECORATORS:
                    return "getter"
                if (
                    decorator.attr in _ACCESSOR_PREFIXES
                    and isinstance(decorator.value, ast.Name)
                    and decorator.value.id == node.name
                ):
                    return decorator.attr
        return None

    @staticmethod
    def _is_staticmethod(node: FunctionNode) -> bool:
        return any(isinstance(d, ast.Name) and d.id == "staticmethod" for d in node.decorator_list)

    def visit_Assign(self, node: ast.Assign) -> None:
        for target in node.targets:
            self._record_target(target)
        self.generic_visit(node)

    def visit_AnnAssign(self, node: ast.AnnAssign) -> None:
        self._record_target(node.target)
        self.generic_visit(node)

    def _record_target(self, target: ast.AST) -> None:
        if not self._scopes:
            return
        scope = self._scopes[-1]
        if isinstance(target, (ast.Tuple, ast.List)):
            for element in target.elts:
                self._record_target(element)
        elif isinstance(target, ast.Starred):
            self._record_target(target.value)
        elif isinstance(target, ast.Name) and scope.kind in ("module", "class"):
            self._add_field(target.id, target, scope)
        elif (
            isinstance(target, ast.Attribute)
            and scope.kind == "function"
            and scope.owner is not None
            and isinstance(target.value, ast.Name)
            and target.value.id == scope.self_name
        ):
            self._add_field(target.attr, target, scope.owner)


def iter_source_units(source: str, path: str = "<string>", namespace: Optional[str] = None) -> List[ScanUnit]:
    """Parse ``source`` and return its units in declaration order.

    Raises :class:`SyntaxError` when the source does not parse.
    """

    tree = ast.parse(source, filename=path)
    if namespace is None:
        namespace = "" if path.startswith("<") else module_name(Path(path))
    return _UnitCollector(path, source.splitlines()).collect(tree, namespace)
