"""Lexical scope for Egg.

A Scope stores own bindings of names to evaluated values and links to an
optional parent scope. Lookups climb the chain until a scope that owns the
name is found; definitions always write into the scope they are called on.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from egg import EggValue
from egg.errors import EggReferenceError


class Scope:
    """Own-entry map plus an optional parent reference."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[Scope] = None):
        self.vars: dict[str, EggValue] = {}
        self.parent: Scope | None = parent

    def define(self, name: str, value: EggValue) -> None:
        """Create or overwrite an own binding; never climbs."""
        self.vars[name] = value

    def has_own(self, name: str) -> bool:
        return name in self.vars

    def find(self, name: str) -> Optional[Scope]:
        """Find the nearest scope in the chain that owns `name`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return scope
            scope = scope.parent
        return None

    def lookup(self, name: str, node=None) -> EggValue:
        """Return the value of the nearest binding of `name`.

        Raises EggReferenceError, positioned at `node` when given, if no scope
        in the chain owns the name.
        """
        scope = self.find(name)
        if scope is None:
            raise _unbound(name, node)
        return scope.vars[name]

    def assign(self, name: str, value: EggValue, node=None) -> None:
        """Update the nearest existing binding of `name` in place.

        Never creates a binding; raises EggReferenceError if the name is bound
        nowhere in the chain.
        """
        scope = self.find(name)
        if scope is None:
            raise _unbound(name, node)
        scope.vars[name] = value

    def update(self, mapping: dict[str, EggValue]) -> None:
        """Bulk-define a mapping of name -> value in this scope."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def root(self) -> Scope:
        scope = self
        while scope.parent is not None:
            scope = scope.parent
        return scope

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Scope chain: ")
            scope = self
            chain = []
            while scope is not None:
                with StringIO() as frame:
                    scope._write_vars(frame)
                    chain.append(frame.getvalue())
                scope = scope.parent
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()


def _unbound(name: str, node) -> EggReferenceError:
    err = EggReferenceError(f"Undefined binding: {name}")
    if node is not None:
        err.locate(node.line, node.column)
    return err
