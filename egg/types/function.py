"""User-defined function values created by the `fun` special form."""

from __future__ import annotations

from io import StringIO

from egg import EggValue, EvaluatorFn
from egg.errors import EggArityError
from egg.types.expression import Expression
from egg.types.scope import Scope


class Function:
    """A fixed-arity closure over its defining scope."""

    __slots__ = ("params", "body", "scope", "evaluate_fn")

    def __init__(
        self,
        params: list[str],
        body: Expression,
        scope: Scope,
        evaluate_fn: EvaluatorFn,
    ):
        self.params: tuple[str, ...] = tuple(params)
        self.body: Expression = body
        # Lexical scoping: the scope active where `fun` was evaluated.
        self.scope: Scope = scope
        self.evaluate_fn: EvaluatorFn = evaluate_fn

    @property
    def arity(self) -> int:
        return len(self.params)

    def __call__(self, caller_scope: Scope | None, args: list[EggValue]) -> EggValue:
        """Bind `args` to the parameters in a fresh child scope and run the body.

        `caller_scope` is accepted for the shared calling convention and is not
        consulted: free words resolve through the defining scope.
        """
        if len(args) != self.arity:
            raise EggArityError(
                f"Wrong number of arguments: expected {self.arity}, got {len(args)}"
            )
        local = Scope(parent=self.scope)
        for name, value in zip(self.params, args):
            local.define(name, value)
        return self.evaluate_fn(self.body, local)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<fun(")
            buffer.write(", ".join(self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
