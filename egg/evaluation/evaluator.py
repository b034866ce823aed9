"""Core evaluator for the Egg interpreter.

Dispatches on the three expression kinds. Applications whose operator is a
word naming a special form are handed to that form un-evaluated, together
with the evaluator's own `evaluate` so the form can evaluate the pieces it
chooses; every other application evaluates the operator and then the
arguments left to right before calling.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional

from egg import EggValue
from egg.errors import EggError, EggTypeError
from egg.evaluation.apply import apply
from egg.evaluation.special_forms import SPECIAL_FORMS
from egg.types.expression import Apply, Expression, Value, Word
from egg.types.scope import Scope


class Evaluator:
    """Tree-walking evaluator owning its special-form registry."""

    def __init__(self, special_forms: Optional[Mapping[str, Callable]] = None):
        forms = SPECIAL_FORMS if special_forms is None else special_forms
        self.special_forms: dict[str, Callable] = dict(forms)

    def is_special_form(self, name: str) -> bool:
        return name in self.special_forms

    def evaluate(self, expr: Expression, scope: Scope) -> EggValue:
        try:
            return self._dispatch(expr, scope)
        except EggError as err:
            # Innermost node wins: positions already attached are kept.
            err.locate(getattr(expr, "line", None), getattr(expr, "column", None))
            raise

    def _dispatch(self, expr: Expression, scope: Scope) -> EggValue:
        match expr:
            case Value():
                return expr.value

            case Word():
                return scope.lookup(expr.name, expr)

            case Apply(operator=Word(name=name)) if name in self.special_forms:
                return self.special_forms[name](list(expr.args), scope, expr, self.evaluate)

            case Apply():
                head = self.evaluate(expr.operator, scope)
                if not callable(head):
                    raise EggTypeError("Applying a non-function", expr.line, expr.column)
                args = [self.evaluate(arg, scope) for arg in expr.args]
                return apply(head, args, scope, expr)

        raise EggTypeError(f"Unknown expression type: {type(expr).__name__}")


_default_evaluator = Evaluator()


def evaluate(expr: Expression, scope: Scope) -> EggValue:
    """Evaluate `expr` in `scope` with the default special-form registry."""
    return _default_evaluator.evaluate(expr, scope)
