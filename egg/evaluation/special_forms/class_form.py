"""The `class` special form.

    class(Name, constructor, method("name", fun(self, ...)), ...)

`constructor` is evaluated to a callable that receives the new instance
followed by the construction arguments. Each trailing clause must be a
literal `method(...)` application; `method` is not a binding of its own and
is only recognised here. The resulting class is bound under `Name` in the
current scope and also returned.
"""

from __future__ import annotations

from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError, EggTypeError
from egg.evaluation.apply import is_callable
from egg.types.expression import Apply, Expression, Word
from egg.types.klass import EggClass
from egg.types.scope import Scope


def _method_clause(
    clause: Expression, scope: Scope, evaluate_fn: EvaluatorFn
) -> tuple[str, EggValue]:
    if not (
        isinstance(clause, Apply)
        and isinstance(clause.operator, Word)
        and clause.operator.name == "method"
        and len(clause.args) == 2
    ):
        raise EggSyntaxError(
            "Class members must be method(name, function)", clause.line, clause.column
        )
    name_expr, fn_expr = clause.args
    name = evaluate_fn(name_expr, scope)
    if not isinstance(name, str):
        raise EggTypeError("Method name must be a string", name_expr.line, name_expr.column)
    fn = evaluate_fn(fn_expr, scope)
    if not is_callable(fn):
        raise EggTypeError(f"Method {name} must be a function", fn_expr.line, fn_expr.column)
    return name, fn


def class_form(
    args: list[Expression],
    scope: Scope,
    node: Apply,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    if len(args) < 2 or not isinstance(args[0], Word):
        raise EggSyntaxError("Incorrect use of class", node.line, node.column)

    name_word, ctor_expr, *clauses = args
    constructor = evaluate_fn(ctor_expr, scope)
    if not is_callable(constructor):
        raise EggTypeError(
            f"Constructor of {name_word.name} must be a function",
            ctor_expr.line,
            ctor_expr.column,
        )

    methods: dict[str, EggValue] = {}
    for clause in clauses:
        method_name, fn = _method_clause(clause, scope, evaluate_fn)
        methods[method_name] = fn

    klass = EggClass(name_word.name, constructor, methods)
    scope.define(name_word.name, klass)
    return klass
