from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.expression import Apply, Expression, Word
from egg.types.scope import Scope


def define_form(
    args: list[Expression],
    scope: Scope,
    node: Apply,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    define(name, value)
    Binds in the current scope only, shadowing any outer binding of the same name.
    """
    if len(args) != 2 or not isinstance(args[0], Word):
        raise EggSyntaxError("Incorrect use of define", node.line, node.column)

    name, val_expr = args
    value = evaluate_fn(val_expr, scope)
    scope.define(name.name, value)
    return value
