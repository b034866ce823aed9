from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.expression import Apply, Expression, Word
from egg.types.scope import Scope


def set_form(
    args: list[Expression],
    scope: Scope,
    node: Apply,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    if len(args) != 2 or not isinstance(args[0], Word):
        raise EggSyntaxError("Incorrect use of set", node.line, node.column)
    name, val_expr = args
    value = evaluate_fn(val_expr, scope)
    scope.assign(name.name, value, name)
    return value
