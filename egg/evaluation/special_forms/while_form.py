from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.expression import Apply, Expression
from egg.types.scope import Scope


def while_form(
    args: list[Expression],
    scope: Scope,
    node: Apply,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    while(cond, body)
    Re-tests cond before every pass over body. There is no "no value" in Egg,
    so the loop itself always produces false.
    """
    if len(args) != 2:
        raise EggSyntaxError("Wrong number of args to while", node.line, node.column)

    cond, body = args
    while evaluate_fn(cond, scope) is not False:
        evaluate_fn(body, scope)
    return False
