from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.expression import Apply, Expression
from egg.types.scope import Scope


def if_form(
    args: list[Expression],
    scope: Scope,
    node: Apply,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    if len(args) != 3:
        raise EggSyntaxError("Wrong number of args to if", node.line, node.column)

    cond = evaluate_fn(args[0], scope)
    # Only the boolean false is falsy; 0 and "" select the then-branch.
    if cond is not False:
        return evaluate_fn(args[1], scope)
    return evaluate_fn(args[2], scope)
