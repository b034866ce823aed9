from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.expression import Apply, Expression, Word
from egg.types.function import Function
from egg.types.scope import Scope


def fun_form(
    args: list[Expression],
    scope: Scope,
    node: Apply,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    # fun(p1, p2, ..., body): every argument but the last names a parameter.
    if not args:
        raise EggSyntaxError("Functions need a body", node.line, node.column)

    *params, body = args
    names: list[str] = []
    for param in params:
        if not isinstance(param, Word):
            raise EggSyntaxError("Parameter names must be words", param.line, param.column)
        names.append(param.name)

    return Function(names, body, scope, evaluate_fn)
