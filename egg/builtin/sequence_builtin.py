"""Array built-ins.

Arrays are Python lists and are shared by reference: `push` and `pop`
modify their argument, while `slice`, `map`, `filter`, `sort` and `reverse`
return new arrays. Callbacks are any Egg callable and are invoked through
the application engine, so user functions keep their arity checks.
"""
from __future__ import annotations

import math
from functools import cmp_to_key

from egg import EggValue
from egg.builtin.utilities import (
    array,
    expect_arity,
    expect_arity_range,
    function,
    is_equal,
    number,
    type_mismatch_error,
)
from egg.debug_utils.pprint import show
from egg.errors import EggArityError, EggRangeError, EggTypeError
from egg.evaluation.apply import apply
from egg.types.scope import Scope


def array_builtin(scope: Scope, args: list[EggValue]) -> list[EggValue]:
    return list(args)


def length(scope: Scope, args: list[EggValue]) -> float:
    expect_arity("length", args, 1)
    xs = args[0]
    if not isinstance(xs, (list, str)):
        raise type_mismatch_error("length", "an array or string", xs)
    return float(len(xs))


def element(scope: Scope, args: list[EggValue]) -> EggValue:
    expect_arity("element", args, 2)
    xs = array("element", args[0])
    n = args[1]
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        raise EggRangeError("Array index out of bounds")
    if not float(n).is_integer() or not 0 <= n < len(xs):
        raise EggRangeError("Array index out of bounds")
    return xs[int(n)]


def push(scope: Scope, args: list[EggValue]) -> list[EggValue]:
    if len(args) < 2:
        raise EggArityError(f"push expects an array and at least 1 value, got {len(args)} arguments")
    xs = array("push", args[0])
    xs.extend(args[1:])
    return xs


def pop(scope: Scope, args: list[EggValue]) -> EggValue:
    expect_arity("pop", args, 1)
    xs = array("pop", args[0])
    if not xs:
        raise EggRangeError("pop() from an empty array")
    return xs.pop()


def _sequence(name: str, value: EggValue):
    if not isinstance(value, (list, str)):
        raise type_mismatch_error(name, "an array or string", value)
    return value


def _slice_index(name: str, value: EggValue, size: int) -> int:
    x = number(name, value)
    if math.isnan(x):
        return 0
    return int(max(-size, min(size, x)))


def slice_builtin(scope: Scope, args: list[EggValue]) -> EggValue:
    """(slice seq start end?) with negative indices counting from the end."""
    expect_arity_range("slice", args, 1, 3)
    seq = _sequence("slice", args[0])
    start = _slice_index("slice", args[1], len(seq)) if len(args) > 1 else 0
    end = _slice_index("slice", args[2], len(seq)) if len(args) > 2 else len(seq)
    return seq[start:end]


def join(scope: Scope, args: list[EggValue]) -> str:
    expect_arity_range("join", args, 1, 2)
    xs = array("join", args[0])
    sep = args[1] if len(args) > 1 else ","
    if not isinstance(sep, str):
        raise type_mismatch_error("join", "a string separator", sep)
    return sep.join(show(x) for x in xs)


def map_builtin(scope: Scope, args: list[EggValue]) -> list[EggValue]:
    expect_arity("map", args, 2)
    xs, fn = array("map", args[0]), function("map", args[1])
    return [apply(fn, [x], scope) for x in list(xs)]


def filter_builtin(scope: Scope, args: list[EggValue]) -> list[EggValue]:
    expect_arity("filter", args, 2)
    xs, fn = array("filter", args[0]), function("filter", args[1])
    return [x for x in list(xs) if apply(fn, [x], scope) is not False]


def reduce_builtin(scope: Scope, args: list[EggValue]) -> EggValue:
    """(reduce xs f init?) folds left; without init the first element seeds it."""
    expect_arity_range("reduce", args, 2, 3)
    xs, fn = list(array("reduce", args[0])), function("reduce", args[1])
    if len(args) == 3:
        acc = args[2]
    elif xs:
        acc = xs.pop(0)
    else:
        raise EggTypeError("reduce() of an empty array with no initial value")
    for x in xs:
        acc = apply(fn, [acc, x], scope)
    return acc


def for_each(scope: Scope, args: list[EggValue]) -> bool:
    expect_arity("forEach", args, 2)
    xs, fn = array("forEach", args[0]), function("forEach", args[1])
    for x in list(xs):
        apply(fn, [x], scope)
    return False


def _check_sortable(name: str, xs: list[EggValue]) -> None:
    if all(isinstance(x, str) for x in xs):
        return
    for x in xs:
        number(name, x)


def sort_builtin(scope: Scope, args: list[EggValue]) -> list[EggValue]:
    """(sort xs cmp?) returns a sorted copy.

    Without a comparator all elements must be numbers or all strings. A
    comparator returns a negative number, zero or a positive number.
    """
    expect_arity_range("sort", args, 1, 2)
    xs = list(array("sort", args[0]))
    if len(args) == 1:
        _check_sortable("sort", xs)
        return sorted(xs)
    fn = function("sort", args[1])

    def compare(a, b) -> int:
        result = number("sort", apply(fn, [a, b], scope))
        return (result > 0) - (result < 0)

    return sorted(xs, key=cmp_to_key(compare))


def reverse(scope: Scope, args: list[EggValue]) -> list[EggValue]:
    expect_arity("reverse", args, 1)
    return list(reversed(array("reverse", args[0])))


def includes(scope: Scope, args: list[EggValue]) -> bool:
    expect_arity("includes", args, 2)
    seq, needle = _sequence("includes", args[0]), args[1]
    if isinstance(seq, str):
        return needle in seq if isinstance(needle, str) else False
    return any(is_equal(x, needle) for x in seq)


def find(scope: Scope, args: list[EggValue]) -> EggValue:
    expect_arity("find", args, 2)
    xs, fn = array("find", args[0]), function("find", args[1])
    for x in list(xs):
        if apply(fn, [x], scope) is not False:
            return x
    return False


def index_of(scope: Scope, args: list[EggValue]) -> float:
    expect_arity("indexOf", args, 2)
    seq, needle = _sequence("indexOf", args[0]), args[1]
    if isinstance(seq, str):
        return float(seq.find(needle)) if isinstance(needle, str) else -1.0
    for i, x in enumerate(seq):
        if is_equal(x, needle):
            return float(i)
    return -1.0


BUILTINS = {
    "array": array_builtin,
    "length": length,
    "element": element,
    "push": push,
    "pop": pop,
    "slice": slice_builtin,
    "join": join,
    "map": map_builtin,
    "filter": filter_builtin,
    "reduce": reduce_builtin,
    "forEach": for_each,
    "sort": sort_builtin,
    "reverse": reverse,
    "includes": includes,
    "find": find,
    "indexOf": index_of,
}
