"""String built-ins. Strings are immutable; every operation returns a new value."""
from __future__ import annotations

import math

from egg import EggValue
from egg.builtin.utilities import expect_arity, expect_arity_range, integer, number, string
from egg.debug_utils.pprint import show
from egg.errors import EggRangeError
from egg.types.scope import Scope


def concat(scope: Scope, args: list[EggValue]) -> str:
    return "".join(show(a) for a in args)


def _clamp(x: float, size: int) -> int:
    if math.isnan(x):
        return 0
    return int(max(0, min(size, x)))


def substring(scope: Scope, args: list[EggValue]) -> str:
    """(substring s start end?) clamps both bounds and swaps them if reversed."""
    expect_arity_range("substring", args, 2, 3)
    s = string("substring", args[0])
    start = _clamp(number("substring", args[1]), len(s))
    end = _clamp(number("substring", args[2]), len(s)) if len(args) > 2 else len(s)
    if start > end:
        start, end = end, start
    return s[start:end]


def char_at(scope: Scope, args: list[EggValue]) -> str:
    expect_arity("charAt", args, 2)
    s = string("charAt", args[0])
    i = number("charAt", args[1])
    if not i.is_integer() or not 0 <= i < len(s):
        return ""
    return s[int(i)]


def to_lower_case(scope: Scope, args: list[EggValue]) -> str:
    expect_arity("toLowerCase", args, 1)
    return string("toLowerCase", args[0]).lower()


def to_upper_case(scope: Scope, args: list[EggValue]) -> str:
    expect_arity("toUpperCase", args, 1)
    return string("toUpperCase", args[0]).upper()


def trim(scope: Scope, args: list[EggValue]) -> str:
    expect_arity("trim", args, 1)
    return string("trim", args[0]).strip()


def split(scope: Scope, args: list[EggValue]) -> list[str]:
    expect_arity("split", args, 2)
    s, sep = string("split", args[0]), string("split", args[1])
    if sep == "":
        return list(s)
    return s.split(sep)


def replace(scope: Scope, args: list[EggValue]) -> str:
    """Replace the first occurrence only."""
    expect_arity("replace", args, 3)
    s = string("replace", args[0])
    old, new = string("replace", args[1]), string("replace", args[2])
    return s.replace(old, new, 1)


def starts_with(scope: Scope, args: list[EggValue]) -> bool:
    expect_arity("startsWith", args, 2)
    return string("startsWith", args[0]).startswith(string("startsWith", args[1]))


def ends_with(scope: Scope, args: list[EggValue]) -> bool:
    expect_arity("endsWith", args, 2)
    return string("endsWith", args[0]).endswith(string("endsWith", args[1]))


def repeat(scope: Scope, args: list[EggValue]) -> str:
    expect_arity("repeat", args, 2)
    s = string("repeat", args[0])
    count = integer("repeat", args[1])
    if count < 0:
        raise EggRangeError(f"repeat() count must be non-negative, got {count}")
    return s * count


BUILTINS = {
    "concat": concat,
    "substring": substring,
    "charAt": char_at,
    "toLowerCase": to_lower_case,
    "toUpperCase": to_upper_case,
    "trim": trim,
    "split": split,
    "replace": replace,
    "startsWith": starts_with,
    "endsWith": ends_with,
    "repeat": repeat,
}
