"""Argument checking shared by the built-in modules.

Built-ins receive `(scope, args)` with already-evaluated values; these
helpers validate counts and types and raise the matching Egg error.
"""

from __future__ import annotations

from egg import EggValue
from egg.errors import EggArityError, EggRangeError, EggTypeError
from egg.types.klass import EggClass, Instance


def type_name(value: EggValue) -> str:
    """Egg-level name of a value's type, as reported by the `type` built-in."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, EggClass):
        return "class"
    if isinstance(value, Instance):
        return "object"
    if callable(value):
        return "function"
    return "object"


def expect_arity(name: str, args: list[EggValue], count: int) -> None:
    if len(args) != count:
        raise EggArityError(f"{name} expects {count} arguments, got {len(args)}")


def expect_arity_range(name: str, args: list[EggValue], low: int, high: int) -> None:
    if not low <= len(args) <= high:
        raise EggArityError(
            f"{name} expects {low} to {high} arguments, got {len(args)}"
        )


def type_mismatch_error(name: str, expected: str, got: EggValue) -> EggTypeError:
    return EggTypeError(f"{name}() requires {expected}, got {type_name(got)}")


def number(name: str, value: EggValue) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise type_mismatch_error(name, "a number", value)
    return float(value)


def integer(name: str, value: EggValue) -> int:
    x = number(name, value)
    if not x.is_integer():
        raise EggRangeError(f"{name}() requires an integer, got {x}")
    return int(x)


def string(name: str, value: EggValue) -> str:
    if not isinstance(value, str):
        raise type_mismatch_error(name, "a string", value)
    return value


def array(name: str, value: EggValue) -> list:
    if not isinstance(value, list):
        raise type_mismatch_error(name, "an array", value)
    return value


def function(name: str, value: EggValue) -> EggValue:
    if isinstance(value, (bool, int, float, str, list)) or not callable(value):
        raise type_mismatch_error(name, "a function", value)
    return value


def is_equal(a: EggValue, b: EggValue) -> bool:
    """Structural equality without bool/number coercion."""
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if type(a) != type(b):
        return False
    return a == b
