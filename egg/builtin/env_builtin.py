"""Built-in functions for the Egg top scope.

This module defines the boolean constants, arithmetic, comparison and
logical operators, print/type, numeric helpers and the class helpers, and
provides `register`, which installs these together with the sequence and
string libraries into a scope.
"""
from __future__ import annotations

import math
import random as _random

from egg import EggValue
from egg.builtin import sequence_builtin, string_builtin
from egg.builtin.utilities import (
    expect_arity,
    is_equal,
    number,
    string,
    type_mismatch_error,
    type_name,
)
from egg.debug_utils.pprint import show
from egg.errors import EggTypeError
from egg.types.klass import Instance
from egg.types.scope import Scope


# -------------------------------
# Arithmetic
# -------------------------------
def add(scope: Scope, args: list[EggValue]) -> EggValue:
    """Sum of two numbers; concatenation when either operand is a string."""
    expect_arity("+", args, 2)
    a, b = args
    if isinstance(a, str) or isinstance(b, str):
        return show(a) + show(b)
    return number("+", a) + number("+", b)


def sub(scope: Scope, args: list[EggValue]) -> float:
    expect_arity("-", args, 2)
    return number("-", args[0]) - number("-", args[1])


def mul(scope: Scope, args: list[EggValue]) -> float:
    expect_arity("*", args, 2)
    return number("*", args[0]) * number("*", args[1])


def div(scope: Scope, args: list[EggValue]) -> float:
    """IEEE division: x/0 is +-Infinity, 0/0 is NaN."""
    expect_arity("/", args, 2)
    a, b = number("/", args[0]), number("/", args[1])
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


# -------------------------------
# Comparison
# -------------------------------
def equals(scope: Scope, args: list[EggValue]) -> bool:
    expect_arity("==", args, 2)
    return is_equal(args[0], args[1])


def not_equals(scope: Scope, args: list[EggValue]) -> bool:
    expect_arity("!=", args, 2)
    return not is_equal(args[0], args[1])


def _ordered(name: str, args: list[EggValue]) -> tuple:
    expect_arity(name, args, 2)
    a, b = args
    if isinstance(a, str) and isinstance(b, str):
        return a, b
    return number(name, a), number(name, b)


def lt(scope: Scope, args: list[EggValue]) -> bool:
    a, b = _ordered("<", args)
    return a < b


def gt(scope: Scope, args: list[EggValue]) -> bool:
    a, b = _ordered(">", args)
    return a > b


def lte(scope: Scope, args: list[EggValue]) -> bool:
    a, b = _ordered("<=", args)
    return a <= b


def gte(scope: Scope, args: list[EggValue]) -> bool:
    a, b = _ordered(">=", args)
    return a >= b


# -------------------------------
# Logic: only the boolean false is falsy
# -------------------------------
def logical_and(scope: Scope, args: list[EggValue]) -> EggValue:
    expect_arity("&&", args, 2)
    a, b = args
    return a if a is False else b


def logical_or(scope: Scope, args: list[EggValue]) -> EggValue:
    expect_arity("||", args, 2)
    a, b = args
    return b if a is False else a


def logical_not(scope: Scope, args: list[EggValue]) -> bool:
    expect_arity("!", args, 1)
    return args[0] is False


# -------------------------------
# I/O and reflection
# -------------------------------
def print_builtin(scope: Scope, args: list[EggValue]) -> EggValue:
    """Display the single argument and return it unchanged."""
    expect_arity("print", args, 1)
    print(show(args[0]))
    return args[0]


def type_builtin(scope: Scope, args: list[EggValue]) -> str:
    expect_arity("type", args, 1)
    return type_name(args[0])


# -------------------------------
# Numeric helpers
# -------------------------------
def _unary(name: str, fn):
    def builtin(scope: Scope, args: list[EggValue]) -> float:
        expect_arity(name, args, 1)
        return float(fn(number(name, args[0])))

    builtin.__name__ = name
    return builtin


def _round_half_up(x: float) -> float:
    if math.isnan(x) or math.isinf(x):
        return x
    r = math.floor(x)
    return r + 1 if x - r >= 0.5 else r


def _safe(fn):
    # floor/ceil raise on non-finite input; Infinity and NaN pass through.
    return lambda x: x if math.isnan(x) or math.isinf(x) else fn(x)


abs_builtin = _unary("abs", abs)
floor_builtin = _unary("floor", _safe(math.floor))
ceil_builtin = _unary("ceil", _safe(math.ceil))
round_builtin = _unary("round", _round_half_up)


def min_builtin(scope: Scope, args: list[EggValue]) -> float:
    return min((number("min", a) for a in args), default=math.inf)


def max_builtin(scope: Scope, args: list[EggValue]) -> float:
    return max((number("max", a) for a in args), default=-math.inf)


def random_builtin(scope: Scope, args: list[EggValue]) -> float:
    expect_arity("random", args, 0)
    return _random.random()


# -------------------------------
# Class helpers
# -------------------------------
def _instance(name: str, value: EggValue) -> Instance:
    if not isinstance(value, Instance):
        raise type_mismatch_error(name, "an object", value)
    return value


def get_field(scope: Scope, args: list[EggValue]) -> EggValue:
    """(getField obj name): own field, else a method bound to obj."""
    expect_arity("getField", args, 2)
    return _instance("getField", args[0]).get(string("getField", args[1]))


def set_field(scope: Scope, args: list[EggValue]) -> EggValue:
    expect_arity("setField", args, 3)
    obj = _instance("setField", args[0])
    return obj.set(string("setField", args[1]), args[2])


def has_field(scope: Scope, args: list[EggValue]) -> bool:
    expect_arity("hasField", args, 2)
    return _instance("hasField", args[0]).has(string("hasField", args[1]))


def invoke(scope: Scope, args: list[EggValue]) -> EggValue:
    """(invoke obj name args...): call a method with obj as its receiver."""
    if len(args) < 2:
        raise EggTypeError("invoke() requires an object and a method name")
    obj = _instance("invoke", args[0])
    return obj.invoke(string("invoke", args[1]), list(args[2:]), scope)


def register(scope: Scope) -> None:
    """Register all builtin functions and constants into the given scope."""
    scope.define("true", True)
    scope.define("false", False)
    scope.update(
        {
            "+": add,
            "-": sub,
            "*": mul,
            "/": div,
            "==": equals,
            "!=": not_equals,
            "<": lt,
            ">": gt,
            "<=": lte,
            ">=": gte,
            "&&": logical_and,
            "||": logical_or,
            "!": logical_not,
            "print": print_builtin,
            "type": type_builtin,
            "abs": abs_builtin,
            "min": min_builtin,
            "max": max_builtin,
            "floor": floor_builtin,
            "ceil": ceil_builtin,
            "round": round_builtin,
            "random": random_builtin,
            "getField": get_field,
            "setField": set_field,
            "hasField": has_field,
            "invoke": invoke,
        }
    )
    scope.update(sequence_builtin.BUILTINS)
    scope.update(string_builtin.BUILTINS)
