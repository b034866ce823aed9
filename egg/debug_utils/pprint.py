import json
import math
from decimal import Decimal
from typing import Optional

from egg import EggValue
from egg.types.expression import Apply, Expression, Value, Word
from egg.types.function import Function
from egg.types.klass import BoundMethod, EggClass, Instance

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_WORD = "\033[94m"
COLOR_NUMBER = "\033[93m"
COLOR_STRING = "\033[92m"
COLOR_BOOLEAN = "\033[95m"
COLOR_CALLABLE = "\033[96m"
COLOR_SPECIAL_FORM = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "max_depth": 12,
    "indent": 2,
    "color_words": False,
    "color_literals": False,
    "color_special_forms": False,
    "color_values": True,
}

SPECIAL_FORMS = {"if", "while", "do", "define", "set", "fun", "class"}


# ----------------- Numbers -----------------
def format_number(x: float) -> str:
    """Display form of a number: integral values drop the fraction."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if float(x).is_integer():
        return str(int(x))
    return repr(float(x))


def _number_literal(x: float) -> str:
    # Positional digits only: the reader has no exponent syntax.
    if float(x).is_integer():
        return str(int(x))
    return format(Decimal(repr(float(x))), "f")


# ----------------- Values -----------------
def show(value: EggValue, nested: bool = False) -> str:
    """Render a runtime value the way print and the REPL display it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return f'"{value}"' if nested else value
    if isinstance(value, list):
        return "[" + ", ".join(show(v, True) for v in value) + "]"
    if isinstance(value, (Function, EggClass, Instance, BoundMethod)):
        return repr(value)
    if callable(value):
        return f"<builtin {getattr(value, '__name__', '?')}>"
    return str(value)


def colorize(value: EggValue, options: dict = DEFAULT_OPTIONS) -> str:
    """show() with an ANSI color per value kind."""
    text = show(value)
    if not options.get("color_values", True):
        return text
    if isinstance(value, bool):
        return f"{COLOR_BOOLEAN}{text}{RESET}"
    if isinstance(value, (int, float)):
        return f"{COLOR_NUMBER}{text}{RESET}"
    if isinstance(value, str):
        return f"{COLOR_STRING}{text}{RESET}"
    if callable(value):
        return f"{COLOR_CALLABLE}{text}{RESET}"
    return text


# ----------------- Expressions -----------------
def unparse(expr: Expression) -> str:
    """Egg source text that parses back to a tree equal to `expr`."""
    match expr:
        case Value(value=str() as s):
            return f'"{s}"'
        case Value(value=number):
            return _number_literal(number)
        case Word(name=name):
            return name
        case Apply(operator=op, args=args):
            return unparse(op) + "(" + ", ".join(unparse(a) for a in args) + ")"
    raise TypeError(f"Not an expression: {expr!r}")


def _leaf(expr: Expression, options: dict) -> str:
    text = unparse(expr)
    if isinstance(expr, Word):
        if expr.name in SPECIAL_FORMS and options.get("color_special_forms", False):
            return f"{COLOR_SPECIAL_FORM}{text}{RESET}"
        if options.get("color_words", False):
            return f"{COLOR_WORD}{text}{RESET}"
    elif options.get("color_literals", False):
        color = COLOR_STRING if isinstance(expr.value, str) else COLOR_NUMBER
        return f"{color}{text}{RESET}"
    return text


# ----------------- Pretty printer -----------------
def pprint_expr(
    expr: Expression,
    indent: int = 0,
    options: Optional[dict] = None,
    _current_depth: int = 0,
) -> str:
    """Format an expression, breaking calls that do not fit across lines."""
    if options is None:
        options = DEFAULT_OPTIONS
    if _current_depth >= options.get("max_depth", 12):
        return "…"
    if not isinstance(expr, Apply):
        return _leaf(expr, options)

    step = " " * options.get("indent", 2)
    op = pprint_expr(expr.operator, indent, options, _current_depth + 1)
    flat = unparse(expr)
    if len(flat) + indent * len(step) <= options.get("max_line_length", 80):
        parts = [pprint_expr(a, indent + 1, options, _current_depth + 1) for a in expr.args]
        return op + "(" + ", ".join(parts) + ")"

    if not expr.args:
        return op + "()"
    pad = step * (indent + 1)
    parts = [
        pad + pprint_expr(a, indent + 1, options, _current_depth + 1) for a in expr.args
    ]
    return op + "(\n" + ",\n".join(parts) + "\n" + step * indent + ")"


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return dict(DEFAULT_OPTIONS)
    if not isinstance(user_opts, dict):
        return dict(DEFAULT_OPTIONS)
    return {**DEFAULT_OPTIONS, **user_opts}
