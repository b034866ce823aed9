"""
  Egg Reader: recursive-descent parser

- Works directly on a SourceCursor; there is no separate token stream.
- Emits the expression nodes from egg.types.expression:

    - "text"          -> Value(str)   (no escape sequences)
    - 12, 3.5         -> Value(float)
    - any other run   -> Word(name)   (operators such as +, ==, != are words)
    - expr(a, b, ...) -> Apply(expr, (a, b, ...)), chainable: f(1)(2)

- Comments run from '#' to end of line and count as whitespace.
- A program is exactly one expression; sequencing uses the `do` form.
"""

from __future__ import annotations

import re

from egg.errors import EggSyntaxError
from egg.reader.cursor import SourceCursor
from egg.types.expression import Apply, Expression, Value, Word


SPACE_RE = re.compile(r"(?:\s|#[^\n]*)*")
STRING_RE = re.compile(r'"([^"]*)"')
NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")
WORD_RE = re.compile(r'[^\s(),#"]+')


def skip_space(cursor: SourceCursor) -> None:
    """Consume whitespace and comments until the next significant character."""
    while True:
        match = SPACE_RE.match(cursor.source, cursor.pos)
        length = match.end() - match.start()
        if length == 0:
            break
        cursor.advance(length)


def _error(message: str, cursor: SourceCursor) -> EggSyntaxError:
    return EggSyntaxError(message, cursor.line, cursor.column)


def parse_expression(cursor: SourceCursor) -> Expression:
    """Parse one literal or word, then any call suffixes that follow it."""
    skip_space(cursor)
    start = cursor.clone()
    source, pos = cursor.source, cursor.pos

    if match := STRING_RE.match(source, pos):
        expr: Expression = Value(match.group(1), start.line, start.column)
    elif match := NUMBER_RE.match(source, pos):
        expr = Value(float(match.group(0)), start.line, start.column)
    elif match := WORD_RE.match(source, pos):
        expr = Word(match.group(0), start.line, start.column)
    else:
        snippet = cursor.remaining()[:10]
        raise _error(f'Unexpected syntax: "{snippet}..."', cursor)

    cursor.advance(match.end() - match.start())
    return parse_apply(expr, cursor)


def parse_apply(expr: Expression, cursor: SourceCursor) -> Expression:
    """Wrap `expr` in an Apply for each `(...)` argument list that follows."""
    skip_space(cursor)
    if cursor.peek() != "(":
        return expr

    cursor.advance()
    args: list[Expression] = []
    skip_space(cursor)
    if cursor.peek() == ")":
        cursor.advance()
    else:
        while True:
            args.append(parse_expression(cursor))
            skip_space(cursor)
            ch = cursor.peek()
            if ch == ",":
                cursor.advance()
            elif ch == ")":
                cursor.advance()
                break
            else:
                raise _error("Expected ',' or ')'", cursor)

    # The call node starts where its operator starts.
    node = Apply(expr, tuple(args), expr.line, expr.column)
    return parse_apply(node, cursor)


def parse(source: str) -> Expression:
    """Parse a complete program: exactly one expression and nothing after it."""
    cursor = SourceCursor(source)
    expr = parse_expression(cursor)
    skip_space(cursor)
    if not cursor.at_end():
        raise _error("Unexpected text after program", cursor)
    return expr
