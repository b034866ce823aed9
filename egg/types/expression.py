"""Expression tree produced by the reader and consumed by the evaluator.

Three node kinds exist: literal values, word references and applications.
Every node remembers where it started in the source so that errors raised
while evaluating it can report a position. Positions are excluded from
equality, so two trees compare equal when their structure matches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class Value:
    """A literal: a number (float) or a string."""

    value: Union[float, str]
    line: Optional[int] = field(default=None, compare=False)
    column: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class Word:
    """A reference to a binding, or the name of a special form."""

    name: str
    line: Optional[int] = field(default=None, compare=False)
    column: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class Apply:
    """operator(args...); the operator is itself any expression."""

    operator: Expression
    args: tuple[Expression, ...] = ()
    line: Optional[int] = field(default=None, compare=False)
    column: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        # Accept lists from callers; the stored sequence is always a tuple.
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))


Expression = Union[Value, Word, Apply]
