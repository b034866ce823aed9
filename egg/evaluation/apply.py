"""Application engine for Egg.

Every callable value shares one calling convention, `fn(scope, args)`:
host built-ins are plain Python functions with that signature, and the
Function, EggClass and BoundMethod types implement it through __call__.
Keeping the callability check here means the evaluator and built-ins such
as `map` report non-function application identically.
"""

from __future__ import annotations

from egg import EggValue
from egg.errors import EggTypeError


def is_callable(value: EggValue) -> bool:
    # bool/float/str/list are never callable; everything with __call__ is.
    return callable(value)


def apply(head: EggValue, args: list[EggValue], scope=None, node=None) -> EggValue:
    """Invoke `head` with already-evaluated `args`.

    Raises EggTypeError, positioned at `node` when given, if `head` is not
    callable.
    """
    if not is_callable(head):
        err = EggTypeError("Applying a non-function")
        if node is not None:
            err.locate(node.line, node.column)
        raise err
    return head(scope, list(args))
