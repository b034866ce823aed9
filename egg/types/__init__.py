from egg.types.expression import Expression, Value, Word, Apply
from egg.types.scope import Scope
from egg.types.function import Function
from egg.types.klass import EggClass, Instance, BoundMethod

__all__ = [
    "Expression",
    "Value",
    "Word",
    "Apply",
    "Scope",
    "Function",
    "EggClass",
    "Instance",
    "BoundMethod",
]
