# Core type aliases for Egg's data model.
# Runtime values are plain Python objects: float for numbers, str, bool,
# list for arrays, and the callables defined under egg.types.
#
# Naming guidance:
# - Expression nodes live in egg.types.expression (Value, Word, Apply).
# - EggValue: use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
EggValue = Any

# Evaluator function type: the callback special forms use to evaluate sub-expressions
EvaluatorFn = Callable[..., EggValue]
