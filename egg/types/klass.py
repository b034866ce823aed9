"""Classes, instances and bound methods built by the `class` special form.

An instance keeps a reference to its class; method dispatch is an explicit
lookup in the class's method table, and every method receives the instance
as its leading argument.
"""

from __future__ import annotations

from egg import EggValue
from egg.errors import EggReferenceError
from egg.evaluation.apply import apply
from egg.types.scope import Scope


class EggClass:
    """Constructor value: calling it builds and initialises a new Instance."""

    __slots__ = ("name", "constructor", "methods")

    def __init__(self, name: str, constructor: EggValue, methods: dict[str, EggValue]):
        self.name = name
        self.constructor = constructor
        self.methods: dict[str, EggValue] = dict(methods)

    def find_method(self, name: str) -> EggValue | None:
        return self.methods.get(name)

    def __call__(self, scope: Scope | None, args: list[EggValue]) -> Instance:
        instance = Instance(self)
        # The constructor's own result is discarded; the instance is the value.
        apply(self.constructor, [instance, *args], scope)
        return instance

    def __repr__(self) -> str:
        return f"<class {self.name}>"


class Instance:
    """A record of fields linked to the method table of its class."""

    __slots__ = ("klass", "fields")

    def __init__(self, klass: EggClass):
        self.klass = klass
        self.fields: dict[str, EggValue] = {}

    def has(self, name: str) -> bool:
        return name in self.fields or self.klass.find_method(name) is not None

    def get(self, name: str) -> EggValue:
        """Own field first, then a method bound to this instance."""
        if name in self.fields:
            return self.fields[name]
        method = self.klass.find_method(name)
        if method is not None:
            return BoundMethod(self, name, method)
        raise EggReferenceError(f"Undefined field: {name} on {self.klass.name}")

    def set(self, name: str, value: EggValue) -> EggValue:
        self.fields[name] = value
        return value

    def invoke(self, name: str, args: list[EggValue], scope: Scope | None = None) -> EggValue:
        method = self.klass.find_method(name)
        if method is None:
            raise EggReferenceError(f"Undefined method: {name} on {self.klass.name}")
        return apply(method, [self, *args], scope)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}: {v!r}" for k, v in self.fields.items())
        return f"<{self.klass.name} {{{inner}}}>"


class BoundMethod:
    """A method paired with its receiver."""

    __slots__ = ("receiver", "name", "function")

    def __init__(self, receiver: Instance, name: str, function: EggValue):
        self.receiver = receiver
        self.name = name
        self.function = function

    def __call__(self, scope: Scope | None, args: list[EggValue]) -> EggValue:
        return apply(self.function, [self.receiver, *args], scope)

    def __repr__(self) -> str:
        return f"<method {self.receiver.klass.name}.{self.name}>"
