from __future__ import annotations


class EggError(Exception):
    """ Base class for all Egg errors"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def locate(self, line: int | None, column: int | None) -> EggError:
        """Attach a source position unless one is already set."""
        if self.line is None and line is not None:
            self.line = line
            self.column = column
        return self

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} at line {self.line}, column {self.column}"


class EggSyntaxError(EggError):
    """ Raised for malformed source text or malformed special form usage"""


class EggReferenceError(EggError):
    """ Raised when a word is used or set before it is bound"""


class EggTypeError(EggError):
    """ Raised when a value of the wrong type is applied or passed"""


class EggArityError(EggTypeError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class EggRangeError(EggError):
    """ Raised when an index or count falls outside the allowed range"""
