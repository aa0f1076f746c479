"""Custom exceptions for the bigmath package."""

from typing import Any


class MathError(Exception):
    """Base exception for all bigmath errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(MathError):
    """Raised when a divisor of any numeric type is zero."""

    def __init__(self, dividend: Any) -> None:
        super().__init__("Division by zero", dividend)
        self.dividend = dividend


class NegativeResultError(MathError):
    """Raised when an unsigned subtraction or decrement would go below zero."""

    def __init__(self, operation: str, *operands: Any) -> None:
        super().__init__(f"Negative result in unsigned {operation}", operands or None)
        self.operation = operation
        self.operands = operands


class InvalidFormatError(MathError):
    """Raised when a string cannot be parsed in the requested radix."""

    def __init__(self, text: Any, reason: str = "invalid format") -> None:
        super().__init__(reason, repr(text))
        self.text = text
        self.reason = reason


class InvalidInputError(MathError):
    """Raised when input has the wrong type or an unrepresentable value."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class OutOfRangeError(MathError):
    """Raised when a native value is outside a sized constructor's range."""

    def __init__(
        self,
        value: int,
        min_val: int | None = None,
        max_val: int | None = None,
        target: str | None = None,
    ) -> None:
        low = "-inf" if min_val is None else min_val
        high = "inf" if max_val is None else max_val
        where = f"{target} accepts" if target else "Accepted range is"
        super().__init__(f"{where} [{low}, {high}]", value)
        self.min_val = min_val
        self.max_val = max_val
        self.target = target
