"""Exceptions raised when an axial reconstruction is called incorrectly."""

__all__ = [
    "InvalidArgumentError",
    "ArityError",
    "ArgumentTypeError",
    "ShapeError",
]


class InvalidArgumentError(ValueError):
    """Raised when an argument fails validation before any computation."""

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"{argument}: {reason}")


class ArityError(InvalidArgumentError, TypeError):
    """Raised when a required argument is missing."""


class ArgumentTypeError(InvalidArgumentError, TypeError):
    """Raised when an argument is not real-valued numeric data."""


class ShapeError(InvalidArgumentError):
    """Raised when an argument has the wrong rank or number of elements."""
