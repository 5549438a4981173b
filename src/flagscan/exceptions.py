"""Custom exceptions for flagscan."""


class FlagscanError(Exception):
    """Base exception for flagscan errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ArgumentTypeError(FlagscanError, TypeError):
    """Raised when an argument list contains something other than a string."""

    def __init__(self, index: int, argument: object):
        super().__init__(
            f"Argument at position {index} must be str, "
            f"got {type(argument).__name__}: {argument!r}"
        )
        self.index = index
        self.argument = argument
