"""Argument kinds recognised by flagscan."""

from enum import Enum


class FlagKind(Enum):
    """Classification of a single command-line argument."""

    SHORT = "short"
    LONG = "long"
    POSITIONAL = "positional"

    @property
    def is_flag(self) -> bool:
        return self is not FlagKind.POSITIONAL

    @classmethod
    def of(cls, word: str) -> "FlagKind":
        """Classify a single argument by its leading dashes."""
        if word.startswith("--"):
            return cls.LONG
        if word.startswith("-"):
            return cls.SHORT
        return cls.POSITIONAL
