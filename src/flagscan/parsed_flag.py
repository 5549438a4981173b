"""Parsed argument token for flagscan."""

from typing import NamedTuple, Optional

from .flag_kind import FlagKind
from .types import FlagName, FlagRecord, FlagValue


class ParsedFlag(NamedTuple):
    """
    A single classified command-line argument.

    Flags carry their literal text in ``name`` (dashes included) and the
    argument consumed after them, if any, in ``value``. Positional arguments
    have no ``name`` and keep their own text in ``value``.
    """

    name: Optional[FlagName]
    kind: FlagKind
    value: FlagValue = None

    @classmethod
    def flag(
        cls, name: FlagName, kind: FlagKind, value: FlagValue = None
    ) -> "ParsedFlag":
        """Build a short or long flag token."""
        if not kind.is_flag:
            raise ValueError(f"{kind!r} is not a flag kind")
        if not isinstance(name, str):
            raise ValueError(f"Flag name must be str, got {name!r}")
        if FlagKind.of(name) is not kind:
            raise ValueError(f"{name!r} does not classify as {kind!r}")
        if value is not None and not isinstance(value, str):
            raise ValueError(f"Flag value must be str or None, got {value!r}")
        return cls(name, kind, value)

    @classmethod
    def positional(cls, text: str) -> "ParsedFlag":
        """Build a standalone positional token."""
        if not isinstance(text, str):
            raise ValueError(f"Positional text must be str, got {text!r}")
        return cls(None, FlagKind.POSITIONAL, text)

    @property
    def is_short(self) -> bool:
        return self.kind is FlagKind.SHORT

    @property
    def is_long(self) -> bool:
        return self.kind is FlagKind.LONG

    @property
    def is_positional(self) -> bool:
        return self.kind is FlagKind.POSITIONAL

    @property
    def has_value(self) -> bool:
        return self.value is not None

    def to_record(self) -> FlagRecord:
        """Return the token as a plain ``(name, kind, value)`` tuple."""
        return self.name, self.kind.value, self.value
