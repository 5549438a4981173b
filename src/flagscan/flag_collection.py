"""Read-only views over parsed arguments for flagscan."""

from typing import Callable, Iterable, Iterator, Tuple

from .environment_helper import debug_log
from .flag_kind import FlagKind
from .parsed_flag import ParsedFlag
from .types import FlagMap, FlagName, FlagNames, FlagRecord, FlagValue

TokenFilter = Callable[[ParsedFlag], bool]

FLAG_KINDS = (FlagKind.SHORT, FlagKind.LONG)


class FlagCollection:
    """
    Ordered, immutable sequence of parsed tokens.

    Every view returns a new list or dictionary built from the stored tokens;
    nothing here changes the sequence after construction. List views keep the
    original order and duplicates, dictionary views keep the last value seen
    for a repeated flag.
    """

    def __init__(self, tokens: Iterable[ParsedFlag] = ()):
        self._tokens = tuple(tokens)

    def __len__(self):
        return len(self._tokens)

    def __iter__(self) -> Iterator[ParsedFlag]:
        return iter(self._tokens)

    def __getitem__(self, index):
        return self._tokens[index]

    def __contains__(self, item):
        """Allow checking for a token, or a flag name, using 'in' operator."""
        if isinstance(item, str):
            return self.has_flag(item)
        return item in self._tokens

    def __eq__(self, other):
        """Allow comparison with another collection or a plain list of tokens."""
        if isinstance(other, FlagCollection):
            return self._tokens == other._tokens
        if isinstance(other, (list, tuple)):
            return self._tokens == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(self._tokens)

    def __repr__(self):
        return f"FlagCollection({list(self._tokens)!r})"

    @property
    def tokens(self) -> Tuple[ParsedFlag, ...]:
        """The underlying tokens, in input order."""
        return self._tokens

    # Positional arguments

    def flagless_args(self) -> list[str]:
        """Values of standalone positional arguments, in order."""
        return [t.value for t in self._tokens if t.kind is FlagKind.POSITIONAL]

    # Boolean flags (no attached value)

    def short_bool_flags(self) -> FlagNames:
        """Short flags without a value, in order."""
        return self._names(lambda t: t.kind is FlagKind.SHORT and not t.has_value)

    def long_bool_flags(self) -> FlagNames:
        """Long flags without a value, in order."""
        return self._names(lambda t: t.kind is FlagKind.LONG and not t.has_value)

    def bool_flags(self) -> FlagNames:
        """Short and long flags without a value, in order."""
        return self._names(lambda t: t.kind in FLAG_KINDS and not t.has_value)

    # Flags with attached values

    def short_flags_with_values(self) -> FlagMap:
        """Map of short flag names to their values."""
        return self._mapping(
            "short_flags_with_values",
            lambda t: t.kind is FlagKind.SHORT and t.has_value,
        )

    def long_flags_with_values(self) -> FlagMap:
        """Map of long flag names to their values."""
        return self._mapping(
            "long_flags_with_values",
            lambda t: t.kind is FlagKind.LONG and t.has_value,
        )

    def flags_with_values(self) -> FlagMap:
        """Map of all flag names to their values."""
        return self._mapping(
            "flags_with_values",
            lambda t: t.kind in FLAG_KINDS and t.has_value,
        )

    # Lookups

    def has_flag(self, name: FlagName) -> bool:
        """Check if a flag was given, with or without a value."""
        return any(t.kind in FLAG_KINDS and t.name == name for t in self._tokens)

    def get_value(self, name: FlagName, default: FlagValue = None) -> FlagValue:
        """Get the last value attached to *name*, or *default*."""
        return self.flags_with_values().get(name, default)

    def to_records(self) -> list[FlagRecord]:
        """Return every token as a ``(name, kind, value)`` tuple."""
        return [t.to_record() for t in self._tokens]

    def _names(self, predicate: TokenFilter) -> FlagNames:
        return [t.name for t in self._tokens if predicate(t)]

    def _mapping(self, view: str, predicate: TokenFilter) -> FlagMap:
        result: FlagMap = {}
        for token in self._tokens:
            if not predicate(token):
                continue
            if token.name in result:
                debug_log(f"{view}: {token.name} repeated, keeping last")
            result[token.name] = token.value
        return result
