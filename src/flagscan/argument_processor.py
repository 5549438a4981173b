"""Argument tokenizing functionality for flagscan."""

from typing import Iterable, Optional

from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import ArgumentTypeError
from .flag_collection import FlagCollection
from .flag_kind import FlagKind
from .parsed_flag import ParsedFlag
from .types import ArgsList, ParseStep


class ArgumentProcessor:
    """Handles classification and tokenizing of raw arguments."""

    @staticmethod
    def classify(word: str) -> FlagKind:
        """Classify a single argument by its leading dashes."""
        return FlagKind.of(word)

    @staticmethod
    def parse_flags(args: Optional[Iterable[str]] = None) -> FlagCollection:
        """
        Tokenize arguments into an ordered :class:`FlagCollection`.

        * Flags (``-x`` / ``--xyz``) become tokens named after the argument.
          When the next argument is positional it is attached as the flag's
          value and consumed; it is not emitted again.
        * Any other argument becomes a positional token carrying its text.

        When *args* is omitted the process arguments (``sys.argv[1:]``) are
        used.
        """
        if args is None:
            args = EnvironmentHelper.get_process_args()
        args = ArgumentProcessor._validate_args(args)
        debug_log(f"parse_flags: scanning {len(args)} argument(s)")

        tokens: list[ParsedFlag] = []
        i = 0
        while i < len(args):
            arg = args[i]
            kind = ArgumentProcessor.classify(arg)

            # Standalone argument
            if kind is FlagKind.POSITIONAL:
                token = ParsedFlag.positional(arg)
                i += 1
            else:
                i, name, value = ArgumentProcessor._parse_flag(args, i)
                token = ParsedFlag.flag(name, kind, value)

            debug_log(f"parse_flags: {token.to_record()}")
            tokens.append(token)

        return FlagCollection(tokens)

    @staticmethod
    def _parse_flag(args: ArgsList, index: int) -> ParseStep:
        """Scan the flag at *index* along with its value, if any."""
        flag = args[index]
        next_index = index + 1
        if next_index < len(args):
            next_arg = args[next_index]
            if ArgumentProcessor.classify(next_arg) is FlagKind.POSITIONAL:
                return next_index + 1, flag, next_arg
        return next_index, flag, None

    @staticmethod
    def _validate_args(args: Iterable[str]) -> ArgsList:
        """Materialize *args* into a list, rejecting anything but strings."""
        checked: ArgsList = []
        for index, arg in enumerate(args):
            if not isinstance(arg, str):
                raise ArgumentTypeError(index, arg)
            checked.append(arg)
        return checked
