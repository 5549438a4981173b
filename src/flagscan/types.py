"""
Type aliases for flagscan.

This module provides centralized type definitions used throughout the package
to ensure consistency and maintainability.

Type Aliases:
    ArgsList: List of raw string arguments
    FlagName: Literal flag text including its leading dashes
    FlagValue: Optional argument attached to a flag
    FlagNames: Ordered list of flag names
    FlagMap: Dictionary mapping flag names to their values
    ParseStep: Result of scanning a single flag (next index, name, value)
    FlagRecord: Plain tuple view of a parsed token
"""

from typing import Dict, List, Optional, Tuple

ArgsList = List[str]
"""List of string arguments, usually ``sys.argv[1:]``."""

FlagName = str
"""Flag text as given on the command line (e.g. ``'-v'`` or ``'--name'``)."""

FlagValue = Optional[str]
"""Argument consumed after a flag, or ``None`` when nothing was attached."""

FlagNames = List[FlagName]
"""Ordered list of flag names, duplicates retained."""

FlagMap = Dict[FlagName, str]
"""Dictionary mapping flag names to their attached values (last one wins)."""

ParseStep = Tuple[int, FlagName, FlagValue]
"""Result of scanning one flag: (next_index, flag_name, value)."""

FlagRecord = Tuple[Optional[FlagName], str, FlagValue]
"""Tuple view of a token: (name, kind, value)."""
