"""Validation of filesystem paths and program identifiers.

Paths are checked for existence when they are declared, not when the
profile is generated. Staleness between the two is accepted.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from ..exceptions import PathNotFoundError, UnsafeValueError

logger = logging.getLogger("nbsandbox.profile")

# Characters that would terminate a quoted SBPL string, open or close a
# form, or start a comment once the profile is minified.
UNSAFE_CHARACTERS = ('"', "\\", ";", "(", ")", "\r", "\n", "\x00")

PathLike = str | bytes | os.PathLike


def check_safe(value: str) -> str:
    """Reject a value containing a grammar-breaking character.

    Args:
        value: Path or program string that will be emitted into a profile

    Returns:
        The value unchanged

    Raises:
        UnsafeValueError: On the first unsafe character found
    """
    for character in UNSAFE_CHARACTERS:
        if character in value:
            raise UnsafeValueError(value, character)
    return value


def validate_paths(paths: Iterable[PathLike], resolve: bool = False) -> list[str]:
    """Validate that every path exists and is safe to emit.

    Validation stops at the first failing path; later paths are not checked.

    Args:
        paths: Candidate filesystem paths, in caller order
        resolve: Return symlink-resolved paths instead of the literal strings

    Returns:
        String form of each path, in the same order

    Raises:
        UnsafeValueError: If a path contains a grammar-breaking character
        PathNotFoundError: If a path does not exist
    """
    validated: list[str] = []
    for path in paths:
        path_str = check_safe(os.fsdecode(path))
        if not os.path.exists(path_str):
            raise PathNotFoundError(path_str)
        if resolve:
            path_str = check_safe(os.path.realpath(path_str))
        validated.append(path_str)

    logger.debug(f"Validated {len(validated)} path(s)")
    return validated


def validate_programs(programs: Iterable[str]) -> list[str]:
    """Validate program identifiers.

    Programs are literal identifiers, not filesystem paths, so only the
    unsafe-character check applies.
    """
    return [check_safe(str(program)) for program in programs]


__all__ = [
    "UNSAFE_CHARACTERS",
    "check_safe",
    "validate_paths",
    "validate_programs",
]
