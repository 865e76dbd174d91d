"""Sandbox profile assembly and minification."""

from __future__ import annotations

import logging

from .models import Permissions
from .rules import (
    FILE_READ,
    FILE_WRITE,
    generate_file_permissions,
    generate_network_permissions,
    generate_run_permissions,
)

logger = logging.getLogger("nbsandbox.profile")

COMMENT_DELIMITER = ";"


def generate_profile(template: str, permissions: Permissions) -> str:
    """Generate a sandbox profile from a template and a permission set.

    Rules are appended to the template in a fixed order: file reads, file
    writes, network, process execution. The template is not validated; it
    should leave the profile in a state (typically ``(deny default)``) that
    the appended rules can refine.

    Args:
        template: Baseline profile text
        permissions: Validated permission set

    Returns:
        The complete profile text
    """
    if permissions.is_empty():
        logger.debug("No permissions declared, returning template unchanged")
        return template

    rules = "".join(
        [
            generate_file_permissions(FILE_READ, permissions.allow_read, permissions.deny_read),
            generate_file_permissions(FILE_WRITE, permissions.allow_write, permissions.deny_write),
            generate_network_permissions(permissions.allow_net),
            generate_run_permissions(permissions.allow_run, permissions.deny_run),
        ]
    )

    logger.debug(f"Appending {len(rules)} bytes of rules to a {len(template)} byte template")
    return template + rules


def minify_profile(profile: str) -> str:
    """Collapse a profile onto a single line.

    Comments (from ``;`` to end of line) and blank lines are dropped, and the
    remaining lines are stripped and joined with single spaces. This is a
    purely textual transform that does not understand quoted strings.

    Args:
        profile: Profile text

    Returns:
        Single-line profile with no newline characters
    """
    lines = []
    # Only "\n" ends a line; other line-break characters can be part of a path
    for line in profile.split("\n"):
        line = line.split(COMMENT_DELIMITER, 1)[0].strip()
        if line:
            lines.append(line)
    return " ".join(lines)


__all__ = [
    "COMMENT_DELIMITER",
    "generate_profile",
    "minify_profile",
]
