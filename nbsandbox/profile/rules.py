"""SBPL rule emission for each permission category.

Deny statements are emitted once per path even when no allow block follows.
SBPL gives the more specific filter precedence, so a denied subpath
overrides a broader allow regardless of textual order.
"""

from __future__ import annotations

from collections.abc import Sequence

FILE_READ = "file-read*"
FILE_WRITE = "file-write*"
PROCESS_EXEC = "process-exec"
NETWORK = "network*"


def generate_file_permissions(
    access_type: str,
    allow_paths: Sequence[str],
    deny_paths: Sequence[str],
) -> str:
    """Generate file permission statements for one access type.

    Args:
        access_type: SBPL operation, e.g. ``file-read*`` or ``file-write*``
        allow_paths: Paths to allow, as subpaths
        deny_paths: Paths to deny, as subpaths

    Returns:
        Profile fragment, empty when both lists are empty
    """
    statement = ""

    for path in deny_paths:
        statement += f'(deny {access_type} (subpath "{path}"))\n'

    if allow_paths:
        statement += f"(allow {access_type})\n"
        for path in allow_paths:
            statement += f'    (subpath "{path}")\n'
        statement += ")\n"

    return statement


def generate_network_permissions(allow_net: bool) -> str:
    """Generate the network statement. There is no deny form."""
    if allow_net:
        return f"(allow {NETWORK})\n"
    return ""


def generate_run_permissions(allow_progs: Sequence[str], deny_progs: Sequence[str]) -> str:
    """Generate process execution statements.

    Programs are matched with ``literal`` filters, not subpaths.
    """
    statement = ""

    for prog in deny_progs:
        statement += f'(deny {PROCESS_EXEC} (literal "{prog}"))\n'

    if allow_progs:
        statement += f"(allow {PROCESS_EXEC}\n"
        for prog in allow_progs:
            statement += f'    (literal "{prog}")\n'
        statement += ")\n"

    return statement


__all__ = [
    "FILE_READ",
    "FILE_WRITE",
    "NETWORK",
    "PROCESS_EXEC",
    "generate_file_permissions",
    "generate_network_permissions",
    "generate_run_permissions",
]
