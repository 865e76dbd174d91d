"""CLI commands for sandbox profile generation.

Provides commands for:
- Generating a profile from a permissions file and command-line overrides
- Minifying an existing profile
- Printing the embedded default template
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..config.settings import get_settings
from ..profile import (
    DEFAULT_SANDBOX_PROFILE,
    Permissions,
    PermissionsBuilder,
    generate_profile,
    load_permissions,
    load_permissions_from_file,
    load_template,
    minify_profile,
)

logger = logging.getLogger("nbsandbox.cli")


def _write_output(text: str, output: str | None) -> None:
    """Write text to a file, or to stdout when no file is given."""
    if output is None:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")
        return
    path = Path(output).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info(f"Wrote profile to {path}")


def build_permissions(
    permissions_path: str | None = None,
    resolve: bool = False,
    allow_read: list[str] | None = None,
    deny_read: list[str] | None = None,
    allow_write: list[str] | None = None,
    deny_write: list[str] | None = None,
    allow_net: bool = False,
    allow_run: list[str] | None = None,
    deny_run: list[str] | None = None,
) -> Permissions:
    """Build the permission set for a generate command.

    The base set comes from ``permissions_path`` if given, otherwise from the
    configured or default permission file locations. Each category passed on
    the command line replaces that category of the base set.
    """
    if permissions_path is not None:
        base = load_permissions_from_file(permissions_path, resolve=resolve)
    else:
        settings = get_settings()
        if settings.permissions_path is not None:
            base = load_permissions_from_file(settings.permissions_path, resolve=resolve)
        else:
            base = load_permissions(resolve=resolve)

    builder = PermissionsBuilder.from_permissions(base, resolve=resolve)
    if allow_read is not None:
        builder = builder.allow_read(allow_read)
    if deny_read is not None:
        builder = builder.deny_read(deny_read)
    if allow_write is not None:
        builder = builder.allow_write(allow_write)
    if deny_write is not None:
        builder = builder.deny_write(deny_write)
    if allow_net:
        builder = builder.allow_net()
    if allow_run is not None:
        builder = builder.allow_run(allow_run)
    if deny_run is not None:
        builder = builder.deny_run(deny_run)

    return builder.build()


def cmd_generate(
    permissions_path: str | None = None,
    template_path: str | None = None,
    minify: bool | None = None,
    resolve: bool | None = None,
    output: str | None = None,
    allow_read: list[str] | None = None,
    deny_read: list[str] | None = None,
    allow_write: list[str] | None = None,
    deny_write: list[str] | None = None,
    allow_net: bool = False,
    allow_run: list[str] | None = None,
    deny_run: list[str] | None = None,
) -> int:
    """Generate a sandbox profile.

    Options left as None fall back to settings.

    Returns:
        Exit code
    """
    settings = get_settings()
    if template_path is None and settings.template_path is not None:
        template_path = str(settings.template_path)
    if minify is None:
        minify = settings.minify
    if resolve is None:
        resolve = settings.resolve_paths

    permissions = build_permissions(
        permissions_path=permissions_path,
        resolve=resolve,
        allow_read=allow_read,
        deny_read=deny_read,
        allow_write=allow_write,
        deny_write=deny_write,
        allow_net=allow_net,
        allow_run=allow_run,
        deny_run=deny_run,
    )
    template = load_template(template_path)

    profile = generate_profile(template, permissions)
    if minify:
        profile = minify_profile(profile)

    _write_output(profile, output)
    return 0


def cmd_minify(input_path: str | None = None, output: str | None = None) -> int:
    """Minify a profile read from a file, or from stdin.

    Returns:
        Exit code
    """
    if input_path is None:
        profile = sys.stdin.read()
    else:
        profile = load_template(input_path)

    _write_output(minify_profile(profile), output)
    return 0


def cmd_template(output: str | None = None) -> int:
    """Print the embedded default profile template.

    Returns:
        Exit code
    """
    _write_output(DEFAULT_SANDBOX_PROFILE, output)
    return 0
