"""Permissions loader for nbsandbox.

Loads permission sets from YAML files and environment variables.

File format:
    allow_read:
      - ~/notebooks
    deny_read:
      - ~/notebooks/secrets
    allow_write:
      - ~/notebooks/output
    allow_net: true
    allow_run:
      - python
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from ..exceptions import PermissionsLoadError
from .models import PATH_CATEGORIES, PROGRAM_CATEGORIES, Permissions, PermissionsBuilder

logger = logging.getLogger("nbsandbox.profile")

PERMISSIONS_PATH_ENV = "NBSANDBOX_PERMISSIONS_PATH"

# Default permissions file locations (in order of precedence)
DEFAULT_PERMISSIONS_PATHS = [
    "./nbsandbox.yaml",
    "./config/nbsandbox.yaml",
    "~/.config/nbsandbox/permissions.yaml",
]

KNOWN_KEYS = {*PATH_CATEGORIES, "allow_net", *PROGRAM_CATEGORIES}


def _string_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise PermissionsLoadError(f"'{key}' must be a list of strings")
    return value


def permissions_from_dict(data: dict[str, Any], resolve: bool = False) -> Permissions:
    """Build a permission set from a mapping.

    Categories are applied in a fixed order through PermissionsBuilder, so
    path validation is fail-fast in the order read, write, run.

    Args:
        data: Mapping with any of the permission category keys
        resolve: Resolve symlinks in validated paths

    Returns:
        Permissions instance

    Raises:
        PermissionsLoadError: On unknown keys or wrongly typed values
        PathNotFoundError: If a declared path does not exist
        UnsafeValueError: If a value contains a grammar-breaking character
    """
    unknown = sorted(set(data) - KNOWN_KEYS)
    if unknown:
        raise PermissionsLoadError(f"Unknown permission keys: {', '.join(unknown)}")

    allow_net = data.get("allow_net", False)
    if not isinstance(allow_net, bool):
        raise PermissionsLoadError("'allow_net' must be a boolean")

    builder = PermissionsBuilder(resolve=resolve)
    for category in PATH_CATEGORIES:
        paths = [os.path.expanduser(p) for p in _string_list(data, category)]
        builder = getattr(builder, category)(paths)
    if allow_net:
        builder = builder.allow_net()
    for category in PROGRAM_CATEGORIES:
        builder = getattr(builder, category)(_string_list(data, category))

    return builder.build()


def load_permissions_from_file(path: str | Path, resolve: bool = False) -> Permissions:
    """Load a permission set from a YAML file.

    Args:
        path: Path to the permissions YAML file
        resolve: Resolve symlinks in validated paths

    Returns:
        Permissions instance

    Raises:
        PermissionsLoadError: If the file cannot be loaded or parsed
        PathNotFoundError: If a declared path does not exist
        UnsafeValueError: If a value contains a grammar-breaking character
    """
    path = Path(path).expanduser().resolve()

    if not path.exists():
        raise PermissionsLoadError(f"Permissions file not found: {path}")

    if not path.is_file():
        raise PermissionsLoadError(f"Permissions path is not a file: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise PermissionsLoadError(f"Invalid YAML in permissions file: {e}")
    except IOError as e:
        raise PermissionsLoadError(f"Cannot read permissions file: {e}")

    # An empty file is an empty permission set
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise PermissionsLoadError("Permissions file must contain a YAML mapping")

    permissions = permissions_from_dict(data, resolve=resolve)
    logger.info(f"Loaded permissions from {path}")
    return permissions


def load_permissions_from_env(resolve: bool = False) -> Permissions | None:
    """Load permissions from the path in NBSANDBOX_PERMISSIONS_PATH.

    Returns:
        Permissions if the variable is set and the file loads, None otherwise
    """
    permissions_path = os.environ.get(PERMISSIONS_PATH_ENV)

    if not permissions_path:
        return None

    try:
        return load_permissions_from_file(permissions_path, resolve=resolve)
    except PermissionsLoadError as e:
        logger.warning(f"Failed to load permissions from {PERMISSIONS_PATH_ENV}: {e}")
        return None


def load_permissions(resolve: bool = False) -> Permissions:
    """Load permissions from default locations.

    Precedence:
    1. NBSANDBOX_PERMISSIONS_PATH environment variable
    2. ./nbsandbox.yaml
    3. ./config/nbsandbox.yaml
    4. ~/.config/nbsandbox/permissions.yaml
    5. Empty permission set

    A file that exists but declares a missing or unsafe path raises; only
    unreadable or malformed files are skipped.

    Returns:
        Permissions instance
    """
    permissions = load_permissions_from_env(resolve=resolve)

    if permissions is None:
        for path_str in DEFAULT_PERMISSIONS_PATHS:
            path = Path(path_str).expanduser()
            if not path.exists():
                continue
            try:
                permissions = load_permissions_from_file(path, resolve=resolve)
                break
            except PermissionsLoadError as e:
                logger.debug(f"Skipping permissions path {path_str}: {e}")
                continue

    if permissions is None:
        logger.info("No permissions file found, using empty permissions")
        permissions = Permissions()

    return permissions


def save_permissions_to_file(permissions: Permissions, path: str | Path) -> None:
    """Save a permission set to a YAML file.

    Args:
        permissions: Permission set to save
        path: Path to save the file

    Raises:
        PermissionsLoadError: If the file cannot be written
    """
    path = Path(path).expanduser().resolve()

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        data = permissions.model_dump(mode="json")
        with open(path, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        logger.info(f"Saved permissions to {path}")
    except IOError as e:
        raise PermissionsLoadError(f"Cannot write permissions file: {e}")


__all__ = [
    "DEFAULT_PERMISSIONS_PATHS",
    "PERMISSIONS_PATH_ENV",
    "permissions_from_dict",
    "load_permissions_from_file",
    "load_permissions_from_env",
    "load_permissions",
    "save_permissions_to_file",
]
