"""Permission models for sandbox profile generation.

This module defines:
- Permissions: The validated, immutable set of allow/deny lists
- PermissionsBuilder: Accumulates categories one setter at a time
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import NbSandboxError
from .validation import PathLike, validate_paths, validate_programs

logger = logging.getLogger("nbsandbox.profile.models")

PATH_CATEGORIES = ("allow_read", "deny_read", "allow_write", "deny_write")
PROGRAM_CATEGORIES = ("allow_run", "deny_run")


class Permissions(BaseModel):
    """Allowed and denied permissions for a sandboxed process.

    Attributes:
        allow_read: Paths the process may read (subpaths included)
        deny_read: Paths the process may not read
        allow_write: Paths the process may write
        deny_write: Paths the process may not write
        allow_net: Whether network access is allowed
        allow_run: Program identifiers the process may execute
        deny_run: Program identifiers the process may not execute
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    allow_read: tuple[str, ...] = Field(default=(), description="Readable paths")
    deny_read: tuple[str, ...] = Field(default=(), description="Unreadable paths")
    allow_write: tuple[str, ...] = Field(default=(), description="Writable paths")
    deny_write: tuple[str, ...] = Field(default=(), description="Unwritable paths")
    allow_net: bool = Field(default=False, description="Allow network access")
    allow_run: tuple[str, ...] = Field(default=(), description="Executable programs")
    deny_run: tuple[str, ...] = Field(default=(), description="Forbidden programs")

    @field_validator(*PATH_CATEGORIES)
    @classmethod
    def validate_path_category(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate that declared paths exist and are safe to emit."""
        try:
            return tuple(validate_paths(v))
        except NbSandboxError as e:
            raise ValueError(e.message)

    @field_validator(*PROGRAM_CATEGORIES)
    @classmethod
    def validate_program_category(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate that program identifiers are safe to emit."""
        try:
            return tuple(validate_programs(v))
        except NbSandboxError as e:
            raise ValueError(e.message)

    def is_empty(self) -> bool:
        """Check whether no category grants or denies anything."""
        return not any(
            getattr(self, name) for name in (*PATH_CATEGORIES, "allow_net", *PROGRAM_CATEGORIES)
        )


class PermissionsBuilder:
    """Builds a Permissions value one category at a time.

    Builders are immutable: every setter returns a new builder and leaves
    the receiver untouched. Each setter replaces its category rather than
    appending to it, so the last call per category wins. A setter that
    fails validation raises, and the caller keeps the previous builder.

    Example:
        permissions = (
            PermissionsBuilder()
            .allow_read(["/tmp/data"])
            .deny_write(["/tmp/data/raw"])
            .allow_net()
            .allow_run(["python"])
            .build()
        )
    """

    def __init__(self, permissions: Permissions | None = None, resolve: bool = False):
        self._permissions = permissions if permissions is not None else Permissions()
        self.resolve = resolve

    @classmethod
    def from_permissions(cls, permissions: Permissions, resolve: bool = False) -> PermissionsBuilder:
        """Start a builder from an existing permission set."""
        return cls(permissions, resolve=resolve)

    def _replace(self, category: str, value: tuple[str, ...] | bool) -> PermissionsBuilder:
        if isinstance(value, bool):
            logger.debug(f"Setting {category}")
        else:
            logger.debug(f"Setting {category}: {len(value)} entries")
        updated = self._permissions.model_copy(update={category: value})
        return PermissionsBuilder(updated, resolve=self.resolve)

    def _set_paths(self, category: str, paths: Iterable[PathLike]) -> PermissionsBuilder:
        return self._replace(category, tuple(validate_paths(paths, resolve=self.resolve)))

    def allow_read(self, paths: Iterable[PathLike]) -> PermissionsBuilder:
        """Allow read access to the given paths and everything below them.

        Paths are matched literally as subpaths; glob patterns are not
        expanded.

        Raises:
            PathNotFoundError: If a path does not exist
            UnsafeValueError: If a path contains a grammar-breaking character
        """
        return self._set_paths("allow_read", paths)

    def deny_read(self, paths: Iterable[PathLike]) -> PermissionsBuilder:
        """Deny read access to the given paths and everything below them."""
        return self._set_paths("deny_read", paths)

    def allow_write(self, paths: Iterable[PathLike]) -> PermissionsBuilder:
        """Allow write access to the given paths and everything below them."""
        return self._set_paths("allow_write", paths)

    def deny_write(self, paths: Iterable[PathLike]) -> PermissionsBuilder:
        """Deny write access to the given paths and everything below them."""
        return self._set_paths("deny_write", paths)

    def allow_net(self) -> PermissionsBuilder:
        """Allow network access."""
        return self._replace("allow_net", True)

    def allow_run(self, programs: Iterable[str]) -> PermissionsBuilder:
        """Allow execution of the given programs.

        Program identifiers are stored verbatim and matched literally.

        Raises:
            UnsafeValueError: If a program contains a grammar-breaking character
        """
        return self._replace("allow_run", tuple(validate_programs(programs)))

    def deny_run(self, programs: Iterable[str]) -> PermissionsBuilder:
        """Deny execution of the given programs."""
        return self._replace("deny_run", tuple(validate_programs(programs)))

    def build(self) -> Permissions:
        """Return the accumulated permission set."""
        return self._permissions


__all__ = [
    "PATH_CATEGORIES",
    "PROGRAM_CATEGORIES",
    "Permissions",
    "PermissionsBuilder",
]
