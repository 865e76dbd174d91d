"""Exceptions for nbsandbox profile generation."""


class NbSandboxError(Exception):
    """Base exception for all nbsandbox errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PathNotFoundError(NbSandboxError, FileNotFoundError):
    """Raised when a declared read/write path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path does not exist: {path}")


class UnsafeValueError(NbSandboxError, ValueError):
    """Raised when a path or program identifier would break the profile grammar.

    Paths and program names are emitted inside double-quoted SBPL strings,
    and the minifier treats ``;`` as a comment start, so values carrying
    quotes, backslashes, parentheses, semicolons or line breaks are rejected
    instead of escaped.
    """

    def __init__(self, value: str, character: str):
        self.value = value
        self.character = character
        super().__init__(f"Unsafe character {character!r} in {value!r}")


class PermissionsLoadError(NbSandboxError):
    """Error loading or saving a permissions file."""


class TemplateLoadError(NbSandboxError):
    """Error loading a profile template."""


__all__ = [
    "NbSandboxError",
    "PathNotFoundError",
    "UnsafeValueError",
    "PermissionsLoadError",
    "TemplateLoadError",
]
