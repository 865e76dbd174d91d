"""nbsandbox - macOS sandbox profiles for notebook kernels."""

__version__ = "0.1.0"

from .exceptions import (
    NbSandboxError,
    PathNotFoundError,
    PermissionsLoadError,
    TemplateLoadError,
    UnsafeValueError,
)
from .profile import (
    DEFAULT_SANDBOX_PROFILE,
    Permissions,
    PermissionsBuilder,
    generate_profile,
    minify_profile,
)

__all__ = [
    "__version__",
    "DEFAULT_SANDBOX_PROFILE",
    "Permissions",
    "PermissionsBuilder",
    "generate_profile",
    "minify_profile",
    "NbSandboxError",
    "PathNotFoundError",
    "PermissionsLoadError",
    "TemplateLoadError",
    "UnsafeValueError",
]
