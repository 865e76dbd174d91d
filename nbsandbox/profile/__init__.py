"""Sandbox profile generation for notebook kernels.

The profile module turns a permission set into a macOS Seatbelt (SBPL)
profile for ``sandbox-exec``. The operating system enforces the profile;
this module only writes it.

Key components:
- Permissions / PermissionsBuilder: Validated allow/deny lists per category
- validate_paths: Existence and grammar-safety checks for declared paths
- generate_profile: Appends rules for all categories to a template
- minify_profile: Collapses a profile onto one line for shell transport
- DEFAULT_SANDBOX_PROFILE: Embedded default-deny baseline template

Usage:
    from nbsandbox.profile import (
        DEFAULT_SANDBOX_PROFILE,
        PermissionsBuilder,
        generate_profile,
        minify_profile,
    )

    permissions = (
        PermissionsBuilder()
        .allow_read(["/Users/me/notebooks"])
        .allow_net()
        .allow_run(["python"])
        .build()
    )
    profile = minify_profile(generate_profile(DEFAULT_SANDBOX_PROFILE, permissions))

Paths are matched as literal subpaths; glob patterns are not expanded.
"""

from .generator import generate_profile, minify_profile
from .loader import (
    load_permissions,
    load_permissions_from_file,
    permissions_from_dict,
    save_permissions_to_file,
)
from .models import Permissions, PermissionsBuilder
from .rules import (
    generate_file_permissions,
    generate_network_permissions,
    generate_run_permissions,
)
from .templates import DEFAULT_SANDBOX_PROFILE, load_template
from .validation import UNSAFE_CHARACTERS, validate_paths, validate_programs

__all__ = [
    # Models
    "Permissions",
    "PermissionsBuilder",
    # Validation
    "UNSAFE_CHARACTERS",
    "validate_paths",
    "validate_programs",
    # Rules
    "generate_file_permissions",
    "generate_network_permissions",
    "generate_run_permissions",
    # Generation
    "generate_profile",
    "minify_profile",
    # Templates
    "DEFAULT_SANDBOX_PROFILE",
    "load_template",
    # Loader
    "permissions_from_dict",
    "load_permissions",
    "load_permissions_from_file",
    "save_permissions_to_file",
]
