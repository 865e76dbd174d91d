"""Baseline profile templates.

The embedded default is a fixed resource shipped with the package. It
establishes a default-deny posture that generated rules are appended to.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from ..exceptions import TemplateLoadError

logger = logging.getLogger("nbsandbox.profile")

DEFAULT_TEMPLATE_RESOURCE = "notebook_defaults.sb"


def _read_default_template() -> str:
    return resources.files(__package__).joinpath(DEFAULT_TEMPLATE_RESOURCE).read_text(encoding="utf-8")


DEFAULT_SANDBOX_PROFILE: str = _read_default_template()


def load_template(path: str | Path | None = None) -> str:
    """Load a profile template.

    Args:
        path: Path to a template file, or None for the embedded default

    Returns:
        Template text

    Raises:
        TemplateLoadError: If the file is missing or cannot be read
    """
    if path is None:
        return DEFAULT_SANDBOX_PROFILE

    path = Path(path).expanduser()

    if not path.is_file():
        raise TemplateLoadError(f"Template file not found: {path}")

    try:
        template = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateLoadError(f"Cannot read template file: {e}")

    logger.info(f"Loaded profile template from {path}")
    return template


__all__ = [
    "DEFAULT_SANDBOX_PROFILE",
    "DEFAULT_TEMPLATE_RESOURCE",
    "load_template",
]
