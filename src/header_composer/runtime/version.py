"""Version lookup backing ``header-composer --version``."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from pathlib import Path

import tomlkit
from tomlkit.exceptions import ParseError

from header_composer.logging_utils import logger

DISTRIBUTION_NAME = "header-composer"
FALLBACK_VERSION = "0.0.0"


def _pyproject_version(pyproject_path: Path) -> str | None:
    try:
        doc = tomlkit.parse(pyproject_path.read_text(encoding="utf-8"))
    except (OSError, ParseError) as exc:
        logger.warning("Error reading %s: %s", pyproject_path, exc)
        return None
    version = doc.unwrap().get("project", {}).get("version")
    if isinstance(version, str) and version.strip():
        return version.strip()
    return None


def resolve_project_version() -> str:
    """
    Return the installed version, else the one in the nearest pyproject.

    Source checkouts run through ``run_composer.py`` have no distribution
    metadata, so the closest ``pyproject.toml`` above this module is read
    instead. Anything unreadable yields ``FALLBACK_VERSION``.
    """
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        logger.debug("%s is not installed; reading pyproject.toml",
                     DISTRIBUTION_NAME)

    for parent in Path(__file__).resolve().parents:
        pyproject_path = parent / "pyproject.toml"
        if pyproject_path.is_file():
            return _pyproject_version(pyproject_path) or FALLBACK_VERSION
    return FALLBACK_VERSION
