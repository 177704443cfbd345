"""Helpers for managing output locations and persisted artifacts."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from header_composer.composite.artifacts import artifact_bytes
from header_composer.config_defaults import DEFAULT_FILENAME
from header_composer.constants import FALLBACK_OUTPUT_DIR
from header_composer.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable

    from header_composer.composite.artifacts import (
        ArtifactRegistry,
        CompositeArtifact,
    )


def setup_output_directory(
    output_path: str,
    path_factory: Callable[[str], Path] = Path,
) -> Path:
    """
    Create the output directory if needed and return its resolved path.

    Falls back to ``header_composer_output`` on failure to create the
    desired directory to keep the run from aborting.
    """
    resolved_path = path_factory(output_path)
    try:
        resolved_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Failed to create output directory: %s", exc)
        fallback_path = path_factory(FALLBACK_OUTPUT_DIR)
        fallback_path.mkdir(parents=True, exist_ok=True)
        logger.info("Using fallback directory: %s", fallback_path)
        return fallback_path
    return resolved_path


def header_output_path(
    output_dir: Path,
    filename: str = DEFAULT_FILENAME,
) -> Path:
    """Return where the composite is saved, forcing a .png suffix."""
    name = Path(filename).name.replace(" ", "_")
    path = output_dir / name
    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")
    return path


def save_artifact(
    artifact: CompositeArtifact,
    out_path: Path,
    registry: ArtifactRegistry | None = None,
) -> Path:
    """Write the artifact payload, as a save action would download it."""
    if not isinstance(out_path, Path):
        msg = "out_path must be a pathlib.Path"
        raise TypeError(msg)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(artifact_bytes(artifact, registry))
    return out_path
