"""Top-level orchestration for building a header from image files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import header_composer.image_io as hc_image_io
import header_composer.runtime as hc_runtime
from header_composer.composite import HeaderRenderer
from header_composer.config import HeaderConfig, resolve_layout_settings
from header_composer.events import EventQueue
from header_composer.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence
    from pathlib import Path


def compose_header(
    paths: Sequence[str | Path],
    config: HeaderConfig,
) -> Path | None:
    """
    Top level header entry point.

    Loads the images, renders them through a :class:`HeaderRenderer`,
    and saves the published artifact. Returns the saved path, or None
    when no input survived loading.
    """
    hc_runtime.validate_input_paths(paths)

    images = hc_image_io.load_images(paths)
    if not images:
        logger.warning("No usable images; nothing to save")
        return None

    settings = resolve_layout_settings(config, images)
    logger.info(
        "Composing %d images (spacing=%g, margin=%g, constrain_height=%s)",
        len(images),
        settings.spacing,
        settings.margin,
        settings.constrain_height,
    )

    queue = EventQueue()
    schedule = queue.call_soon if config.output.encoding == "blob" else None

    output_dir = hc_runtime.setup_output_directory(config.output.output)
    out_path = hc_runtime.header_output_path(
        output_dir, config.output.filename,
    )

    with HeaderRenderer(schedule=schedule) as renderer:
        renderer.render(images, settings)
        queue.run_pending()

        artifact = renderer.artifact
        if artifact is None:  # pragma: no cover
            msg = "Render finished without publishing an artifact"
            raise RuntimeError(msg)
        hc_runtime.save_artifact(artifact, out_path, renderer.registry)
        layout = renderer.layout

    if layout is not None:
        width, height = layout.canvas_size()
        logger.info("Canvas size: %dx%d", width, height)
    logger.info("Header saved to: %s", out_path)
    return out_path
