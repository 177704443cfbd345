"""Image loading and validation ahead of the compositor."""
from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image

from header_composer.constants import COLOR_MODE_RGBA
from header_composer.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable
    from pathlib import Path


def load_image(path: str | Path) -> Image.Image:
    """
    Load an image from a file path and convert to RGBA.

    Args:
        path: Path to the image file

    Returns:
        Fully decoded PIL Image in RGBA mode

    Raises:
        FileNotFoundError: If the image file does not exist
        IOError: If the image cannot be opened or processed

    """
    try:
        with Image.open(path) as img:
            return img.convert(COLOR_MODE_RGBA)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{path}'"
        raise FileNotFoundError(msg) from e
    except OSError as e:
        msg = f"Error loading image '{path}': {e!s}"
        raise OSError(msg) from e


def validate_image_dimensions(img: Image.Image) -> None:
    """Reject images with a zero width or height."""
    if img.width <= 0 or img.height <= 0:
        msg = (f"Image has no area: {img.width}x{img.height}. "
               "Width and height must be positive."
               )
        raise ValueError(msg)


def load_images(paths: Iterable[str | Path]) -> list[Image.Image]:
    """
    Load images in order, dropping any that cannot be used.

    Each rejected input is logged on its own; the rest still load.
    """
    images: list[Image.Image] = []
    for path in paths:
        try:
            img = load_image(path)
            validate_image_dimensions(img)
        except (OSError, ValueError) as exc:
            logger.warning("Skipping %s: %s", path, exc)
            continue
        logger.info("Loaded %s (%dx%d)", path, img.width, img.height)
        images.append(img)
    return images
