"""Exclusively owned pixel surface the compositor draws onto."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from header_composer.composite.errors import SurfaceMissingError
from header_composer.constants import COLOR_MODE_RGBA, COLOR_TRANSPARENT

if TYPE_CHECKING:  # pragma: no cover
    from header_composer.composite.layout import PlacedItem


class DrawingSurface:
    """
    Transparent RGBA surface sized per render.

    Like an HTML canvas, resizing discards whatever was drawn before;
    the compositor relies on that instead of clearing explicitly.
    """

    def __init__(self) -> None:
        self._image: Image.Image | None = None

    @property
    def ready(self) -> bool:
        """Whether the surface has been sized at least once."""
        return self._image is not None

    @property
    def image(self) -> Image.Image:
        """Current backing image."""
        if self._image is None:
            msg = "Drawing surface has not been sized"
            raise SurfaceMissingError(msg)
        return self._image

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height) of the current buffer."""
        return self.image.size

    def resize(self, width: int, height: int) -> None:
        """Replace the buffer with a cleared one of the given size."""
        if width <= 0 or height <= 0:
            msg = f"Surface size must be positive, got {width}x{height}"
            raise ValueError(msg)
        self._image = Image.new(
            COLOR_MODE_RGBA, (width, height), COLOR_TRANSPARENT,
        )

    def draw(self) -> ImageDraw.ImageDraw:
        """Return a drawing context bound to the current buffer."""
        return ImageDraw.Draw(self.image)

    def draw_image(self, item: PlacedItem) -> None:
        """Scale ``item.image`` into its placed rect and composite it."""
        x0, y0, x1, y1 = item.rect()
        target = (x1 - x0, y1 - y0)
        src = item.image
        if src.mode != COLOR_MODE_RGBA:
            src = src.convert(COLOR_MODE_RGBA)
        if src.size != target:
            src = src.resize(target, Image.Resampling.LANCZOS)
        self.image.alpha_composite(src, dest=(x0, y0))

    def snapshot(self) -> Image.Image:
        """Copy of the current pixels, detached from later draws."""
        return self.image.copy()

    def release(self) -> None:
        """Drop the buffer; the next use needs a resize first."""
        self._image = None
