"""
Layout calculation for horizontal header composites.

Everything here is pure arithmetic on image sizes and settings: no
pixels are touched, so the same inputs always produce an equal layout.
Positions stay fractional; rounding to whole pixels happens only when
the compositor draws.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from PIL import Image

    from header_composer.config import LayoutSettings
    from header_composer.type_defs import ImageSequence

_VERTICAL_WHITESPACE = 2  # top and bottom
_HALF = 2


@dataclass(frozen=True)
class PlacedItem:
    """One source image with its absolute position and drawn size."""

    image: Image.Image
    x: float
    y: float
    draw_width: float
    draw_height: float

    def rect(self) -> tuple[int, int, int, int]:
        """Return whole-pixel (x0, y0, x1, y1) bounds for drawing."""
        x0 = round(self.x)
        y0 = round(self.y)
        return (
            x0,
            y0,
            x0 + max(1, round(self.draw_width)),
            y0 + max(1, round(self.draw_height)),
        )


@dataclass(frozen=True)
class SeparatorSlot:
    """Centre point of the glyph between item ``index`` and the next."""

    index: int
    x: float
    y: float

    @property
    def center(self) -> tuple[float, float]:
        """Return (x, y)."""
        return self.x, self.y


@dataclass(frozen=True)
class Layout:
    """Placed items plus overall canvas dimensions."""

    placed_items: tuple[PlacedItem, ...]
    canvas_width: float
    canvas_height: float

    @property
    def row_height(self) -> float:
        """Tallest drawn height in the row."""
        return max(item.draw_height for item in self.placed_items)

    def canvas_size(self) -> tuple[int, int]:
        """Return surface dimensions, rounded up so no item is clipped."""
        return math.ceil(self.canvas_width), math.ceil(self.canvas_height)


def _draw_sizes(
    images: ImageSequence,
    *,
    constrain_height: bool,
) -> list[tuple[float, float]]:
    """Return (draw_width, draw_height) per image."""
    if not constrain_height:
        return [(im.width, im.height) for im in images]
    min_h = min(im.height for im in images)
    return [(min_h * (im.width / im.height), min_h) for im in images]


def compute_layout(images: ImageSequence, settings: LayoutSettings) -> Layout:
    """
    Compute absolute positions and canvas size for a row of images.

    Images are placed left to right starting at the margin and centred
    vertically on the full canvas height, margins included. With
    ``constrain_height`` every image is scaled to the shortest input's
    height, keeping aspect ratio.

    Raises:
        ValueError: If ``images`` is empty.

    """
    if not images:
        msg = "No images provided"
        raise ValueError(msg)

    sizes = _draw_sizes(images, constrain_height=settings.constrain_height)
    row_height = max(h for _, h in sizes)
    canvas_height = row_height + settings.margin * _VERTICAL_WHITESPACE

    x = settings.margin
    placed: list[PlacedItem] = []
    for im, (draw_w, draw_h) in zip(images, sizes, strict=True):
        y = (canvas_height - draw_h) / _VERTICAL_WHITESPACE
        placed.append(PlacedItem(im, x, y, draw_w, draw_h))
        x += draw_w + settings.spacing
    canvas_width = x - settings.spacing + settings.margin

    return Layout(
        placed_items=tuple(placed),
        canvas_width=canvas_width,
        canvas_height=canvas_height,
    )


def separator_slots(
    layout: Layout,
    spacing: float,
) -> tuple[SeparatorSlot, ...]:
    """Return the N-1 glyph centres, one in the middle of each gap."""
    items = layout.placed_items
    cy = layout.canvas_height / _HALF
    return tuple(
        SeparatorSlot(i, item.x + item.draw_width + spacing / _HALF, cy)
        for i, item in enumerate(items[:-1])
    )


def images_differ(a: ImageSequence, b: ImageSequence) -> bool:
    """Compare two image lists by identity, not pixel content."""
    if len(a) != len(b):
        return True
    return not all(x is y for x, y in zip(a, b, strict=True))
