"""Separator glyph selection and drawing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from header_composer.constants import GLYPH_FILL

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from PIL import ImageDraw

    from header_composer.composite.layout import SeparatorSlot
    from header_composer.config import PlusSettings
    from header_composer.type_defs import RGBA, GlyphKind

_HALF = 2
_QUARTER = 4


def glyph_for_slot(
    index: int,
    slot_count: int,
    plus: PlusSettings | None,
) -> GlyphKind | None:
    """
    Pick the glyph drawn at separator ``index``.

    Every slot gets a plus sign, except the last one which becomes an
    equals sign when ``end_with_equals`` is set. No settings, no glyph.
    """
    if plus is None or not 0 <= index < slot_count:
        return None
    if plus.end_with_equals and index == slot_count - 1:
        return "equals"
    return "plus"


def plan_glyphs(
    slots: Sequence[SeparatorSlot],
    plus: PlusSettings | None,
) -> list[tuple[SeparatorSlot, GlyphKind]]:
    """Pair each separator slot with the glyph drawn there."""
    plan: list[tuple[SeparatorSlot, GlyphKind]] = []
    for slot in slots:
        kind = glyph_for_slot(slot.index, len(slots), plus)
        if kind is not None:
            plan.append((slot, kind))
    return plan


def _stroke_px(stroke_width: float) -> int:
    # any positive stroke is at least one pixel wide
    if stroke_width <= 0:
        return 0
    return max(1, round(stroke_width))


def draw_plus(
    draw: ImageDraw.ImageDraw,
    center: tuple[float, float],
    length: float,
    stroke_width: float,
    fill: RGBA = GLYPH_FILL,
) -> None:
    """Stroke a plus sign spanning ``length`` in both axes."""
    width = _stroke_px(stroke_width)
    if length <= 0 or width <= 0:
        return
    cx, cy = center
    half = length / _HALF
    draw.line([(cx - half, cy), (cx + half, cy)], fill=fill, width=width)
    draw.line([(cx, cy - half), (cx, cy + half)], fill=fill, width=width)


def draw_equals(
    draw: ImageDraw.ImageDraw,
    center: tuple[float, float],
    length: float,
    stroke_width: float,
    fill: RGBA = GLYPH_FILL,
) -> None:
    """Stroke two horizontal bars a quarter span above and below centre."""
    width = _stroke_px(stroke_width)
    if length <= 0 or width <= 0:
        return
    cx, cy = center
    half = length / _HALF
    offset = length / _QUARTER
    for y in (cy - offset, cy + offset):
        draw.line([(cx - half, y), (cx + half, y)], fill=fill, width=width)


def draw_glyph(
    draw: ImageDraw.ImageDraw,
    kind: GlyphKind,
    center: tuple[float, float],
    plus: PlusSettings,
    fill: RGBA = GLYPH_FILL,
) -> None:
    """Dispatch to the drawing routine for ``kind``."""
    if kind == "equals":
        draw_equals(draw, center, plus.length, plus.stroke_width, fill)
    elif kind == "plus":
        draw_plus(draw, center, plus.length, plus.stroke_width, fill)
    else:
        msg = f"Unknown glyph kind: {kind!r}"
        raise ValueError(msg)
