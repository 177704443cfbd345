"""
Ordered image list helpers.

The compositor never mutates the list it is given; every edit made by a
collaborator produces a fresh tuple so identity-based change detection
sees a new sequence.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from header_composer.config import PlusSettings
from header_composer.constants import (
    DEFAULT_SPACING_FACTOR,
    PLUS_LENGTH_DIVISOR,
    PLUS_STROKE_DIVISOR,
)
from header_composer.type_defs import ImageSequence

T = TypeVar("T")


def append_images(items: Sequence[T], new: Iterable[T]) -> tuple[T, ...]:
    """Return a new sequence with ``new`` appended in order."""
    return (*items, *new)


def remove_at(items: Sequence[T], index: int) -> tuple[T, ...]:
    """Return a copy of ``items`` without the entry at ``index``."""
    if not -len(items) <= index < len(items):
        msg = f"Index {index} out of range for {len(items)} images"
        raise IndexError(msg)
    copy = list(items)
    del copy[index]
    return tuple(copy)


def move(items: Sequence[T], src: int, dest: int) -> tuple[T, ...]:
    """Return a copy with the entry at ``src`` moved to ``dest``."""
    copy = list(items)
    moved = copy.pop(src)
    copy.insert(dest, moved)
    return tuple(copy)


def clear() -> tuple[()]:
    """Return the empty image list."""
    return ()


def default_spacing(images: ImageSequence) -> float:
    """Spacing used for a fresh list: a fifth of the widest image."""
    if not images:
        msg = "No images provided"
        raise ValueError(msg)
    widest = max(im.width for im in images)
    return widest * DEFAULT_SPACING_FACTOR


def default_plus_settings(
    spacing: float,
    *,
    end_with_equals: bool = False,
) -> PlusSettings:
    """Size the separator glyph to half the gap, stroked at a third."""
    length = spacing / PLUS_LENGTH_DIVISOR
    return PlusSettings(
        length=length,
        stroke_width=length / PLUS_STROKE_DIVISOR,
        end_with_equals=end_with_equals,
    )
