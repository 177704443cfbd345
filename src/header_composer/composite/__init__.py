"""
Header compositing split into layout, glyph, surface, and artifact parts.

The package exposes the most commonly used entry points directly so
callers only need ``header_composer.composite``.
"""

from __future__ import annotations

from . import artifacts, glyphs, layout, renderer, surface
from .artifacts import (
    ArtifactLease,
    ArtifactRegistry,
    CompositeArtifact,
    artifact_bytes,
    encode_blob,
    encode_data_url,
    encode_png,
)
from .errors import EncodeError, RenderError, SurfaceMissingError
from .glyphs import draw_equals, draw_glyph, draw_plus, glyph_for_slot
from .layout import (
    Layout,
    PlacedItem,
    SeparatorSlot,
    compute_layout,
    images_differ,
    separator_slots,
)
from .renderer import HeaderRenderer, RenderState
from .surface import DrawingSurface

__all__ = [
    "ArtifactLease",
    "ArtifactRegistry",
    "CompositeArtifact",
    "DrawingSurface",
    "EncodeError",
    "HeaderRenderer",
    "Layout",
    "PlacedItem",
    "RenderError",
    "RenderState",
    "SeparatorSlot",
    "SurfaceMissingError",
    "artifact_bytes",
    "artifacts",
    "compute_layout",
    "draw_equals",
    "draw_glyph",
    "draw_plus",
    "encode_blob",
    "encode_data_url",
    "encode_png",
    "glyph_for_slot",
    "glyphs",
    "images_differ",
    "layout",
    "renderer",
    "separator_slots",
    "surface",
]
