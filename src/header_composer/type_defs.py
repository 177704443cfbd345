"""
Defines shared type aliases for the header composer.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Literal

from PIL import Image

EncodingName = Literal["blob", "data-url"]
GlyphKind = Literal["plus", "equals"]
ImageSequence = Sequence[Image.Image]
RGBA = tuple[int, int, int, int]

# Accepts a zero-argument callback and runs it later on the same thread
Scheduler = Callable[[Callable[[], None]], object]
