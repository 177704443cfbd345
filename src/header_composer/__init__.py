"""Public package exports for the header composer."""

from __future__ import annotations

from .composite import CompositeArtifact, HeaderRenderer, compute_layout
from .config import LayoutSettings, PlusSettings

__all__ = [
    "CompositeArtifact",
    "HeaderRenderer",
    "LayoutSettings",
    "PlusSettings",
    "compute_layout",
]
