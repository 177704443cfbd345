"""
Test configuration and shared fixtures for header_composer.

This module defines reusable pytest fixtures for building source images,
layout settings, and renderers wired to an event queue. These fixtures
support all test modules in the test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from header_composer.composite import CompositeArtifact, HeaderRenderer
from header_composer.config import LayoutSettings, PlusSettings
from header_composer.constants import COLOR_MODE_RGBA
from header_composer.events import EventQueue
from header_composer.logging_utils import logger

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
GREEN = (0, 255, 0, 255)


@pytest.fixture
def make_image() -> Callable[..., Image.Image]:
    """Factory for solid RGBA images of arbitrary size."""

    def _make(
        width: int,
        height: int,
        color: tuple[int, int, int, int] = RED,
    ) -> Image.Image:
        return Image.new(COLOR_MODE_RGBA, (width, height), color)

    return _make


@pytest.fixture
def pair_images(
    make_image: Callable[..., Image.Image],
) -> list[Image.Image]:
    """A red 100x50 image followed by a blue 60x50 image."""
    return [make_image(100, 50, RED), make_image(60, 50, BLUE)]


@pytest.fixture
def make_settings() -> Callable[..., LayoutSettings]:
    """Build LayoutSettings with optional glyph configuration."""

    def _build(
        *,
        spacing: float = 10,
        margin: float = 20,
        constrain_height: bool = False,
        plus: dict[str, Any] | None = None,
    ) -> LayoutSettings:
        return LayoutSettings(
            spacing=spacing,
            margin=margin,
            constrain_height=constrain_height,
            plus=PlusSettings(**plus) if plus is not None else None,
        )

    return _build


@pytest.fixture
def event_queue() -> EventQueue:
    """Provide a fresh cooperative event queue."""
    return EventQueue()


@pytest.fixture
def published() -> list[CompositeArtifact | None]:
    """Collects every value passed to a renderer's on_artifact callback."""
    return []


@pytest.fixture
def async_renderer(
    event_queue: EventQueue,
    published: list[CompositeArtifact | None],
) -> Generator[HeaderRenderer, None, None]:
    """Mounted renderer that encodes blobs through ``event_queue``."""
    with HeaderRenderer(
        on_artifact=published.append,
        schedule=event_queue.call_soon,
    ) as renderer:
        yield renderer


@pytest.fixture
def sync_renderer(
    published: list[CompositeArtifact | None],
) -> Generator[HeaderRenderer, None, None]:
    """Mounted renderer that falls back to inline data-URL encoding."""
    with HeaderRenderer(on_artifact=published.append) as renderer:
        yield renderer


@pytest.fixture
def image_files(tmp_path: Path) -> list[Path]:
    """Save a red 100x50 and a green 60x50 PNG and return their paths."""
    first = tmp_path / "first image.png"
    second = tmp_path / "second.png"
    Image.new("RGB", (100, 50), color="red").save(first)
    Image.new("RGB", (60, 50), color="green").save(second)
    return [first, second]


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the composer logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
