"""
Compositor that turns an image list and settings into a PNG artifact.

:class:`HeaderRenderer` is the only owner of the drawing surface.
Callers hand it inputs and receive artifacts through ``on_artifact``;
they never touch the surface. At most one artifact handle is live at a
time and every transition away from it releases it.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from header_composer.composite.artifacts import (
    ArtifactLease,
    ArtifactRegistry,
    CompositeArtifact,
    encode_blob,
    encode_data_url,
)
from header_composer.composite.errors import SurfaceMissingError
from header_composer.composite.glyphs import draw_glyph, plan_glyphs
from header_composer.composite.layout import (
    Layout,
    compute_layout,
    images_differ,
    separator_slots,
)
from header_composer.composite.surface import DrawingSurface
from header_composer.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable

    from PIL import Image

    from header_composer.config import LayoutSettings
    from header_composer.type_defs import ImageSequence, Scheduler

    ArtifactCallback = Callable[[CompositeArtifact | None], None]


class RenderState(Enum):
    """Lifecycle of the published artifact."""

    EMPTY = "empty"
    RENDERING = "rendering"
    READY = "ready"


class HeaderRenderer:
    """
    Render header composites and publish their artifacts.

    With a ``schedule`` callable (for example ``EventQueue.call_soon``)
    encoding runs later as a revocable blob; each request carries a
    sequence number and completions for anything but the latest render
    are dropped. Without one, the data-URL encoding runs inline.

    Usage:
        with HeaderRenderer(on_artifact=show_save_button) as renderer:
            renderer.update(images, settings)
    """

    def __init__(
        self,
        on_artifact: ArtifactCallback | None = None,
        *,
        registry: ArtifactRegistry | None = None,
        schedule: Scheduler | None = None,
    ) -> None:
        self.registry = registry if registry is not None else ArtifactRegistry()
        self._on_artifact = on_artifact
        self._schedule = schedule
        self._surface: DrawingSurface | None = None
        self._lease: ArtifactLease | None = None
        self._state = RenderState.EMPTY
        self._sequence = 0
        self._layout: Layout | None = None
        self._last_images: tuple[Image.Image, ...] | None = None
        self._last_settings: LayoutSettings | None = None

    # -- lifecycle -------------------------------------------------------

    def __enter__(self) -> HeaderRenderer:
        self.mount()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @property
    def mounted(self) -> bool:
        """Whether a drawing surface is attached."""
        return self._surface is not None

    def mount(self) -> None:
        """Attach a drawing surface; renders need one."""
        if self._surface is None:
            self._surface = DrawingSurface()

    def unmount(self) -> None:
        """Detach the drawing surface."""
        if self._surface is not None:
            self._surface.release()
            self._surface = None

    def close(self) -> None:
        """Tear down: drop in-flight encodes and release the artifact."""
        self._sequence += 1
        self._clear_artifact()
        self.unmount()
        self._state = RenderState.EMPTY
        self._layout = None
        self._last_images = None
        self._last_settings = None

    # -- read-only state -------------------------------------------------

    @property
    def artifact(self) -> CompositeArtifact | None:
        """Currently published artifact, if any."""
        return self._lease.artifact if self._lease is not None else None

    @property
    def state(self) -> RenderState:
        """Current lifecycle state."""
        return self._state

    @property
    def layout(self) -> Layout | None:
        """Layout of the most recent render."""
        return self._layout

    @property
    def sequence(self) -> int:
        """Number of the most recent render request."""
        return self._sequence

    # -- rendering -------------------------------------------------------

    def update(self, images: ImageSequence, settings: LayoutSettings) -> bool:
        """
        Re-render only when the inputs changed since the last render.

        Images are compared by identity and order, settings by value.
        Returns True when a render was triggered.
        """
        if (
            self._last_images is not None
            and not images_differ(self._last_images, images)
            and settings == self._last_settings
        ):
            return False
        self.render(images, settings)
        return True

    def render(
        self,
        images: ImageSequence,
        settings: LayoutSettings,
    ) -> CompositeArtifact | None:
        """
        Draw the composite and encode it.

        Returns the artifact when encoding ran inline, otherwise None
        until the scheduled encode publishes it.

        Raises:
            SurfaceMissingError: If a non-empty list is rendered while
                no surface is mounted.
            EncodeError: If encoding produced no data.

        """
        images = tuple(images)
        self._sequence += 1
        self._clear_artifact()
        self._state = RenderState.RENDERING
        self._layout = None

        if not images:
            if self._surface is not None:
                self._surface.release()
            self._state = RenderState.EMPTY
            self._remember(images, settings)
            logger.debug("Image list empty; no artifact published")
            return None

        if self._surface is None:
            msg = "Render requested before a drawing surface was mounted"
            raise SurfaceMissingError(msg)

        layout = compute_layout(images, settings)
        self._layout = layout

        surface = self._surface
        surface.resize(*layout.canvas_size())
        for item in layout.placed_items:
            surface.draw_image(item)
        self._draw_separators(surface, layout, settings)
        logger.debug(
            "Render #%d: %d images on %dx%d canvas",
            self._sequence,
            len(images),
            *surface.size,
        )

        self._remember(images, settings)
        return self._encode(surface)

    def _remember(
        self,
        images: tuple[Image.Image, ...],
        settings: LayoutSettings,
    ) -> None:
        self._last_images = images
        self._last_settings = settings

    @staticmethod
    def _draw_separators(
        surface: DrawingSurface,
        layout: Layout,
        settings: LayoutSettings,
    ) -> None:
        if settings.plus is None:
            return
        plan = plan_glyphs(separator_slots(layout, settings.spacing),
                           settings.plus)
        if not plan:
            return
        draw = surface.draw()
        for slot, kind in plan:
            draw_glyph(draw, kind, slot.center, settings.plus)

    def _encode(self, surface: DrawingSurface) -> CompositeArtifact | None:
        if self._schedule is None:
            artifact = encode_data_url(surface.image)
            self._publish(ArtifactLease(artifact))
            return artifact

        sequence = self._sequence
        snapshot = surface.snapshot()
        self._schedule(lambda: self._complete_encode(sequence, snapshot))
        return None

    def _complete_encode(self, sequence: int, snapshot: Image.Image) -> None:
        if sequence != self._sequence:
            logger.debug(
                "Discarding stale encode #%d (latest is #%d)",
                sequence,
                self._sequence,
            )
            return
        artifact = encode_blob(snapshot, self.registry)
        self._publish(ArtifactLease.acquire(artifact, self.registry))

    # -- artifact handles ------------------------------------------------

    def _publish(self, lease: ArtifactLease) -> None:
        self._lease = lease
        self._state = RenderState.READY
        logger.debug("Published artifact %.48s", lease.artifact.handle)
        self._notify(lease.artifact)

    def _clear_artifact(self) -> None:
        if self._lease is None:
            return
        lease, self._lease = self._lease, None
        lease.release()
        self._notify(None)

    def _notify(self, artifact: CompositeArtifact | None) -> None:
        if self._on_artifact is not None:
            self._on_artifact(artifact)
