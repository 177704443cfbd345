"""
Encoded composite artifacts and the handles that expose them.

A revocable artifact lives in an :class:`ArtifactRegistry` until its
handle is revoked, mirroring object URLs in a browser. The data-URL
encoding embeds the bytes in the handle itself and needs no release.
"""

from __future__ import annotations

import base64
import io
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from header_composer.composite.errors import EncodeError
from header_composer.constants import (
    BLOB_HANDLE_PREFIX,
    DATA_URL_PREFIX,
    PNG_FORMAT,
    PNG_MIME_TYPE,
)
from header_composer.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable

    from PIL import Image


@dataclass(frozen=True)
class CompositeArtifact:
    """Encoded composite plus the handle a save action points at."""

    handle: str
    data: bytes = field(repr=False)
    mime_type: str = PNG_MIME_TYPE
    revocable: bool = True


class ArtifactRegistry:
    """In-memory table of live artifact handles."""

    def __init__(self) -> None:
        self._blobs: dict[str, bytes] = {}
        self.revoked: list[str] = []

    @property
    def live_handles(self) -> tuple[str, ...]:
        """Handles created and not yet revoked, oldest first."""
        return tuple(self._blobs)

    def create(self, data: bytes, mime_type: str = PNG_MIME_TYPE) -> str:
        """Register ``data`` and return a fresh handle for it."""
        handle = f"{BLOB_HANDLE_PREFIX}{uuid.uuid4()}"
        self._blobs[handle] = data
        logger.debug(
            "Created artifact %s (%s, %d bytes)", handle, mime_type, len(data),
        )
        return handle

    def revoke(self, handle: str) -> None:
        """Release ``handle``; unknown handles are ignored."""
        if self._blobs.pop(handle, None) is None:
            logger.debug("Ignoring revoke of unknown handle %s", handle)
            return
        self.revoked.append(handle)
        logger.debug("Revoked artifact %s", handle)

    def resolve(self, handle: str) -> bytes:
        """Return the bytes behind a live handle."""
        try:
            return self._blobs[handle]
        except KeyError as exc:
            msg = f"Artifact handle is not live: {handle}"
            raise KeyError(msg) from exc


def encode_png(image: Image.Image) -> bytes:
    """Encode ``image`` as PNG bytes."""
    buffer = io.BytesIO()
    image.save(buffer, format=PNG_FORMAT)
    data = buffer.getvalue()
    if not data:
        msg = "PNG encoding produced no data"
        raise EncodeError(msg)
    return data


def encode_blob(
    image: Image.Image,
    registry: ArtifactRegistry,
) -> CompositeArtifact:
    """Encode to PNG and register a revocable handle for it."""
    data = encode_png(image)
    handle = registry.create(data, PNG_MIME_TYPE)
    return CompositeArtifact(handle=handle, data=data)


def encode_data_url(image: Image.Image) -> CompositeArtifact:
    """Encode to PNG embedded in a ``data:`` URL."""
    data = encode_png(image)
    payload = base64.b64encode(data).decode("ascii")
    return CompositeArtifact(
        handle=f"{DATA_URL_PREFIX}{PNG_MIME_TYPE};base64,{payload}",
        data=data,
        revocable=False,
    )


def artifact_bytes(
    artifact: CompositeArtifact,
    registry: ArtifactRegistry | None = None,
) -> bytes:
    """Fetch the payload a save action would download."""
    if artifact.handle.startswith(DATA_URL_PREFIX):
        _, _, payload = artifact.handle.partition(",")
        return base64.b64decode(payload)
    if registry is None:
        return artifact.data
    return registry.resolve(artifact.handle)


class ArtifactLease:
    """
    Pairs one artifact with the function that releases it.

    ``release`` may be called any number of times; the release function
    runs on the first call only.
    """

    def __init__(
        self,
        artifact: CompositeArtifact,
        release: Callable[[str], None] | None = None,
    ) -> None:
        self.artifact = artifact
        self._release = release if artifact.revocable else None
        self._released = False

    @classmethod
    def acquire(
        cls,
        artifact: CompositeArtifact,
        registry: ArtifactRegistry,
    ) -> ArtifactLease:
        """Lease ``artifact`` against the registry that issued it."""
        return cls(artifact, registry.revoke)

    @property
    def released(self) -> bool:
        """Whether ``release`` has already run."""
        return self._released

    def release(self) -> None:
        """Release the handle once."""
        if self._released:
            return
        self._released = True
        if self._release is not None:
            self._release(self.artifact.handle)

    def __enter__(self) -> CompositeArtifact:
        return self.artifact

    def __exit__(self, *exc: object) -> None:
        self.release()
