"""Input validation helpers for runtime configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def validate_input_paths(paths: Sequence[str | Path]) -> None:
    """Ensure at least one path was given and every path is a file."""
    if not paths:
        msg = "No input images given"
        raise ValueError(msg)
    for path in paths:
        if not Path(path).is_file():
            msg = f"Input image not found: {path}"
            raise FileNotFoundError(msg)
