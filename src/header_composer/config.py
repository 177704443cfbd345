"""
Configuration schema and loader for the header composer.

Defines the Pydantic models that carry layout settings into the
compositor, the structured sections of ``config.toml``, and a TOML-based
config loader with validation support.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from pydantic import BaseModel, ConfigDict, Field

from header_composer.config_defaults import (
    DEFAULT_CONSTRAIN_HEIGHT,
    DEFAULT_ENCODING,
    DEFAULT_END_WITH_EQUALS,
    DEFAULT_FILENAME,
    DEFAULT_MARGIN,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PLUS_ENABLED,
    DEFAULT_SPACING,
)
from header_composer.type_defs import EncodingName

if TYPE_CHECKING:  # pragma: no cover
    from header_composer.type_defs import ImageSequence


class PlusSettings(BaseModel):
    """Separator glyph geometry handed to the compositor."""

    model_config = ConfigDict(frozen=True)

    length: float = Field(ge=0, allow_inf_nan=False)
    stroke_width: float = Field(ge=0, allow_inf_nan=False)
    end_with_equals: bool = False


class LayoutSettings(BaseModel):
    """
    Validated layout parameters for a single render.

    Frozen so two settings bundles compare by value, which is what the
    renderer's change detection relies on.
    """

    model_config = ConfigDict(frozen=True)

    spacing: float = Field(0.0, ge=0, allow_inf_nan=False)
    margin: float = Field(0.0, ge=0, allow_inf_nan=False)
    constrain_height: bool = False
    plus: PlusSettings | None = None


class LayoutConfig(BaseModel):
    """Layout section of config.toml; spacing may be derived."""

    spacing: float | None = Field(DEFAULT_SPACING, ge=0, allow_inf_nan=False)
    margin: float = Field(DEFAULT_MARGIN, ge=0, allow_inf_nan=False)
    constrain_height: bool = DEFAULT_CONSTRAIN_HEIGHT


class PlusConfig(BaseModel):
    """Separator glyph section; unset sizes derive from spacing."""

    enabled: bool = DEFAULT_PLUS_ENABLED
    length: float | None = Field(None, ge=0, allow_inf_nan=False)
    stroke_width: float | None = Field(None, ge=0, allow_inf_nan=False)
    end_with_equals: bool = DEFAULT_END_WITH_EQUALS


class OutputConfig(BaseModel):
    """Configure output directory, filename, and artifact encoding."""

    output: str = Field(DEFAULT_OUTPUT_DIR)
    filename: str = Field(DEFAULT_FILENAME, min_length=1)
    encoding: EncodingName = Field(DEFAULT_ENCODING)


class HeaderConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    plus: PlusConfig = Field(
        default_factory=lambda: PlusConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> HeaderConfig:
        """
        Load a header configuration from a TOML file.

        Returns a validated HeaderConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return HeaderConfig.model_validate(doc.unwrap())


# CLI destination name -> (config section, field)
_CLI_FIELD_MAP: dict[str, tuple[str, str]] = {
    "spacing": ("layout", "spacing"),
    "margin": ("layout", "margin"),
    "constrain_height": ("layout", "constrain_height"),
    "plus": ("plus", "enabled"),
    "plus_length": ("plus", "length"),
    "plus_stroke_width": ("plus", "stroke_width"),
    "end_with_equals": ("plus", "end_with_equals"),
    "output": ("output", "output"),
    "filename": ("output", "filename"),
    "encoding": ("output", "encoding"),
}


def build_config_from_cli(
    args: dict[str, Any],
    base_config: HeaderConfig | None = None,
) -> HeaderConfig:
    """
    Overlay command-line values onto a base configuration.

    Only keys present in ``args`` with a non-None value override the
    base; flags declared with ``argparse.SUPPRESS`` are simply absent
    when the user did not pass them.
    """
    base = base_config or HeaderConfig.model_validate({})
    data = base.model_dump()
    for key, (section, field) in _CLI_FIELD_MAP.items():
        value = args.get(key)
        if value is None:
            continue
        data[section][field] = value
    return HeaderConfig.model_validate(data)


def resolve_layout_settings(
    config: HeaderConfig,
    images: ImageSequence,
) -> LayoutSettings:
    """
    Turn the user-facing config into concrete layout settings.

    Unset spacing falls back to a fraction of the widest image and
    unset glyph sizes derive from the resolved spacing.
    """
    # image_list imports PlusSettings from this module
    from header_composer.image_list import (  # noqa: PLC0415
        default_plus_settings,
        default_spacing,
    )

    spacing = config.layout.spacing
    if spacing is None:
        spacing = default_spacing(images) if images else 0.0

    plus: PlusSettings | None = None
    if config.plus.enabled:
        derived = default_plus_settings(
            spacing,
            end_with_equals=config.plus.end_with_equals,
        )
        length = (
            config.plus.length
            if config.plus.length is not None
            else derived.length
        )
        stroke_width = (
            config.plus.stroke_width
            if config.plus.stroke_width is not None
            else derived.stroke_width
        )
        plus = PlusSettings(
            length=length,
            stroke_width=stroke_width,
            end_with_equals=config.plus.end_with_equals,
        )

    return LayoutSettings(
        spacing=spacing,
        margin=config.layout.margin,
        constrain_height=config.layout.constrain_height,
        plus=plus,
    )
