"""Shared default values for user-facing configuration settings."""
from header_composer.type_defs import EncodingName

# Layout
DEFAULT_SPACING: float | None = None  # None derives spacing from the images
DEFAULT_MARGIN = 0.0
DEFAULT_CONSTRAIN_HEIGHT = False

# Separator glyphs
DEFAULT_PLUS_ENABLED = False
DEFAULT_END_WITH_EQUALS = False

# Output
DEFAULT_OUTPUT_DIR = "out"
DEFAULT_FILENAME = "header.png"
DEFAULT_ENCODING: EncodingName = "blob"
