"""
Constants used internally by the header composer.

These are implementation-level defaults that should not be overridden
via config files or CLI arguments.
"""

# Surface and encoding
COLOR_MODE_RGBA = "RGBA"
COLOR_TRANSPARENT = (0, 0, 0, 0)
PNG_FORMAT = "PNG"
PNG_MIME_TYPE = "image/png"

# Separator glyph ink; the composite carries no theming
GLYPH_FILL = (0, 0, 0, 255)

# Artifact handles
BLOB_HANDLE_PREFIX = "blob:header-composer/"
DATA_URL_PREFIX = "data:"

# Fraction of the widest image used as spacing for a fresh list
DEFAULT_SPACING_FACTOR = 0.2

# Plus glyph sizing derived from spacing (length = spacing / 2,
# stroke width = length / 3)
PLUS_LENGTH_DIVISOR = 2
PLUS_STROKE_DIVISOR = 3

# Output fallback when the requested directory cannot be created
FALLBACK_OUTPUT_DIR = "header_composer_output"
