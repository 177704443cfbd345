"""Fatal compositor errors; both indicate a defect, not a user condition."""


class RenderError(RuntimeError):
    """Base class for errors that abort a render call."""


class SurfaceMissingError(RenderError):
    """Render requested while no drawing surface is mounted."""


class EncodeError(RenderError):
    """Encoding the drawn surface produced no data."""
