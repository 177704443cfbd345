"""Runtime utilities for output, validation, and version helpers."""

from .output import header_output_path, save_artifact, setup_output_directory
from .validation import validate_input_paths
from .version import resolve_project_version

__all__ = [
    "header_output_path",
    "resolve_project_version",
    "save_artifact",
    "setup_output_directory",
    "validate_input_paths",
]
