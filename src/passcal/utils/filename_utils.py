"""Default destination names for exported calendars."""

from pathlib import Path

from passcal.models.enums import ExportFormat
from passcal.models.satellite_pass import PassRecord


INVALID_FILENAME_CHARS = "!?/\\()*&%$#@[]{}=+<>,.|:;"

_FILENAME_TABLE = str.maketrans(
    {" ": "-", **{char: "_" for char in INVALID_FILENAME_CHARS}}
)


def sanitize_filename(name: str) -> str:
    """Replace spaces with dashes and other unsafe characters with underscores."""
    return name.translate(_FILENAME_TABLE)


def default_pass_filename(satellite_pass: PassRecord) -> str:
    """Default file name for a single pass: ``<satellite>-<orbit>``."""
    return sanitize_filename(f"{satellite_pass.satellite_name}-{satellite_pass.orbit_number}")


def default_passes_filename(satellite_label: str) -> str:
    """Default file name for a pass list: ``<satellite>-passes``."""
    return sanitize_filename(f"{satellite_label}-passes")


def build_export_path(
    savedir: str | Path,
    savefile: str,
    fmt: ExportFormat = ExportFormat.ICS
) -> Path:
    """Join directory and base name and append the format's extension."""
    return Path(savedir) / f"{savefile}{fmt.extension}"
