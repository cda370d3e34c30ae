"""Rendering options for calendar output."""

from dataclasses import dataclass


LINE_ENDINGS = {
    "lf": "\n",
    "crlf": "\r\n",
}


@dataclass(frozen=True)
class EncoderOptions:
    """How content lines are terminated and whether long lines are folded.

    The defaults reproduce the historical output: LF line endings and no
    folding at the 75-octet boundary.
    """
    line_ending: str = "\n"
    fold_lines: bool = False

    @classmethod
    def from_names(cls, line_ending: str = "lf", fold_lines: bool = False) -> "EncoderOptions":
        """Create options from config style names (``lf`` / ``crlf``)."""
        return cls(line_ending=LINE_ENDINGS[line_ending.lower()], fold_lines=fold_lines)
