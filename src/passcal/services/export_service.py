"""
Export of satellite passes to calendar files.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from passcal.config.types import AppConfig
from passcal.exceptions import ExportError, ValidationError, handle_errors
from passcal.models.enums import ExportFormat, TimeZoneMode
from passcal.models.satellite_pass import Observer, PassRecord
from passcal.services.file_sink import FileSink
from passcal.services.ics_encoder import IcsEncoder, resolve_format
from passcal.utils.filename_utils import (
    build_export_path,
    default_pass_filename,
    default_passes_filename,
)
from passcal.utils.logging_utils import LoggerMixin, log_execution


@dataclass
class ExportResult:
    """Outcome of a successful export."""
    path: Path
    content: str
    bytes_written: int
    event_count: int


class PassExportService(LoggerMixin):
    """Encodes passes and stores them with a single sink write per export."""
    
    def __init__(self, config: AppConfig | None = None, sink: FileSink | None = None):
        """Initialize export service.
        
        Args:
            config: Application configuration, defaults apply if None
            sink: Storage for the produced text
        """
        super().__init__()
        self.config = config or AppConfig()
        self.sink = sink or FileSink()
        self.encoder = IcsEncoder(self.config.encoder_options(), self.config.local_zone())
        self.set_log_context(service="export_service")
    
    def export_pass(
        self,
        satellite_pass: PassRecord,
        observer: Observer,
        savedir: str | Path | None = None,
        savefile: str | None = None,
        satellite_label: str | None = None,
        fmt: ExportFormat | int = ExportFormat.ICS,
        tz_mode: TimeZoneMode | None = None
    ) -> ExportResult:
        """Export one pass.
        
        The file name defaults to ``<satellite>-<orbit>`` and the label to
        the pass's satellite name.
        """
        label = satellite_label or satellite_pass.satellite_name
        savefile = savefile or default_pass_filename(satellite_pass)
        return self._export([satellite_pass], observer, savedir, savefile, label, fmt, tz_mode)
    
    def export_passes(
        self,
        passes: Sequence[PassRecord],
        observer: Observer,
        savedir: str | Path | None = None,
        savefile: str | None = None,
        satellite_label: str | None = None,
        fmt: ExportFormat | int = ExportFormat.ICS,
        tz_mode: TimeZoneMode | None = None
    ) -> ExportResult:
        """Export a list of passes into one calendar.
        
        The file name defaults to ``<satellite>-passes``. Without an explicit
        label the first pass's satellite name is used, which requires a
        non-empty list.
        """
        if satellite_label is None:
            if not passes:
                raise ValidationError("Cannot derive a satellite label from an empty pass list")
            satellite_label = passes[0].satellite_name
        savefile = savefile or default_passes_filename(satellite_label)
        return self._export(list(passes), observer, savedir, savefile, satellite_label, fmt, tz_mode)
    
    @log_execution(level='DEBUG')
    def _export(
        self,
        passes: list[PassRecord],
        observer: Observer,
        savedir: str | Path | None,
        savefile: str,
        satellite_label: str,
        fmt: ExportFormat | int,
        tz_mode: TimeZoneMode | None
    ) -> ExportResult:
        tz_mode = tz_mode or self.config.tz_mode
        content = self.encoder.encode_multiple(passes, observer, tz_mode, satellite_label, fmt)
        
        path = build_export_path(savedir or self.config.save_dir, savefile, resolve_format(fmt))
        with handle_errors(ExportError, "export_service", "write"):
            bytes_written = self.sink.write(path, content)
        
        self.info(
            f"Exported {len(passes)} passes to {path}",
            satellite=satellite_label,
            bytes=bytes_written
        )
        return ExportResult(
            path=path,
            content=content,
            bytes_written=bytes_written,
            event_count=len(passes)
        )
