"""Services for encoding and exporting pass calendars."""

from passcal.services.export_service import ExportResult, PassExportService
from passcal.services.file_sink import FileSink
from passcal.services.ics_encoder import IcsEncoder, encode_multiple, encode_single

__all__ = [
    'ExportResult',
    'FileSink',
    'IcsEncoder',
    'PassExportService',
    'encode_multiple',
    'encode_single'
]
