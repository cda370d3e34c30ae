"""
Satellite pass calendar exporter.
"""

__version__ = '0.1.0'

from .exceptions import (
    PassCalError,
    InvalidFormatError,
    ValidationError,
    ConfigError,
    ExportError,
    FileCreateError,
    FileWriteError
)
from .models import EncoderOptions, ExportFormat, Observer, PassRecord, TimeZoneMode
from .services import (
    ExportResult,
    FileSink,
    IcsEncoder,
    PassExportService,
    encode_multiple,
    encode_single
)

__all__ = [
    'PassCalError',
    'InvalidFormatError',
    'ValidationError',
    'ConfigError',
    'ExportError',
    'FileCreateError',
    'FileWriteError',
    'EncoderOptions',
    'ExportFormat',
    'Observer',
    'PassRecord',
    'TimeZoneMode',
    'ExportResult',
    'FileSink',
    'IcsEncoder',
    'PassExportService',
    'encode_multiple',
    'encode_single'
]
