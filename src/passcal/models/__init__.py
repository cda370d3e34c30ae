"""Domain models for the pass calendar exporter."""

from passcal.models.enums import ExportFormat, TimeZoneMode
from passcal.models.options import EncoderOptions
from passcal.models.satellite_pass import Observer, PassRecord

__all__ = ['EncoderOptions', 'ExportFormat', 'Observer', 'PassRecord', 'TimeZoneMode']
