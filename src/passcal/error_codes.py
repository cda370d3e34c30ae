"""Error codes for the satellite pass calendar exporter."""

from enum import Enum

class ErrorCode(Enum):
    """Enumeration of all possible error codes."""
    # Encoding Errors
    INVALID_FORMAT = "invalid_format"
    VALIDATION_FAILED = "validation_failed"
    
    # Storage Errors
    CREATE_FAILED = "create_failed"
    WRITE_FAILED = "write_failed"
    
    # Configuration Errors
    CONFIG_INVALID = "config_invalid"
    CONFIG_MISSING = "config_missing"
