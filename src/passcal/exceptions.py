"""Centralized error definitions for the pass calendar exporter."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from passcal.error_codes import ErrorCode


logger = logging.getLogger(__name__)

@dataclass
class PassCalError(Exception):
    """Base exception for all pass calendar errors."""
    message: str
    code: ErrorCode
    details: dict[str, Any] | None = None
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Code: {self.code.value}, Details: {self.details})"
        return f"{self.message} (Code: {self.code.value})"

class InvalidFormatError(PassCalError):
    """Unrecognized output format selector."""
    def __init__(self, message: str, fmt: Any):
        super().__init__(message, ErrorCode.INVALID_FORMAT, {"format": fmt})

class ValidationError(PassCalError):
    """Validation error."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.VALIDATION_FAILED, details)

class ConfigError(PassCalError):
    """Configuration error."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.CONFIG_INVALID, details)

class ExportError(PassCalError):
    """Base class for errors reported by the file sink.

    The calendar text that failed to be stored is kept on ``content`` so the
    caller can retry against a different destination.
    """
    def __init__(
        self,
        message: str,
        code: ErrorCode,
        file_path: str,
        reason: str,
        content: str | None = None
    ):
        super().__init__(message, code, {"file_path": file_path, "reason": reason})
        self.file_path = file_path
        self.reason = reason
        self.content = content

class FileCreateError(ExportError):
    """Destination could not be opened or created."""
    def __init__(self, file_path: str, reason: str, content: str | None = None):
        super().__init__(
            f"Could not create file {file_path}",
            ErrorCode.CREATE_FAILED,
            file_path,
            reason,
            content
        )

class FileWriteError(ExportError):
    """Destination was opened but the write did not complete."""
    def __init__(self, file_path: str, reason: str, content: str | None = None):
        super().__init__(
            f"An error occurred while saving data to {file_path}",
            ErrorCode.WRITE_FAILED,
            file_path,
            reason,
            content
        )

@contextmanager
def handle_errors(
    error_type: type[PassCalError],
    service: str,
    operation: str
) -> Iterator[None]:
    """Log errors raised inside the block and re-raise them.
    
    Args:
        error_type: The expected error type
        service: The service name
        operation: The operation name
    """
    try:
        yield
    except error_type as e:
        logger.error(f"{service}.{operation} failed: {e}")
        raise
    except Exception as e:
        # Log unexpected error with traceback
        logger.error(
            f"Unexpected error in {service}.{operation}: {e}",
            exc_info=True
        )
        raise
