"""Tests for writing calendar text to files."""

import logging

import pytest

from passcal.error_codes import ErrorCode
from passcal.exceptions import FileCreateError, FileWriteError
from passcal.services.file_sink import FileSink


CONTENT = "BEGIN:VCALENDAR\nSUMMARY:ISS [46°]\nEND:VCALENDAR\n"

@pytest.fixture
def sink():
    return FileSink()

def test_write_returns_byte_count(sink, tmp_path):
    """Test that the byte count covers multi-byte characters."""
    path = tmp_path / "iss.ics"
    
    count = sink.write(path, CONTENT)
    
    assert count == len(CONTENT.encode("utf-8"))
    assert count == len(CONTENT) + 1  # degree sign is two bytes
    assert path.read_bytes() == CONTENT.encode("utf-8")

def test_write_keeps_line_endings(sink, tmp_path):
    """Test that LF is not translated on any platform."""
    path = tmp_path / "iss.ics"
    sink.write(path, "A\nB\r\nC\n")
    assert path.read_bytes() == b"A\nB\r\nC\n"

def test_write_replaces_existing_file(sink, tmp_path):
    path = tmp_path / "iss.ics"
    path.write_text("old content that is longer than the new one")
    
    sink.write(path, "new")
    
    assert path.read_text() == "new"

def test_write_logs_byte_count(sink, tmp_path, caplog):
    path = tmp_path / "iss.ics"
    with caplog.at_level(logging.DEBUG, logger="passcal.services.file_sink"):
        sink.write(path, "abc")
    assert f"Written 3 bytes to {path}" in caplog.text

def test_missing_directory_is_create_failure(sink, tmp_path):
    """Test that parent directories are not created."""
    path = tmp_path / "missing" / "iss.ics"
    
    with pytest.raises(FileCreateError) as exc_info:
        sink.write(path, CONTENT)
    
    error = exc_info.value
    assert error.code == ErrorCode.CREATE_FAILED
    assert error.file_path == str(path)
    assert error.reason
    assert error.content == CONTENT
    assert not path.parent.exists()

def test_directory_as_destination_is_create_failure(sink, tmp_path):
    with pytest.raises(FileCreateError):
        sink.write(tmp_path, CONTENT)

def test_unencodable_content_is_write_failure(tmp_path):
    """Test that a failure after opening is reported as a write error."""
    sink = FileSink(encoding="ascii")
    path = tmp_path / "iss.ics"
    
    with pytest.raises(FileWriteError) as exc_info:
        sink.write(path, CONTENT)
    
    error = exc_info.value
    assert error.code == ErrorCode.WRITE_FAILED
    assert error.details["file_path"] == str(path)
    assert error.content == CONTENT

def test_failing_write_is_write_failure(sink, tmp_path, monkeypatch):
    """Test that an OS error during write is reported with its message."""
    path = tmp_path / "iss.ics"
    real_open = open
    
    class FullDisk:
        def __init__(self, handle):
            self._handle = handle
        def __enter__(self):
            return self
        def __exit__(self, *exc):
            self._handle.close()
            return False
        def write(self, data):
            raise OSError(28, "No space left on device")
    
    def fake_open(file, mode='r', *args, **kwargs):
        return FullDisk(real_open(file, mode, *args, **kwargs))
    
    monkeypatch.setattr("builtins.open", fake_open)
    
    with pytest.raises(FileWriteError) as exc_info:
        sink.write(path, CONTENT)
    
    assert exc_info.value.reason == "No space left on device"
