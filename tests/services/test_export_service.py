"""Tests for the pass export service."""

import logging
from pathlib import Path

import pytest

from passcal.config.types import AppConfig
from passcal.exceptions import FileCreateError, InvalidFormatError, ValidationError
from passcal.models import TimeZoneMode
from passcal.services.export_service import ExportResult, PassExportService
from passcal.services.file_sink import FileSink


class RecordingSink(FileSink):
    """Sink that remembers writes instead of touching the disk."""
    
    def __init__(self):
        super().__init__()
        self.writes: list[tuple[Path, str]] = []
    
    def write(self, path, content):
        self.writes.append((Path(path), content))
        return len(content.encode(self.encoding))

@pytest.fixture
def sink():
    return RecordingSink()

@pytest.fixture
def service(sink, tmp_path):
    return PassExportService(AppConfig(save_dir=str(tmp_path)), sink)

def test_export_pass_default_name(service, sink, iss_pass, observer, tmp_path):
    """Test that a single pass is saved as <satellite>-<orbit>.ics."""
    result = service.export_pass(iss_pass, observer)
    
    assert isinstance(result, ExportResult)
    assert result.path == tmp_path / "ISS-12345.ics"
    assert result.event_count == 1
    assert result.bytes_written == len(result.content.encode("utf-8"))
    assert sink.writes == [(result.path, result.content)]

def test_export_pass_uses_config_time_zone(sink, iss_pass, observer, tmp_path):
    """Test that UTC is used unless local time is configured."""
    utc_service = PassExportService(AppConfig(save_dir=str(tmp_path)), sink)
    local_service = PassExportService(
        AppConfig(save_dir=str(tmp_path), use_local_time=True, timezone="UTC"),
        sink
    )
    
    assert "DTSTART;TZID=UTC:20230225T120000" in utc_service.export_pass(iss_pass, observer).content
    assert "DTSTART:20230225T120000" in local_service.export_pass(iss_pass, observer).content

def test_explicit_tz_mode_wins(service, iss_pass, observer):
    result = service.export_pass(iss_pass, observer, tz_mode=TimeZoneMode.LOCAL)
    assert "TZID" not in result.content

def test_export_passes(service, sink, iss_pass, evening_pass, observer, tmp_path):
    """Test that all passes end up in one write."""
    result = service.export_passes([iss_pass, evening_pass], observer, savefile="week")
    
    assert result.path == tmp_path / "week.ics"
    assert result.event_count == 2
    assert result.content.count("BEGIN:VEVENT") == 2
    assert len(sink.writes) == 1

def test_export_passes_default_name_from_label(service, iss_pass, observer, tmp_path):
    result = service.export_passes([iss_pass], observer, satellite_label="NOAA 19")
    
    assert result.path == tmp_path / "NOAA-19-passes.ics"
    assert "SUMMARY:NOAA 19 [46°]" in result.content

def test_export_passes_explicit_directory(service, iss_pass, observer, tmp_path):
    target = tmp_path / "other"
    result = service.export_passes([iss_pass], observer, savedir=target)
    assert result.path == target / "ISS-passes.ics"

def test_empty_list_needs_label(service, observer):
    with pytest.raises(ValidationError):
        service.export_passes([], observer)

def test_empty_list_with_label(service, observer):
    result = service.export_passes([], observer, satellite_label="ISS")
    assert result.event_count == 0
    assert result.content == "BEGIN:VCALENDAR\nVERSION:2.0\nCALSCALE:GREGORIAN\nEND:VCALENDAR\n"

def test_invalid_format_aborts_before_write(service, sink, iss_pass, observer):
    with pytest.raises(InvalidFormatError):
        service.export_pass(iss_pass, observer, fmt=7)
    assert sink.writes == []

def test_sink_failure_propagates_with_content(iss_pass, observer, tmp_path):
    """Test that a failed write keeps the text for a retry elsewhere."""
    service = PassExportService(AppConfig(save_dir=str(tmp_path / "missing")))
    
    with pytest.raises(FileCreateError) as exc_info:
        service.export_pass(iss_pass, observer)
    
    content = exc_info.value.content
    assert content.startswith("BEGIN:VCALENDAR")
    
    retry = FileSink().write(tmp_path / "retry.ics", content)
    assert retry == len(content.encode("utf-8"))

def test_sink_failure_logged_once_per_layer(iss_pass, observer, tmp_path, caplog):
    """Test that a failed write is reported by the sink and the service only."""
    service = PassExportService(AppConfig(save_dir=str(tmp_path / "missing")))
    
    with caplog.at_level(logging.DEBUG):
        with pytest.raises(FileCreateError):
            service.export_pass(iss_pass, observer)
    
    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 2
    assert any("_export failed after" in r.getMessage() for r in caplog.records)

def test_real_file_round_trip(iss_pass, observer, tmp_path):
    service = PassExportService(AppConfig(save_dir=str(tmp_path)))
    result = service.export_pass(iss_pass, observer)
    assert result.path.read_text(encoding="utf-8") == result.content
