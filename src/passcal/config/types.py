"""Configuration type definitions."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

from passcal.models.enums import TimeZoneMode
from passcal.models.options import EncoderOptions


@dataclass
class AppConfig:
    """Application configuration."""
    use_local_time: bool = False
    timezone: str | None = None  # None means the system zone
    save_dir: str = field(default_factory=lambda: str(Path.home()))
    fold_lines: bool = False
    line_ending: str = "lf"
    log_level: str = "WARNING"
    log_file: str | None = None
    log_max_bytes: int = 10485760  # 10MB
    log_backup_count: int = 5
    config_dir: str | None = None

    @property
    def tz_mode(self) -> TimeZoneMode:
        """Time zone mode selected by ``use_local_time``."""
        return TimeZoneMode.from_use_local_time(self.use_local_time)

    def local_zone(self) -> ZoneInfo | None:
        """Zone for local date-times, None for the system zone."""
        if not self.timezone:
            return None
        return ZoneInfo(self.timezone)

    def encoder_options(self) -> EncoderOptions:
        return EncoderOptions.from_names(self.line_ending, self.fold_lines)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppConfig":
        """Create AppConfig from a validated configuration mapping."""
        ics = data.get('ics', {})
        logging_config = data.get('logging', {})
        defaults = cls()

        return cls(
            use_local_time=data.get('use_local_time', defaults.use_local_time),
            timezone=data.get('timezone', defaults.timezone),
            save_dir=str(Path(data.get('save_dir', defaults.save_dir)).expanduser()),
            fold_lines=ics.get('fold_lines', defaults.fold_lines),
            line_ending=ics.get('line_ending', defaults.line_ending),
            log_level=logging_config.get('level', defaults.log_level),
            log_file=logging_config.get('file', defaults.log_file),
            log_max_bytes=logging_config.get('max_bytes', defaults.log_max_bytes),
            log_backup_count=logging_config.get('backup_count', defaults.log_backup_count),
            config_dir=data.get('config_dir', defaults.config_dir)
        )
