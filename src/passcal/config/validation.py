"""Configuration validation utilities."""

import logging
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from passcal.config.utils import parse_bool
from passcal.exceptions import ConfigError
from passcal.models.options import LINE_ENDINGS


LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}

def _validate_bool(section: dict[str, Any], key: str, label: str) -> None:
    if key not in section:
        return
    try:
        section[key] = parse_bool(section[key])
    except ValueError as e:
        raise ConfigError(
            f"Invalid boolean for {label}",
            {"key": label, "value": section[key]}
        ) from e

def _validate_int(section: dict[str, Any], key: str, label: str) -> None:
    if key not in section:
        return
    try:
        value = int(section[key])
    except (TypeError, ValueError) as e:
        raise ConfigError(
            f"Invalid integer for {label}",
            {"key": label, "value": section[key]}
        ) from e
    if value < 0:
        raise ConfigError(f"{label} must not be negative", {"key": label, "value": value})
    section[key] = value

def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name, {})
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"Configuration section '{name}' must be a mapping",
            {"section": name, "config_type": type(section).__name__}
        )
    config[name] = section
    return section

def validate_timezone(timezone: str | None) -> None:
    """Check that a timezone name resolves to an IANA zone."""
    if timezone is None or timezone == "":
        return
    if not isinstance(timezone, str):
        raise ConfigError(f"Invalid timezone {timezone}", {"timezone": timezone})
    try:
        ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"Invalid timezone {timezone}", {"timezone": timezone}) from e

def validate_config(config: Any) -> dict[str, Any]:
    """Validate a raw configuration mapping and normalize its values.
    
    Args:
        config: Merged configuration from file and environment
        
    Returns:
        The same mapping with booleans, integers and names normalized
        
    Raises:
        ConfigError: If any value is invalid
    """
    if not isinstance(config, dict):
        raise ConfigError(
            "Configuration must be a mapping",
            {"config_type": type(config).__name__}
        )

    _validate_bool(config, 'use_local_time', 'use_local_time')
    validate_timezone(config.get('timezone'))
    if 'save_dir' in config:
        save_dir = config['save_dir']
        if not isinstance(save_dir, str) or not save_dir.strip():
            raise ConfigError(
                "save_dir must be a non-empty path",
                {"key": "save_dir", "value": save_dir}
            )

    ics = _section(config, 'ics')
    _validate_bool(ics, 'fold_lines', 'ics.fold_lines')
    if 'line_ending' in ics:
        line_ending = str(ics['line_ending']).lower()
        if line_ending not in LINE_ENDINGS:
            raise ConfigError(
                f"Unknown line ending {ics['line_ending']}",
                {"line_ending": ics['line_ending'], "allowed": sorted(LINE_ENDINGS)}
            )
        ics['line_ending'] = line_ending

    logging_config = _section(config, 'logging')
    if 'level' in logging_config:
        level = str(logging_config['level']).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level {logging_config['level']}", {"level": level})
        logging_config['level'] = level
    _validate_int(logging_config, 'max_bytes', 'logging.max_bytes')
    _validate_int(logging_config, 'backup_count', 'logging.backup_count')

    logging.getLogger(__name__).debug("Configuration validated")
    return config
