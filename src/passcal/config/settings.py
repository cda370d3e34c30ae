"""Configuration settings for the pass calendar exporter."""

import logging
from pathlib import Path
from typing import Any

import yaml

from passcal.config.env import EnvConfig
from passcal.config.types import AppConfig
from passcal.config.utils import deep_merge
from passcal.config.utils import resolve_path
from passcal.config.validation import validate_config
from passcal.exceptions import ConfigError


logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    'use_local_time': False,
    'ics': {
        'fold_lines': False,
        'line_ending': 'lf'
    },
    'logging': {
        'level': 'WARNING'
    }
}

class ConfigurationManager:
    """Centralized configuration management with caching."""
    
    _instance = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance
    
    def __init__(self):
        if self._initialized:
            return
            
        self._config: AppConfig | None = None
        self._config_path: Path | None = None
        self._initialized = True
    
    @property
    def config(self) -> AppConfig:
        """Get the current configuration, loading it if necessary."""
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load_config() first.")
        return self._config
    
    def load_config(self, config_dir: str | None = None) -> AppConfig:
        """Load configuration with caching."""
        if self._config is not None:
            return self._config
            
        self._config_path = _get_config_path(config_dir)
        
        raw_config = deep_merge(DEFAULT_CONFIG, _load_config_file(self._config_path))
        EnvConfig.update_config_from_env(raw_config)
        raw_config = validate_config(raw_config)
        raw_config['config_dir'] = str(self._config_path) if self._config_path else None
        
        self._config = AppConfig.from_dict(raw_config)
        logger.debug(f"Loaded configuration from {self._config_path}")
        return self._config
    
    def reload_config(self, config_dir: str | None = None) -> AppConfig:
        """Force reload configuration."""
        self._config = None
        return self.load_config(config_dir)

def _get_config_path(config_dir: str | None = None) -> Path | None:
    """Get configuration directory path."""
    config_dir = config_dir or EnvConfig.get_config_dir()
    if not config_dir:
        return None
    return resolve_path(config_dir)

def _load_config_file(config_path: Path | None) -> dict[str, Any]:
    """Load configuration from YAML file if it exists."""
    if config_path is None:
        return {}
    
    config_file = config_path / CONFIG_FILE_NAME
    if not config_file.exists():
        logger.debug(f"No configuration file at {config_file}, using defaults")
        return {}
    
    try:
        with open(config_file, encoding="utf-8") as f:
            loaded_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(
            f"Failed to read configuration file {config_file}",
            {"file": str(config_file), "error": str(e)}
        ) from e
    
    if loaded_config is None:
        return {}
    if not isinstance(loaded_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping",
            {"file": str(config_file), "config_type": type(loaded_config).__name__}
        )
    return loaded_config
