"""Environment variable handling for configuration."""

import os
from typing import Any


class EnvConfig:
    """Environment variable configuration."""

    # Mapping of environment variables to configuration paths
    ENV_MAPPING = {
        'PASSCAL_USE_LOCAL_TIME': ('use_local_time',),
        'PASSCAL_TIMEZONE': ('timezone',),
        'PASSCAL_SAVE_DIR': ('save_dir',),
        'PASSCAL_FOLD_LINES': ('ics', 'fold_lines'),
        'PASSCAL_LINE_ENDING': ('ics', 'line_ending'),
        'PASSCAL_LOG_LEVEL': ('logging', 'level'),
        'PASSCAL_LOG_FILE': ('logging', 'file'),
    }

    @staticmethod
    def get_env_value(env_var: str, default: Any | None = None) -> Any | None:
        """Get value from environment variable with default."""
        return os.getenv(env_var, default)

    @staticmethod
    def _set_nested_value(config: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
        """Set value in nested dictionary using path tuple."""
        current = config
        for part in path[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[path[-1]] = value

    @classmethod
    def update_config_from_env(cls, config: dict[str, Any]) -> None:
        """Update configuration dictionary with environment variables.
        
        Args:
            config: Configuration dictionary to update
        """
        for env_var, path in cls.ENV_MAPPING.items():
            value = cls.get_env_value(env_var)
            if value is not None:
                cls._set_nested_value(config, path, value)

    @classmethod
    def get_config_dir(cls) -> str | None:
        return cls.get_env_value('PASSCAL_CONFIG_DIR')
