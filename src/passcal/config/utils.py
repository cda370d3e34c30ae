"""Configuration utility functions."""

from copy import deepcopy
from pathlib import Path
from typing import Any
from typing import TypeVar


T = TypeVar('T', bound=dict[str, Any])

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off'}

def deep_merge(base: T, override: T) -> T:
    """Deep merge two dictionaries.
    
    Args:
        base: Base dictionary
        override: Dictionary to override base values
        
    Returns:
        Merged dictionary
    """
    result = deepcopy(base)
    
    for key, value in override.items():
        if (
            key in result and
            isinstance(result[key], dict) and
            isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)
    
    return result

def resolve_path(path: str | Path) -> Path:
    """Resolve a configured path, expanding ``~``.
    
    Args:
        path: Path to resolve
        
    Returns:
        Resolved Path object
    """
    return Path(path).expanduser()

def parse_bool(value: Any) -> bool:
    """Interpret booleans coming from YAML or environment strings.
    
    Raises:
        ValueError: If the value is not a recognizable boolean
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
    raise ValueError(f"Not a boolean value: {value!r}")
