"""Configuration package for the pass calendar exporter."""

from passcal.config.settings import ConfigurationManager
from passcal.config.types import AppConfig

__all__ = ['AppConfig', 'ConfigurationManager']
