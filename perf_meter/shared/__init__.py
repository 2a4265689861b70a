"""Shared configuration and logging infrastructure."""
from .config import Settings, MeasurementConfig
from .config_manager import ConfigurationError, ConfigurationManager
from .logging import LoggingManager

__all__ = [
    'Settings',
    'MeasurementConfig',
    'ConfigurationError',
    'ConfigurationManager',
    'LoggingManager'
]
