"""
Core utilities: configuration, logging, events and errors.
"""
from .config import AppConfig, ConfigManager, LoggingSettings, SelectionSettings
from .decorators import synchronized
from .errors import CatalogError, FilterError, InvariantViolation, UnknownFilterId
from .events import Signal
from .logging import setup_logging

__all__ = [
    "AppConfig",
    "ConfigManager",
    "LoggingSettings",
    "SelectionSettings",
    "synchronized",
    "CatalogError",
    "FilterError",
    "InvariantViolation",
    "UnknownFilterId",
    "Signal",
    "setup_logging",
]
