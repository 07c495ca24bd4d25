"""
Configuration management package
Handles all application settings, persistence and logging setup
"""

from .settings import (
    ConfigManager, CaptureSettings, LogMessageFilter, DEFAULT_CONFIG, clamp, setup_logging
)

__all__ = [
    'ConfigManager', 'CaptureSettings', 'LogMessageFilter', 'DEFAULT_CONFIG', 'clamp', 'setup_logging'
]
