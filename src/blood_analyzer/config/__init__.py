# ============================================================================
# src/blood_analyzer/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .base_config import base_settings, BaseSettingsConfig
from .narrative_config import narrative_settings, NarrativeSettings
from .logging_config import logging_settings, LoggingSettings

__all__ = [
    "base_settings",
    "BaseSettingsConfig",
    "narrative_settings",
    "NarrativeSettings",
    "logging_settings",
    "LoggingSettings",
]
