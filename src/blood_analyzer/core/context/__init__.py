# src/blood_analyzer/core/context/__init__.py

from .enums import ClassificationStatus, Sex
from .user_profile import UserProfile
from .session_context import SessionContext, AnalysisSnapshot

__all__ = [
    "ClassificationStatus",
    "Sex",
    "UserProfile",
    "SessionContext",
    "AnalysisSnapshot",
]
