# ============================================================================
# src/blood_analyzer/core/context/enums.py
# ============================================================================
"""
Analysis Enums
- Marker classification status
- Profile sex
"""

from enum import Enum


class ClassificationStatus(str, Enum):
    LOW = "Low"
    NORMAL = "Normal"
    HIGH = "High"
    UNKNOWN = "Unknown"   # No range entry or unparsable value


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
