# ============================================================================
# src/blood_analyzer/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the blood report analyzer.
"""


class BloodAnalyzerError(Exception):
    """Base exception for all analyzer errors."""
    pass


class OCRFailureError(BloodAnalyzerError):
    """OCR collaborator failed or produced no usable text."""
    pass


class ConfigurationError(BloodAnalyzerError):
    """Invalid configuration."""
    pass


class ReferenceRangeError(ConfigurationError):
    """Reference range data file is unreadable or malformed."""
    def __init__(self, message: str, marker_name: str = None):
        super().__init__(message)
        self.marker_name = marker_name


class ProfileIncompleteError(BloodAnalyzerError):
    """Narrative requested for a profile missing required fields."""
    def __init__(self, message: str, missing_fields=None):
        super().__init__(message)
        self.missing_fields = list(missing_fields or [])
