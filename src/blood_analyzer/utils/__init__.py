# ============================================================================
# src/blood_analyzer/utils/__init__.py
# ============================================================================
"""
Utility modules for the blood report analyzer.
"""

from .exceptions import (
    BloodAnalyzerError,
    OCRFailureError,
    ConfigurationError,
    ReferenceRangeError,
    ProfileIncompleteError,
)

from .logging import (
    setup_logging,
    log_performance,
    JsonFormatter,
    SessionLogAdapter,
)

from .text_normalizer import normalize, NormalizationRule, OCR_CORRECTION_RULES
from .parsing import parse_numeric_value
from .health_metrics import bmi, BMI_NOT_AVAILABLE

__all__ = [
    # Exceptions
    'BloodAnalyzerError',
    'OCRFailureError',
    'ConfigurationError',
    'ReferenceRangeError',
    'ProfileIncompleteError',
    # Logging
    'setup_logging',
    'log_performance',
    'JsonFormatter',
    'SessionLogAdapter',
    # Text
    'normalize',
    'NormalizationRule',
    'OCR_CORRECTION_RULES',
    'parse_numeric_value',
    # Metrics
    'bmi',
    'BMI_NOT_AVAILABLE',
]
