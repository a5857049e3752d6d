# ============================================================================
# src/blood_analyzer/extractors/__init__.py
# ============================================================================
"""
Text extraction: marker values from normalized text, and the OCR
collaborator boundary.
"""

from .marker_extractor import (
    MarkerExtractor,
    ExtractedData,
    extract,
    DATE_PATTERN,
    PATIENT_NAME_PATTERN,
)
from .ocr_source import OCRResult, OCRProgress, OCRProgressTracker

__all__ = [
    'MarkerExtractor',
    'ExtractedData',
    'extract',
    'DATE_PATTERN',
    'PATIENT_NAME_PATTERN',
    'OCRResult',
    'OCRProgress',
    'OCRProgressTracker',
]
