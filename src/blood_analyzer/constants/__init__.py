# ============================================================================
# src/blood_analyzer/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .reference_ranges import REFERENCE_RANGES, ReferenceRange, ReferenceRangeTable
from .marker_definitions import (
    MARKER_DEFINITIONS,
    MarkerDefinition,
    PATIENT_NAME_KEY,
    TEST_DATE_KEY,
    PSEUDO_MARKERS,
)
