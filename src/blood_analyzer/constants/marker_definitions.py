# ============================================================================
# src/blood_analyzer/constants/marker_definitions.py
# ============================================================================
"""
Marker Definitions
- One regex per clinical marker, matched case-insensitively against
  normalized report text
- value_group names the capture holding the numeric result

Adding a marker means adding an entry here (and a range in
knowledge/reference_ranges.json); extraction control flow does not change.
"""

from dataclasses import dataclass
from typing import Tuple

# Label, optional separator, then the number
_SEP = r"\s*[:=\-]?\s*"
_NUMBER = r"(\d+(?:\.\d+)?)"


@dataclass(frozen=True)
class MarkerDefinition:
    name: str
    pattern: str
    value_group: int = 1


def _label(alternatives: str) -> str:
    return r"\b(?:" + alternatives + r")(?![A-Za-z])" + _SEP + _NUMBER


MARKER_DEFINITIONS: Tuple[MarkerDefinition, ...] = (
    # Hematology
    MarkerDefinition("Hemoglobin", _label(r"ha?emoglobin(?!\s*a1c)|hgb|hb")),
    MarkerDefinition("Hematocrit", _label(r"ha?ematocrit|hct|pcv")),
    MarkerDefinition("RBC", _label(r"rbc(?:\s+count)?|red\s+blood\s+cells?(?:\s+count)?")),
    MarkerDefinition("WBC", _label(r"wbc(?:\s+count)?|white\s+blood\s+cells?(?:\s+count)?|tlc")),
    MarkerDefinition("Platelets", _label(r"platelets?(?:\s+count)?|plt")),

    # Metabolic
    MarkerDefinition("Glucose", _label(r"(?:fasting\s+)?(?:blood\s+)?glucose|fbs")),
    MarkerDefinition("HbA1c", _label(r"hba1c|a1c|ha?emoglobin\s*a1c")),

    # Lipids
    MarkerDefinition("Total Cholesterol", _label(
        r"total\s+cholesterol"
        r"|(?<!hdl\s)(?<!ldl\s)(?<!hdl-)(?<!ldl-)cholesterol(?:,?\s+total)?"
    )),
    MarkerDefinition("HDL", _label(r"(?<!non-)(?<!non\s)hdl(?:[\s\-]+cholesterol|-c)?")),
    MarkerDefinition("LDL", _label(r"ldl(?:[\s\-]+cholesterol|-c)?")),
    MarkerDefinition("Triglycerides", _label(r"triglycerides?|tg")),

    # Renal
    MarkerDefinition("Creatinine", _label(r"(?:serum\s+)?creatinine")),
    MarkerDefinition("BUN", _label(r"bun|blood\s+urea\s+nitrogen")),

    # Electrolytes
    MarkerDefinition("Sodium", _label(r"sodium|na\+?")),
    MarkerDefinition("Potassium", _label(r"potassium|k\+|(?<!vitamin\s)k(?=\s*:)")),
    MarkerDefinition("Calcium", _label(r"calcium")),

    # Liver
    MarkerDefinition("ALT", _label(r"alt|sgpt|alanine\s+aminotransferase")),

    # Thyroid
    MarkerDefinition("TSH", _label(r"tsh|thyroid\s+stimulating\s+hormone")),

    # Vitamins
    MarkerDefinition("Vitamin D", _label(r"vitamin\s*d3?|25[\s\-]?oh\s+vitamin\s*d|vit\.?\s*d")),
    MarkerDefinition("Vitamin B12", _label(r"vitamin\s*b[\s\-]?12|vit\.?\s*b[\s\-]?12|cobalamin")),
)

# Pseudo-markers stored alongside marker values in ExtractedData
PATIENT_NAME_KEY = "Patient Name"
TEST_DATE_KEY = "Test Date"
PSEUDO_MARKERS = frozenset({PATIENT_NAME_KEY, TEST_DATE_KEY})
