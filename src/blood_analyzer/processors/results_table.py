# ============================================================================
# src/blood_analyzer/processors/results_table.py
# ============================================================================
"""
Results Table

Turns extracted data into display rows (value, unit, range, status) for a
presentation layer, and renders them as plain text.
"""

from dataclasses import dataclass
from typing import List, Mapping, Optional

from ..constants.marker_definitions import PATIENT_NAME_KEY, PSEUDO_MARKERS, TEST_DATE_KEY
from ..constants.reference_ranges import REFERENCE_RANGES, ReferenceRangeTable
from ..core.context.enums import ClassificationStatus
from ..validators.classifier import Classifier

NO_MARKERS_MESSAGE = "No markers detected."


@dataclass(frozen=True)
class MarkerRow:
    name: str
    value: str
    unit: str
    reference_range: str
    status: ClassificationStatus

    @property
    def is_abnormal(self) -> bool:
        return self.status != ClassificationStatus.NORMAL


def build_result_rows(
    extracted: Mapping[str, str],
    ranges: Optional[ReferenceRangeTable] = None
) -> List[MarkerRow]:
    """One row per extracted marker, in extraction order."""
    ranges = ranges if ranges is not None else REFERENCE_RANGES
    classifier = Classifier(ranges)

    rows = []
    for name, value in extracted.items():
        if name in PSEUDO_MARKERS:
            continue
        reference = ranges.lookup(name)
        rows.append(MarkerRow(
            name=name,
            value=value,
            unit=reference.unit if reference else "",
            reference_range=reference.describe() if reference else "n/a",
            status=classifier.classify(name, value),
        ))
    return rows


def render_results(
    extracted: Mapping[str, str],
    ranges: Optional[ReferenceRangeTable] = None
) -> str:
    """
    Plain-text results listing.

    Example:
        Patient: Jane Doe
        Test date: 12/03/2024
        Hemoglobin: 13.5 g/dL (range 12-16 g/dL) - Normal
    """
    lines = []
    if extracted.get(PATIENT_NAME_KEY):
        lines.append(f"Patient: {extracted[PATIENT_NAME_KEY]}")
    if extracted.get(TEST_DATE_KEY):
        lines.append(f"Test date: {extracted[TEST_DATE_KEY]}")

    rows = build_result_rows(extracted, ranges)
    if not rows:
        lines.append(NO_MARKERS_MESSAGE)
        return "\n".join(lines)

    for row in rows:
        value = f"{row.value} {row.unit}".rstrip()
        lines.append(f"{row.name}: {value} (range {row.reference_range}) - {row.status.value}")

    return "\n".join(lines)
