# ============================================================================
# src/blood_analyzer/extractors/marker_extractor.py
# ============================================================================
"""
Marker Extraction

Pulls clinical marker values, a test date and a patient name out of
normalized report text using the regex registry in
constants/marker_definitions.py.

Every marker is searched independently over the full text and only its
leftmost match is kept, so one marker's presence never changes another's
result. Anything that does not match is left out of the result; a sparse
or empty dict is a valid outcome.
"""

import re
import logging
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

from ..constants.marker_definitions import (
    MARKER_DEFINITIONS,
    MarkerDefinition,
    PATIENT_NAME_KEY,
    TEST_DATE_KEY,
)

logger = logging.getLogger(__name__)

ExtractedData = Dict[str, str]

# DD/MM/YYYY or MM/DD/YYYY with the same separator twice, 2-4 digit year
DATE_PATTERN = re.compile(
    r"(?<![\d.])(\d{1,2})([/\-.])(\d{1,2})\2(\d{2,4})(?!\d)"
)

# "Patient:", "Patient Name:" or "Name:" followed by letters up to the line end
PATIENT_NAME_PATTERN = re.compile(
    r"\b(?:patient(?:\s+name)?|name)[ \t]*[:\-][ \t]*([A-Za-z][A-Za-z ]*?)[ \t]*(?:\r?\n|$)",
    re.IGNORECASE | re.MULTILINE,
)


class MarkerExtractor:
    """
    Applies a fixed registry of marker patterns to normalized text.

    Holds only compiled patterns, so one instance can be shared between
    sessions and threads.
    """

    def __init__(self, definitions: Iterable[MarkerDefinition] = MARKER_DEFINITIONS):
        self.definitions: Tuple[MarkerDefinition, ...] = tuple(definitions)
        self._compiled: List[Tuple[MarkerDefinition, Pattern]] = [
            (definition, re.compile(definition.pattern, re.IGNORECASE))
            for definition in self.definitions
        ]

    def extract(self, normalized: Optional[str]) -> ExtractedData:
        """
        Extract marker values, test date and patient name.

        Args:
            normalized: Output of text_normalizer.normalize()

        Returns:
            {marker name: raw value string}, plus "Test Date" and
            "Patient Name" when found
        """
        extracted: ExtractedData = {}
        if not normalized:
            return extracted

        for definition, pattern in self._compiled:
            match = pattern.search(normalized)
            if match:
                extracted[definition.name] = match.group(definition.value_group)

        test_date = self.extract_test_date(normalized)
        if test_date:
            extracted[TEST_DATE_KEY] = test_date

        patient_name = self.extract_patient_name(normalized)
        if patient_name:
            extracted[PATIENT_NAME_KEY] = patient_name

        logger.debug(
            f"Extracted {len(extracted)} fields "
            f"({len(self._compiled)} marker patterns evaluated)"
        )
        return extracted

    def extract_test_date(self, text: str) -> Optional[str]:
        """
        First date-like token in text order, verbatim.

        No calendar validation: "31/02/2024" is returned as-is.
        """
        dates = [match.group(0) for match in DATE_PATTERN.finditer(text or "")]
        if not dates:
            return None
        if len(dates) > 1:
            logger.debug(f"Found {len(dates)} date candidates, using the first")
        return dates[0]

    def extract_patient_name(self, text: str) -> Optional[str]:
        match = PATIENT_NAME_PATTERN.search(text or "")
        if not match:
            return None
        name = match.group(1).strip()
        return name or None


_default_extractor = MarkerExtractor()


def extract(normalized: Optional[str]) -> ExtractedData:
    """Extract with the default marker registry."""
    return _default_extractor.extract(normalized)
