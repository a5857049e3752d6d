# ============================================================================
# FILE: src/blood_analyzer/validators/classifier.py
# ============================================================================
"""
Reference Range Classification

Compares an extracted marker value with its reference range.

Example:
- Hemoglobin 13.5 (range 12-16) → Normal
- Glucose 250 (range 70-99) → High
- Glucose "abc" → Unknown
"""

import logging
from typing import Optional

from ..constants.reference_ranges import REFERENCE_RANGES, ReferenceRangeTable
from ..core.context.enums import ClassificationStatus
from ..utils.parsing import parse_numeric_value


logger = logging.getLogger(__name__)


class Classifier:
    """
    Classify marker values as Low / Normal / High / Unknown.

    Both range bounds are inclusive. Markers without a range and values
    that are not numbers come back as Unknown; nothing here raises.
    """

    def __init__(self, ranges: Optional[ReferenceRangeTable] = None):
        self.ranges = ranges if ranges is not None else REFERENCE_RANGES

    def classify(self, marker_name: str, raw_value: str) -> ClassificationStatus:
        """
        Classify one value.

        Args:
            marker_name: Marker name as produced by the extractor
            raw_value: Raw value string (e.g. "13.5")

        Returns:
            ClassificationStatus
        """
        reference = self.ranges.lookup(marker_name) if isinstance(marker_name, str) else None
        if reference is None:
            return ClassificationStatus.UNKNOWN

        value = parse_numeric_value(raw_value)
        if value is None:
            logger.debug(f"{marker_name}: non-numeric value {raw_value!r}")
            return ClassificationStatus.UNKNOWN

        if value < reference.min:
            return ClassificationStatus.LOW

        if value > reference.max:
            return ClassificationStatus.HIGH

        return ClassificationStatus.NORMAL

    def batch_classify(self, values: dict) -> dict:
        """
        Classify several values at once.

        Args:
            values: {marker_name: raw_value, ...}

        Returns:
            {marker_name: ClassificationStatus, ...}
        """
        return {
            marker_name: self.classify(marker_name, raw_value)
            for marker_name, raw_value in values.items()
        }


_default_classifier = Classifier()


def classify(marker_name: str, raw_value: str) -> ClassificationStatus:
    """Convenience function using the bundled reference ranges."""
    return _default_classifier.classify(marker_name, raw_value)
