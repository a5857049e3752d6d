# ============================================================================
# src/blood_analyzer/processors/narrative/generator.py
# ============================================================================
"""
Narrative Generator

Builds a plain-language summary from classified markers and the user's
demographic profile. The wording is chosen by simple rules (abnormal count,
age, sex, BMI). It is a placeholder for a real analysis service and is not
a clinically validated interpretation.
"""

import logging
from typing import List, Mapping, Optional

from ...config import narrative_settings
from ...constants.marker_definitions import PSEUDO_MARKERS
from ...core.context.enums import ClassificationStatus, Sex
from ...core.context.user_profile import UserProfile
from ...utils.exceptions import ProfileIncompleteError
from ...utils.health_metrics import bmi
from ...validators.classifier import Classifier

logger = logging.getLogger(__name__)


ALL_NORMAL_MESSAGE = (
    "Good news: all of your analyzed blood markers are within their normal "
    "ranges. Keep up a healthy lifestyle and continue with routine checkups."
)

AGING_CAVEAT = (
    "Some of these values naturally shift with age, so age-adjusted reference "
    "ranges may apply to you."
)

FEMALE_CAVEAT = (
    "Hormonal variation, for example across the menstrual cycle, pregnancy or "
    "menopause, can influence several of these markers."
)

MALE_CAVEAT = (
    "Several markers have sex-specific reference ranges, so these results "
    "should be read against ranges for men."
)

CLOSING_RECOMMENDATION = (
    "Please consult a healthcare provider to discuss these results. This "
    "summary is generated from simple rules and is not a medical diagnosis."
)


class NarrativeGenerator:
    """
    Rule-based summary writer.

    Stateless apart from its classifier and thresholds; safe to share.
    """

    def __init__(
        self,
        classifier: Optional[Classifier] = None,
        age_threshold: Optional[int] = None,
        bmi_threshold: Optional[float] = None,
    ):
        self.classifier = classifier or Classifier()
        self.age_threshold = (
            age_threshold if age_threshold is not None
            else narrative_settings.AGE_CAVEAT_THRESHOLD
        )
        self.bmi_threshold = (
            bmi_threshold if bmi_threshold is not None
            else narrative_settings.BMI_CAVEAT_THRESHOLD
        )

    def abnormal_markers(self, extracted: Mapping[str, str]) -> List[str]:
        """Markers whose status is anything but Normal, in extraction order."""
        return [
            name for name, value in extracted.items()
            if name not in PSEUDO_MARKERS
            and self.classifier.classify(name, value) != ClassificationStatus.NORMAL
        ]

    def generate(self, extracted: Mapping[str, str], profile: UserProfile) -> str:
        """
        Compose the narrative.

        Raises:
            ProfileIncompleteError: if the profile is not complete
        """
        if not profile.is_complete:
            raise ProfileIncompleteError(
                "Narrative generation requires a complete profile",
                missing_fields=profile.missing_fields,
            )

        abnormal = self.abnormal_markers(extracted)
        if not abnormal:
            return ALL_NORMAL_MESSAGE

        noun = "marker" if len(abnormal) == 1 else "markers"
        parts = [
            f"Your results show {len(abnormal)} {noun} outside the normal range: "
            f"{', '.join(abnormal)}."
        ]

        if profile.age > self.age_threshold:
            parts.append(AGING_CAVEAT)

        if profile.sex == Sex.FEMALE:
            parts.append(FEMALE_CAVEAT)
        elif profile.sex == Sex.MALE:
            parts.append(MALE_CAVEAT)

        body_mass_index = bmi(profile.weight_kg, profile.height_cm)
        if body_mass_index > self.bmi_threshold:
            parts.append(
                f"Your BMI of {body_mass_index:.1f} is above the healthy range; "
                f"weight management through diet and regular exercise may help "
                f"improve these markers."
            )

        parts.append(CLOSING_RECOMMENDATION)

        logger.debug(f"Narrative built for {len(abnormal)} abnormal markers")
        return " ".join(parts)


_default_generator = NarrativeGenerator()


def generate(extracted: Mapping[str, str], profile: UserProfile) -> str:
    """Generate a narrative with default classifier and thresholds."""
    return _default_generator.generate(extracted, profile)
