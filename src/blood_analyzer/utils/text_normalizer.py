# ============================================================================
# src/blood_analyzer/utils/text_normalizer.py
# ============================================================================
"""
Text Normalization Utilities

Corrects systematic OCR confusions in blood-test report text before marker
extraction. Rules are an explicit ordered list of (pattern, replacement)
pairs, each applied to the whole text before the next one runs:

1. vertical_bar   "|" -> "I"
2. digit_prefix   "1"/"l"/"i"/"I" glued between a lowercase word and a
                  digit run -> "L" (sees the "I" produced by rule 1)
3. mg_dl_unit     garbled mg/dL -> "mg/dL" (sees bars already turned to "I")
4. iu_l_unit      garbled IU/L -> "IU/L"
5. decimal_comma  digit,digit -> digit.digit

The comma rule is locale-naive: "1,200" becomes "1.200". True thousands
separators are misread; this matches how the reports we ingest are printed.
"""

import re
import logging
from dataclasses import dataclass
from typing import List, Optional, Pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizationRule:
    """One OCR correction applied globally to the text."""
    name: str
    pattern: Pattern
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


# Letters OCR engines produce for "L", "I" and "|" at the end of a unit
_L_LIKE = r"[Ll1I]"

# Order matters, see module docstring
OCR_CORRECTION_RULES: List[NormalizationRule] = [
    NormalizationRule(
        name="vertical_bar",
        pattern=re.compile(r"\|"),
        replacement="I",
    ),
    NormalizationRule(
        name="digit_prefix",
        pattern=re.compile(r"(?<=[a-z]{2})[1liI](?=\d)"),
        replacement="L",
    ),
    NormalizationRule(
        name="mg_dl_unit",
        pattern=re.compile(
            r"(?<![A-Za-z])(?:rn|m|r)[gq9]\s*/\s*(?:cl|d|[0-9])" + _L_LIKE + r"(?![A-Za-z])",
            re.IGNORECASE,
        ),
        replacement="mg/dL",
    ),
    NormalizationRule(
        name="iu_l_unit",
        pattern=re.compile(
            r"(?<![A-Za-z])(?:I|(?<![0-9])[1l])[UV]\s*/\s*" + _L_LIKE + r"(?![A-Za-z])",
            re.IGNORECASE,
        ),
        replacement="IU/L",
    ),
    NormalizationRule(
        name="decimal_comma",
        pattern=re.compile(r"(?<=\d),(?=\d)"),
        replacement=".",
    ),
]


def normalize(raw: Optional[str]) -> str:
    """
    Apply every OCR correction rule, in order, to raw recognized text.

    Examples:
        "Glucose 250 rng/d1"  -> "Glucose 250 mg/dL"
        "ALT 40 1U/l"         -> "ALT 40 IU/L"
        "Hemoglobin 13,5"     -> "Hemoglobin 13.5"
    """
    if not raw:
        return ""

    result = raw
    for rule in OCR_CORRECTION_RULES:
        corrected = rule.apply(result)
        if corrected != result:
            logger.debug(f"OCR rule '{rule.name}' rewrote text")
        result = corrected

    return result
