# src/blood_analyzer/utils/parsing.py
"""
Parsing utilities for extracted marker values.
"""

import math
import re
from typing import Any, Optional

_LEADING_NUMBER = re.compile(r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)')


def parse_numeric_value(value: Any) -> Optional[float]:
    """
    Read a decimal number from the start of a raw value.

    Handles values like:
    - "12.5"
    - " 250 "     (surrounding whitespace)
    - "13.5 g/dL" (trailing unit or flag)

    Returns None for anything that does not start with a number
    ("abc", "", "g/dL", None) and for non-finite results.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None

    if not isinstance(value, str):
        return None

    match = _LEADING_NUMBER.match(value.strip())
    if not match:
        return None

    try:
        number = float(match.group(0))
    except ValueError:
        return None

    return number if math.isfinite(number) else None
