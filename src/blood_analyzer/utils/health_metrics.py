# ============================================================================
# src/blood_analyzer/utils/health_metrics.py
# ============================================================================
"""
Body metrics derived from the user profile.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from .parsing import parse_numeric_value

# Returned when BMI cannot be computed; never a real BMI
BMI_NOT_AVAILABLE = 0.0


def bmi(weight_kg, height_cm) -> float:
    """
    Body mass index, weight(kg) / height(m)^2, rounded half-up to 1 decimal.

    Accepts numbers or numeric strings. Missing, non-numeric or
    non-positive inputs return BMI_NOT_AVAILABLE (0), as do inputs too
    extreme for a finite result.

    Examples:
        bmi(80, 160)   -> 31.3
        bmi(None, 160) -> 0.0
    """
    weight = parse_numeric_value(weight_kg)
    height = parse_numeric_value(height_cm)
    if weight is None or height is None or weight <= 0 or height <= 0:
        return BMI_NOT_AVAILABLE

    # kg * 10000 / cm^2 keeps 80kg/160cm exactly at 31.25 before rounding
    # Extreme inputs can underflow the square to 0 or overflow the quotient
    height_squared = height * height
    if height_squared == 0:
        return BMI_NOT_AVAILABLE
    value = weight * 10000 / height_squared
    if not math.isfinite(value):
        return BMI_NOT_AVAILABLE
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
