# ============================================================================
# FILE: tests/unit/test_health_metrics.py
# ============================================================================
"""
Unit tests for BMI and numeric parsing
"""

import pytest

from blood_analyzer.utils.health_metrics import BMI_NOT_AVAILABLE, bmi
from blood_analyzer.utils.parsing import parse_numeric_value


def test_bmi_rounds_half_up():
    """80 kg / 1.6 m squared is exactly 31.25"""
    assert bmi(80, 160) == 31.3


def test_bmi_other_values():
    assert bmi(70, 175) == 22.9
    assert bmi("80", "160") == 31.3


@pytest.mark.parametrize("weight,height", [
    (None, 160),
    (80, None),
    (80, 0),
    (0, 160),
    (-80, 160),
    ("heavy", 160),
])
def test_bmi_not_available(weight, height):
    assert bmi(weight, height) == BMI_NOT_AVAILABLE == 0.0


@pytest.mark.parametrize("raw,expected", [
    ("12.5", 12.5),
    (" 250 ", 250.0),
    ("13.5 g/dL", 13.5),
    (".5", 0.5),
    ("-1", -1.0),
    (7, 7.0),
])
def test_parse_numeric_value(raw, expected):
    assert parse_numeric_value(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "g/dL", None, True, float("nan"), float("inf")])
def test_parse_numeric_value_rejects(raw):
    assert parse_numeric_value(raw) is None


@pytest.mark.parametrize("weight,height", [
    (80, 1e-200),
    (1e305, 1e-5),
])
def test_bmi_extreme_inputs_not_available(weight, height):
    """Positive inputs whose result is not a finite number"""
    assert bmi(weight, height) == BMI_NOT_AVAILABLE
