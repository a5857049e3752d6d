# ============================================================================
# FILE: tests/unit/test_text_normalizer.py
# ============================================================================
"""
Unit tests for OCR text normalization
"""

import pytest

from blood_analyzer.utils.text_normalizer import normalize, OCR_CORRECTION_RULES


def test_rules_are_ordered():
    """Rules run in a fixed, documented order"""
    assert [rule.name for rule in OCR_CORRECTION_RULES] == [
        "vertical_bar",
        "digit_prefix",
        "mg_dl_unit",
        "iu_l_unit",
        "decimal_comma",
    ]


def test_empty_input():
    assert normalize("") == ""
    assert normalize(None) == ""


def test_misread_mg_dl_unit():
    """'rng/d1' renders exactly as mg/dL"""
    assert normalize("Glucose 250 rng/d1") == "Glucose 250 mg/dL"


@pytest.mark.parametrize("raw", ["mg/dl", "MG/DL", "mq/dL", "rg/dL", "mg / dl", "m9/dI"])
def test_mg_dl_variants(raw):
    assert normalize(f"Glucose 95 {raw}") == "Glucose 95 mg/dL"


@pytest.mark.parametrize("raw", ["1U/l", "lU/L", "IU/l", "iu/l", "IV/L"])
def test_iu_l_variants(raw):
    assert normalize(f"ALT 40 {raw}") == "ALT 40 IU/L"


def test_vertical_bar_runs_before_unit_rules():
    """A bar read in place of 'I' is fixed before the IU/L rule sees it"""
    assert normalize("ALT 40 |U/L") == "ALT 40 IU/L"


def test_digit_prefix_reads_corrected_bar():
    """The I written by the bar rule feeds the digit-prefix rule"""
    assert normalize("Results|4.2") == "ResultsL4.2"


def test_vertical_bar_inside_mg_dl_unit():
    assert normalize("Glucose 95 mg/d|") == "Glucose 95 mg/dL"


def test_digit_prefix_after_lowercase_word():
    assert normalize("Resultsl4.2") == "ResultsL4.2"


def test_numbers_left_intact():
    """Digits, decimals and marker names containing digits are not rewritten"""
    text = "Hemoglobin 13.5\nVitamin B12: 450\nHbA1c: 5.4\nTSH 1.2 mIU/L"
    assert normalize(text) == text


def test_decimal_comma():
    assert normalize("Hemoglobin 13,5") == "Hemoglobin 13.5"


def test_decimal_comma_is_locale_naive():
    """Thousands separators are read as decimal commas"""
    assert normalize("Platelets 1,200") == "Platelets 1.200"


def test_comma_between_words_kept():
    assert normalize("Cholesterol, Total: 180") == "Cholesterol, Total: 180"


@pytest.mark.parametrize("raw", [
    "Glucose 250 rng/d1",
    "ALT 40 |U/l",
    "Hemoglobin 13,5 g/dL",
    "Resultsl4.2 1U/L",
])
def test_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once
