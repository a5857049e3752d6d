# ============================================================================
# FILE: tests/unit/test_marker_extractor.py
# ============================================================================
"""
Unit tests for marker, date and patient name extraction
"""

from blood_analyzer.constants.marker_definitions import MarkerDefinition
from blood_analyzer.extractors.marker_extractor import MarkerExtractor, extract
from blood_analyzer.utils.text_normalizer import normalize


def test_single_marker():
    assert extract("Hemoglobin: 13.5") == {"Hemoglobin": "13.5"}


def test_empty_text():
    assert extract("") == {}
    assert extract(None) == {}


def test_no_markers():
    assert extract("Thank you for choosing our laboratory") == {}


def test_full_report(sample_report_text):
    """Every marker in a typical report, in registry order"""
    extracted = extract(normalize(sample_report_text))

    assert extracted == {
        "Hemoglobin": "13.5",
        "Glucose": "250",
        "Total Cholesterol": "180",
        "HDL": "55",
        "LDL": "130",
        "Potassium": "4.2",
        "Vitamin D": "18",
        "Test Date": "12/03/2024",
        "Patient Name": "Jane Doe",
    }


def test_markers_are_independent():
    """Adding one marker to the text never changes another's value"""
    alone = extract("Glucose: 95")
    together = extract("Hemoglobin: 13.5\nGlucose: 95")

    assert alone == {"Glucose": "95"}
    assert together["Glucose"] == alone["Glucose"]
    assert together["Hemoglobin"] == "13.5"


def test_leftmost_match_wins():
    assert extract("Glucose: 95\nGlucose: 180")["Glucose"] == "95"


def test_hba1c_not_read_as_hemoglobin():
    assert extract("Hemoglobin A1c: 5.4") == {"HbA1c": "5.4"}


def test_hdl_not_read_as_total_cholesterol():
    assert extract("HDL Cholesterol: 55") == {"HDL": "55"}


def test_non_hdl_not_read_as_hdl():
    text = "Total Cholesterol: 210\nNon-HDL Cholesterol: 160\nHDL Cholesterol: 45"
    extracted = extract(normalize(text))

    assert extracted["HDL"] == "45"
    assert extracted["Total Cholesterol"] == "210"
    assert extract("Non HDL: 160") == {}


def test_electrolyte_symbols():
    assert extract("Na+: 140") == {"Sodium": "140"}
    assert extract("K: 4.1") == {"Potassium": "4.1"}


def test_vitamin_k_not_read_as_potassium():
    assert extract("Vitamin K: 1.2") == {}
    assert extract("Vitamin K: 1.2\nK: 4.1") == {"Potassium": "4.1"}


def test_test_date_first_occurrence():
    extractor = MarkerExtractor()
    text = "Collected 12/03/2024 Reported 13/03/2024"
    assert extractor.extract_test_date(text) == "12/03/2024"


def test_test_date_formats():
    extractor = MarkerExtractor()
    assert extractor.extract_test_date("Date 05-11-23") == "05-11-23"
    assert extractor.extract_test_date("Date 5.1.2024") == "5.1.2024"


def test_reference_range_is_not_a_date():
    extracted = extract("Hemoglobin 13.5 (12.0-15.5)")
    assert extracted == {"Hemoglobin": "13.5"}


def test_patient_name():
    extractor = MarkerExtractor()
    assert extractor.extract_patient_name("Name: John Smith\nAge: 45") == "John Smith"
    assert extractor.extract_patient_name("Patient: Jane Doe") == "Jane Doe"
    assert extractor.extract_patient_name("Glucose: 95") is None


def test_deterministic(sample_report_text):
    normalized = normalize(sample_report_text)
    assert extract(normalized) == extract(normalized)


def test_custom_registry():
    """New markers are added as data, without touching extraction logic"""
    ferritin = MarkerDefinition("Ferritin", r"\bferritin\s*:?\s*(\d+(?:\.\d+)?)")
    extractor = MarkerExtractor([ferritin])

    assert extractor.extract("Ferritin: 85\nGlucose: 95") == {"Ferritin": "85"}
