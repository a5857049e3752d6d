# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest

from blood_analyzer.core.context.session_context import SessionContext
from blood_analyzer.core.context.user_profile import UserProfile
from blood_analyzer.processors.narrative.agent import NarrativeAgent


@pytest.fixture
def sample_report_text():
    """Sample blood test report as an OCR engine would return it"""
    return (
        "City Lab Diagnostics\n"
        "Patient Name: Jane Doe\n"
        "Date: 12/03/2024\n"
        "\n"
        "Hemoglobin: 13.5 g/dL\n"
        "Glucose : 250 mg/dL\n"
        "Total Cholesterol: 180 mg/dL\n"
        "HDL Cholesterol: 55 mg/dL\n"
        "LDL Cholesterol: 130 mg/dL\n"
        "Potassium: 4.2 mmol/L\n"
        "Vitamin D: 18 ng/mL\n"
    )


@pytest.fixture
def complete_profile():
    """Complete profile: 35 year old woman, 80 kg, 160 cm (BMI 31.3)"""
    return UserProfile(age=35, weight_kg=80, height_cm=160, sex="female")


@pytest.fixture
def session_context(complete_profile):
    """Session with a complete profile and no extraction yet"""
    return SessionContext(profile=complete_profile)


@pytest.fixture
def instant_agent():
    """Narrative agent without the simulated delay"""
    return NarrativeAgent({"delay_seconds": 0})
