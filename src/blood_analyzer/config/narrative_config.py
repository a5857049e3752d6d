# ============================================================================
# src/blood_analyzer/config/narrative_config.py
# ============================================================================
"""
Narrative Settings
- Simulated analysis latency
- Demographic caveat thresholds
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NarrativeSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    NARRATIVE_DELAY_SECONDS: float = Field(
        default=1.5,
        ge=0.0,
        description="Placeholder latency standing in for an external analysis service"
    )
    AGE_CAVEAT_THRESHOLD: int = Field(
        default=50,
        description="Ages strictly above this add the aging caveat"
    )
    BMI_CAVEAT_THRESHOLD: float = Field(
        default=25.0,
        description="BMI strictly above this adds the weight-management clause"
    )


narrative_settings = NarrativeSettings()
