# ============================================================================
# src/blood_analyzer/config/base_config.py
# ============================================================================
"""
Base Configuration
- Package knowledge directory
- Reference range data file
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseSettingsConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Versioned data files shipped with the package
    KNOWLEDGE_DIR: Path = Field(
        default_factory=lambda: Path(__file__).parent.parent / "knowledge",
        description="Directory holding the bundled clinical data files"
    )

    # Override to point at an externally maintained range table
    REFERENCE_RANGES_FILE: Optional[Path] = Field(
        default=None,
        description="Reference range JSON file (defaults to KNOWLEDGE_DIR/reference_ranges.json)"
    )

    def get_reference_ranges_path(self) -> Path:
        """Resolve the reference range file, falling back to the bundled copy"""
        if self.REFERENCE_RANGES_FILE is not None:
            return self.REFERENCE_RANGES_FILE
        return self.KNOWLEDGE_DIR / "reference_ranges.json"


# Global instance
base_settings = BaseSettingsConfig()
