# ============================================================================
# src/blood_analyzer/constants/reference_ranges.py
# ============================================================================
"""
Reference Ranges
- Normal adult range and unit per marker
- Loaded from knowledge/reference_ranges.json so the numbers can be
  updated without touching extraction or classification code
"""

import json
import logging
from pathlib import Path
from collections.abc import Mapping
from typing import Dict, Iterator, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from ..config import base_settings
from ..utils.exceptions import ReferenceRangeError

logger = logging.getLogger(__name__)


class ReferenceRange(BaseModel):
    """Acceptable numeric interval for one marker (inclusive both ends)."""
    model_config = ConfigDict(frozen=True)

    marker_name: str
    min: float
    max: float
    unit: str

    @model_validator(mode="after")
    def check_bounds(self) -> "ReferenceRange":
        if self.min > self.max:
            raise ValueError(f"min {self.min} is greater than max {self.max}")
        return self

    def describe(self) -> str:
        """Human-readable range, e.g. '12-16 g/dL'"""
        return f"{self.min:g}-{self.max:g} {self.unit}"


class ReferenceRangeTable(Mapping):
    """
    Read-only lookup of marker name -> ReferenceRange.

    Behaves like a dict; markers without an entry are simply absent.
    """

    def __init__(self, ranges: Dict[str, ReferenceRange]):
        self._ranges = dict(ranges)

    def __getitem__(self, marker_name: str) -> ReferenceRange:
        return self._ranges[marker_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def lookup(self, marker_name: str) -> Optional[ReferenceRange]:
        return self._ranges.get(marker_name)

    @classmethod
    def from_dict(cls, data: Dict[str, Dict]) -> "ReferenceRangeTable":
        """
        Build a table from {marker: {"min": .., "max": .., "unit": ..}}.

        Raises:
            ReferenceRangeError: if any entry is malformed
        """
        if not isinstance(data, dict):
            raise ReferenceRangeError("Reference range data must be a JSON object")

        ranges = {}
        for marker_name, values in data.items():
            try:
                ranges[marker_name] = ReferenceRange(marker_name=marker_name, **values)
            except (ValidationError, TypeError) as e:
                raise ReferenceRangeError(
                    f"Invalid reference range for {marker_name}: {e}",
                    marker_name=marker_name
                ) from e
        return cls(ranges)

    @classmethod
    def from_json(cls, path: Path) -> "ReferenceRangeTable":
        """
        Load a table from a JSON file.

        Raises:
            ReferenceRangeError: if the file is missing, not JSON, or malformed
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ReferenceRangeError(f"Cannot load reference ranges from {path}: {e}") from e

        table = cls.from_dict(data)
        logger.debug(f"Loaded {len(table)} reference ranges from {path}")
        return table


REFERENCE_RANGES = ReferenceRangeTable.from_json(base_settings.get_reference_ranges_path())
