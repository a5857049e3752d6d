# ============================================================================
# src/blood_analyzer/core/context/user_profile.py
# ============================================================================
"""
User demographic profile
- Filled in field by field while the user works through the form
- Immutable: every update returns a new profile
"""

import dataclasses
import numbers
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .enums import Sex


def _is_positive_number(value: Any) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and value == value  # NaN
        and value > 0
    )


def _coerce_sex(value: Any) -> Optional[Sex]:
    if value is None or isinstance(value, Sex):
        return value
    try:
        return Sex(str(value).strip().lower())
    except ValueError:
        return None


@dataclass(frozen=True)
class UserProfile:
    age: Optional[int] = None
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    sex: Optional[Sex] = None

    def __post_init__(self):
        # Accept "female" / "Male" from form input
        object.__setattr__(self, "sex", _coerce_sex(self.sex))

    @property
    def missing_fields(self) -> List[str]:
        """Fields that are absent or hold an invalid value"""
        missing = []
        if not (isinstance(self.age, int) and not isinstance(self.age, bool) and self.age > 0):
            missing.append("age")
        if not _is_positive_number(self.weight_kg):
            missing.append("weight_kg")
        if not _is_positive_number(self.height_cm):
            missing.append("height_cm")
        if self.sex is None:
            missing.append("sex")
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields

    def with_updates(self, **changes: Any) -> "UserProfile":
        """Return a new profile with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "age": self.age,
            "weight_kg": self.weight_kg,
            "height_cm": self.height_cm,
            "sex": self.sex.value if self.sex else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserProfile":
        return cls(
            age=data.get("age"),
            weight_kg=data.get("weight_kg"),
            height_cm=data.get("height_cm"),
            sex=data.get("sex"),
        )
