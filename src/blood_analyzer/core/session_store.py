# ============================================================================
# src/blood_analyzer/core/session_store.py
# ============================================================================
"""
Session Key-Value Store Boundary

The host environment hands data between pipeline stages through an
ephemeral, session-scoped string store. After every successful extraction
cycle four entries are written under stable keys:

- ocrText:       normalized text
- extractedData: extracted marker mapping (JSON)
- imageData:     optional image representation (e.g. a data URI) or ""
- userProfile:   current user profile (JSON)

InMemorySessionStore is the reference implementation; a host adapter only
needs get/set/delete.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

OCR_TEXT_KEY = "ocrText"
EXTRACTED_DATA_KEY = "extractedData"
IMAGE_DATA_KEY = "imageData"
USER_PROFILE_KEY = "userProfile"

SESSION_KEYS = (OCR_TEXT_KEY, EXTRACTED_DATA_KEY, IMAGE_DATA_KEY, USER_PROFILE_KEY)


class SessionStore(ABC):
    """String key -> string value store scoped to one user session."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass

    def get_json(self, key: str) -> Optional[Any]:
        raw = self.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set_json(self, key: str, value: Any) -> None:
        self.set(key, json.dumps(value, ensure_ascii=False))


class InMemorySessionStore(SessionStore):
    """Dict-backed store, one instance per session."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Session store values must be strings, got {type(value).__name__}")
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return list(self._data.keys())


def write_extraction_cycle(
    store: SessionStore,
    normalized_text: str,
    extracted: Mapping[str, str],
    image_data: str,
    profile: Dict[str, Any],
) -> None:
    """Write the four post-extraction entries, each replaced wholesale."""
    store.set(OCR_TEXT_KEY, normalized_text)
    store.set_json(EXTRACTED_DATA_KEY, dict(extracted))
    store.set(IMAGE_DATA_KEY, image_data or "")
    store.set_json(USER_PROFILE_KEY, profile)
    logger.debug(f"Session store updated: {', '.join(SESSION_KEYS)}")
