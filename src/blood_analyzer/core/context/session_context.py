# ============================================================================
# src/blood_analyzer/core/context/session_context.py
# ============================================================================
"""
SessionContext
- State for one user session, passed explicitly between components
- Holds the latest extraction, the user profile and the latest narrative
- Every update swaps in a new value; readers never see a half-written one
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from ..session_store import (
    InMemorySessionStore,
    SessionStore,
    USER_PROFILE_KEY,
    write_extraction_cycle,
)
from ...utils.logging import SessionLogAdapter
from .user_profile import UserProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisSnapshot:
    """Extraction result and profile captured together for one narrative run."""
    extracted: Mapping[str, str]
    profile: UserProfile
    extraction_id: int


@dataclass
class SessionContext:
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    store: SessionStore = field(default_factory=InMemorySessionStore)
    created_at: datetime = field(default_factory=datetime.now)

    profile: UserProfile = field(default_factory=UserProfile)
    normalized_text: str = ""
    extracted: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    image_data: str = ""
    extraction_id: int = 0

    narrative: Optional[str] = None
    narrative_extraction_id: Optional[int] = None

    agent_executions: List[Dict] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    # ========================================================================
    # PROFILE
    # ========================================================================

    def update_profile(self, **changes: Any) -> UserProfile:
        """Replace the profile with an updated copy and publish it."""
        self.profile = self.profile.with_updates(**changes)
        self.store.set_json(USER_PROFILE_KEY, self.profile.to_dict())
        self.log_for(logger).debug(f"Profile updated ({', '.join(changes)})")
        return self.profile

    def log_for(self, base: logging.Logger) -> SessionLogAdapter:
        """``base`` bound to this session and its current extraction."""
        return SessionLogAdapter(base, self.session_id, extraction_id=self.extraction_id)

    @property
    def can_generate_narrative(self) -> bool:
        return self.profile.is_complete

    # ========================================================================
    # EXTRACTION
    # ========================================================================

    def replace_extraction(
        self,
        normalized_text: str,
        extracted: Mapping[str, str],
        image_data: str = ""
    ):
        """
        Swap in the result of a new extraction cycle.

        The previous narrative described the previous extraction, so it is
        cleared.
        """
        self.normalized_text = normalized_text
        self.extracted = MappingProxyType(dict(extracted))
        self.image_data = image_data or ""
        self.extraction_id += 1
        self.narrative = None
        self.narrative_extraction_id = None

        write_extraction_cycle(
            self.store,
            normalized_text=self.normalized_text,
            extracted=self.extracted,
            image_data=self.image_data,
            profile=self.profile.to_dict(),
        )

    def snapshot(self) -> AnalysisSnapshot:
        return AnalysisSnapshot(
            extracted=self.extracted,
            profile=self.profile,
            extraction_id=self.extraction_id,
        )

    # ========================================================================
    # NARRATIVE
    # ========================================================================

    def set_narrative(self, narrative: str, snapshot: AnalysisSnapshot) -> bool:
        """
        Store a narrative produced from ``snapshot``.

        Narratives computed for an extraction that has since been replaced
        are dropped. Returns True when stored.
        """
        if snapshot.extraction_id != self.extraction_id:
            self.log_for(logger).info(
                f"Discarding narrative for stale extraction "
                f"{snapshot.extraction_id} (current {self.extraction_id})"
            )
            return False

        self.narrative = narrative
        self.narrative_extraction_id = snapshot.extraction_id
        return True

    # ========================================================================
    # AUDIT
    # ========================================================================

    def log_agent_execution(self, agent_name: str, decision: Dict[str, Any]):
        self.agent_executions.append({
            "agent": agent_name,
            "timestamp": datetime.now().isoformat(),
            **decision,
        })

    def add_warning(self, warning: str):
        self.warnings.append(warning)
