# ============================================================================
# src/blood_analyzer/processors/narrative/agent.py
# ============================================================================
"""
Narrative Agent

Asynchronous wrapper around NarrativeGenerator. The fixed delay stands in
for a call to an external analysis service; it is awaited, not slept, so a
superseding request can cancel it.
"""

import asyncio
from typing import Any, Dict, Optional

from ...config import narrative_settings
from ...core.agent_base import Agent
from ...core.context.session_context import SessionContext
from .generator import NarrativeGenerator


class NarrativeAgent(Agent):
    """
    Produce a narrative for the session's current extraction and profile.

    The extraction/profile pair is captured when execution starts; the
    narrative is stored only if that extraction is still current when the
    delay ends.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        generator: Optional[NarrativeGenerator] = None,
    ):
        super().__init__(config)
        self.generator = generator or NarrativeGenerator()
        self.delay_seconds = float(
            self.config.get("delay_seconds", narrative_settings.NARRATIVE_DELAY_SECONDS)
        )

    def get_name(self) -> str:
        return "NarrativeAgent"

    async def execute(self, context: SessionContext) -> Dict[str, Any]:
        """
        Returns:
            {
                "decision": "generated" | "stale" | "skipped",
                "reasoning": str,
                "narrative": Optional[str]
            }
        """
        snapshot = context.snapshot()

        if not snapshot.profile.is_complete:
            return {
                "decision": "skipped",
                "reasoning": f"Profile incomplete: {', '.join(snapshot.profile.missing_fields)}",
                "narrative": None,
            }

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        narrative = self.generator.generate(snapshot.extracted, snapshot.profile)

        if not context.set_narrative(narrative, snapshot):
            return {
                "decision": "stale",
                "reasoning": "Extraction replaced while the narrative was being prepared",
                "narrative": None,
            }

        return {
            "decision": "generated",
            "reasoning": f"Narrative for extraction {snapshot.extraction_id}",
            "narrative": narrative,
        }
