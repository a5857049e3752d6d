# ============================================================================
# src/blood_analyzer/processors/narrative/coordinator.py
# ============================================================================
"""
Narrative Request Coordinator

Keeps at most one narrative request in flight per session. A new request
cancels the outstanding one before scheduling itself, so a slow earlier
request can never overwrite the result of a later one.
"""

import asyncio
import logging
from typing import Dict, Optional

from ...core.context.session_context import SessionContext
from .agent import NarrativeAgent

logger = logging.getLogger(__name__)


class NarrativeCoordinator:
    """
    Schedules NarrativeAgent runs as asyncio tasks, one per session.

    Must be used from within a running event loop.
    """

    def __init__(self, agent: Optional[NarrativeAgent] = None):
        self.agent = agent or NarrativeAgent()
        self._tasks: Dict[str, asyncio.Task] = {}

    def request(self, context: SessionContext) -> Optional[asyncio.Task]:
        """
        Start a narrative request for the session, superseding any pending one.

        Returns:
            The scheduled task, or None when the profile is incomplete and
            narrative generation is not available.
        """
        if not context.can_generate_narrative:
            context.log_for(logger).info(
                f"Narrative unavailable, missing "
                f"{', '.join(context.profile.missing_fields)}"
            )
            return None

        previous = self._tasks.get(context.session_id)
        if previous is not None and not previous.done():
            context.log_for(logger).info("Superseding pending narrative request")
            previous.cancel()

        task = asyncio.create_task(
            self.agent.run(context),
            name=f"narrative-{context.session_id}",
        )
        self._tasks[context.session_id] = task
        task.add_done_callback(lambda t, sid=context.session_id: self._forget(sid, t))
        return task

    def pending(self, session_id: str) -> Optional[asyncio.Task]:
        """The in-flight task for a session, if any."""
        task = self._tasks.get(session_id)
        if task is None or task.done():
            return None
        return task

    async def cancel(self, session_id: str) -> bool:
        """Cancel the session's pending request and wait for it to unwind."""
        task = self.pending(session_id)
        if task is None:
            return False
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        return True

    async def aclose(self):
        """Cancel every pending request."""
        tasks = [task for task in self._tasks.values() if not task.done()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

    def _forget(self, session_id: str, task: asyncio.Task):
        if self._tasks.get(session_id) is task:
            del self._tasks[session_id]
