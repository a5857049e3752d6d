# ============================================================================
# FILE: tests/unit/test_narrative_agent.py
# ============================================================================
"""
Unit tests for the narrative agent and per-session request coordination
"""

import asyncio

import pytest

from blood_analyzer.core.context.session_context import SessionContext
from blood_analyzer.core.context.user_profile import UserProfile
from blood_analyzer.processors.narrative import (
    ALL_NORMAL_MESSAGE,
    NarrativeAgent,
    NarrativeCoordinator,
)


class FailingGenerator:
    def generate(self, extracted, profile):
        raise RuntimeError("analysis service unavailable")


def test_agent_configuration():
    agent = NarrativeAgent({"delay_seconds": 0.25})

    assert agent.get_name() == "NarrativeAgent"
    assert agent.delay_seconds == 0.25


@pytest.mark.asyncio
async def test_generates_narrative(session_context, instant_agent):
    result = await instant_agent.run(session_context)

    assert result["decision"] == "generated"
    assert result["narrative"] == ALL_NORMAL_MESSAGE
    assert session_context.narrative == ALL_NORMAL_MESSAGE
    assert session_context.narrative_extraction_id == 0
    assert session_context.agent_executions[-1]["agent"] == "NarrativeAgent"


@pytest.mark.asyncio
async def test_skips_incomplete_profile(instant_agent):
    context = SessionContext(profile=UserProfile(age=35))

    result = await instant_agent.run(context)

    assert result["decision"] == "skipped"
    assert context.narrative is None


@pytest.mark.asyncio
async def test_stale_narrative_dropped(session_context):
    """A narrative for a replaced extraction is never stored"""
    agent = NarrativeAgent({"delay_seconds": 0.05})
    task = asyncio.create_task(agent.run(session_context))
    await asyncio.sleep(0)

    session_context.replace_extraction("Glucose: 250", {"Glucose": "250"})
    result = await task

    assert result["decision"] == "stale"
    assert session_context.narrative is None


@pytest.mark.asyncio
async def test_generator_failure_is_reported(session_context):
    agent = NarrativeAgent({"delay_seconds": 0}, generator=FailingGenerator())

    result = await agent.run(session_context)

    assert result["decision"] == "error"
    assert "analysis service unavailable" in result["error"]
    assert session_context.warnings
    assert session_context.narrative is None


@pytest.mark.asyncio
async def test_new_request_supersedes_pending(session_context):
    coordinator = NarrativeCoordinator(NarrativeAgent({"delay_seconds": 0.05}))

    first = coordinator.request(session_context)
    second = coordinator.request(session_context)
    result = await second
    await asyncio.gather(first, return_exceptions=True)

    assert first.cancelled()
    assert result["decision"] == "generated"
    assert session_context.narrative == ALL_NORMAL_MESSAGE
    assert coordinator.pending(session_context.session_id) is None


@pytest.mark.asyncio
async def test_request_unavailable_without_profile():
    coordinator = NarrativeCoordinator(NarrativeAgent({"delay_seconds": 0}))
    context = SessionContext(profile=UserProfile(age=35, sex="female"))

    assert coordinator.request(context) is None
    assert coordinator.pending(context.session_id) is None


@pytest.mark.asyncio
async def test_cancel_and_close(session_context):
    coordinator = NarrativeCoordinator(NarrativeAgent({"delay_seconds": 10}))

    task = coordinator.request(session_context)
    assert coordinator.pending(session_context.session_id) is task

    assert await coordinator.cancel(session_context.session_id) is True
    assert task.cancelled()
    assert await coordinator.cancel(session_context.session_id) is False

    other = SessionContext(profile=session_context.profile)
    other_task = coordinator.request(other)
    await coordinator.aclose()

    assert other_task.cancelled()
    assert session_context.narrative is None
