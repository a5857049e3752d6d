# ============================================================================
# FILE: tests/unit/test_agent_base.py
# ============================================================================
"""
Unit tests for the agent base class
"""

import pytest

from blood_analyzer.core.agent_base import Agent
from blood_analyzer.core.context.session_context import SessionContext


class EchoAgent(Agent):
    def get_name(self):
        return "EchoAgent"

    async def execute(self, context):
        return {"decision": "echo", "reasoning": self.config.get("message", "")}


@pytest.mark.asyncio
async def test_run_records_execution():
    agent = EchoAgent({"message": "hi"})
    context = SessionContext()

    result = await agent.run(context)

    assert result == {"decision": "echo", "reasoning": "hi"}
    assert context.agent_executions[0]["agent"] == "EchoAgent"
    assert context.agent_executions[0]["decision"] == "echo"

    metrics = agent.get_metrics()
    assert metrics["agent_name"] == "EchoAgent"
    assert metrics["execution_count"] == 1


def test_metrics_before_any_run():
    metrics = EchoAgent().get_metrics()

    assert metrics["execution_count"] == 0
    assert metrics["average_duration_seconds"] == 0.0
