# ============================================================================
# src/blood_analyzer/core/agent_base.py
# ============================================================================
"""
Abstract Base Agent Class

Asynchronous steps of the analysis (currently the narrative request)
inherit from this base class.

Every agent must implement:
- execute(context): Main processing logic
- get_name(): Agent identifier

Every agent gets:
- Logging
- Timing and execution metrics
- An execution entry on the session context
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
import asyncio
import logging
from datetime import datetime

from .context.session_context import SessionContext


class Agent(ABC):
    """
    Abstract base class for asynchronous processing agents.

    Agents read from and write to the SessionContext they are given and
    report a result dict with at least "decision" and "reasoning".
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize agent with configuration.

        Args:
            config: Per-agent overrides
        """
        self.config = dict(config or {})
        self.logger = logging.getLogger(f"{__name__}.{self.get_name()}")
        self._execution_count = 0
        self._total_duration = 0.0

    @abstractmethod
    async def execute(self, context: SessionContext) -> Dict[str, Any]:
        """
        Main agent execution logic.

        Args:
            context: Session context (read and modify)

        Returns:
            Dict containing:
                - decision: Agent's decision/output
                - reasoning: Human-readable explanation
                - any additional fields
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """
        Return agent name for logging and the execution log.

        Example: "NarrativeAgent"
        """
        pass

    async def run(self, context: SessionContext) -> Dict[str, Any]:
        """
        Wrapper around execute() that handles logging, timing, and errors.

        Cancellation is not an error: it propagates to the caller after
        being recorded.
        """
        agent_name = self.get_name()
        start_time = datetime.now()

        log = context.log_for(self.logger)
        log.info(f"Executing {agent_name}")

        try:
            result = await self.execute(context)

            duration = (datetime.now() - start_time).total_seconds()
            self._execution_count += 1
            self._total_duration += duration

            context.log_agent_execution(
                agent_name=agent_name,
                decision={
                    **result,
                    "duration_seconds": duration,
                    "execution_number": self._execution_count
                }
            )

            log.info(f"{agent_name} completed in {duration:.2f}s ({result.get('decision')})")

            return result

        except asyncio.CancelledError:
            duration = (datetime.now() - start_time).total_seconds()
            log.info(f"{agent_name} cancelled after {duration:.2f}s")
            context.log_agent_execution(
                agent_name=agent_name,
                decision={"decision": "cancelled", "duration_seconds": duration}
            )
            raise

        except Exception as e:
            duration = (datetime.now() - start_time).total_seconds()

            log.error(f"{agent_name} failed: {str(e)}", exc_info=True)

            context.log_agent_execution(
                agent_name=agent_name,
                decision={
                    "error": str(e),
                    "duration_seconds": duration,
                    "execution_number": self._execution_count
                }
            )

            context.add_warning(f"{agent_name} failed: {str(e)}")

            return {
                "decision": "error",
                "reasoning": f"Agent execution failed: {str(e)}",
                "error": str(e)
            }

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get agent performance metrics.

        Returns:
            Dict with execution count, total time, average time
        """
        avg_duration = (
            self._total_duration / self._execution_count
            if self._execution_count > 0
            else 0.0
        )

        return {
            "agent_name": self.get_name(),
            "execution_count": self._execution_count,
            "total_duration_seconds": self._total_duration,
            "average_duration_seconds": avg_duration,
        }
