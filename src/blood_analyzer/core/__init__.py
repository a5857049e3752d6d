# ============================================================================
# src/blood_analyzer/core/__init__.py
# ============================================================================
"""
Core components: session state, the session store boundary and the
agent base class.

ExtractionPipeline lives in core.pipeline and is imported from there.
"""

from .context import SessionContext, AnalysisSnapshot, UserProfile, ClassificationStatus, Sex
from .session_store import SessionStore, InMemorySessionStore, SESSION_KEYS
from .agent_base import Agent

__all__ = [
    'SessionContext',
    'AnalysisSnapshot',
    'UserProfile',
    'ClassificationStatus',
    'Sex',
    'SessionStore',
    'InMemorySessionStore',
    'SESSION_KEYS',
    'Agent',
]
