from .generator import (
    NarrativeGenerator,
    generate,
    ALL_NORMAL_MESSAGE,
    CLOSING_RECOMMENDATION,
)
from .agent import NarrativeAgent
from .coordinator import NarrativeCoordinator

__all__ = [
    'NarrativeGenerator',
    'generate',
    'ALL_NORMAL_MESSAGE',
    'CLOSING_RECOMMENDATION',
    'NarrativeAgent',
    'NarrativeCoordinator',
]
