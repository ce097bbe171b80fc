# /c4killer/agents/__init__.py

from .base_agent import BaseAgent
from .minimax import MinimaxAgent, NoLegalMoveError

__all__ = [
    'BaseAgent',
    'MinimaxAgent',
    'NoLegalMoveError',
]
