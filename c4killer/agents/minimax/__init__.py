# /c4killer/agents/minimax/__init__.py

from .agent_code import MinimaxAgent, MinimaxContext, NoLegalMoveError
from .evaluation import calculate_consecutive_heuristic
from .statistics import MoveRecord, MoveStatistics

__all__ = [
    'MinimaxAgent',
    'MinimaxContext',
    'NoLegalMoveError',
    'calculate_consecutive_heuristic',
    'MoveRecord',
    'MoveStatistics',
]
