# /c4killer/__init__.py

from .utils.logger_config import logger
from .agents import MinimaxAgent, NoLegalMoveError
from .game import ConnectFourGame, InvalidMoveError, InvalidTurnError
from .tournament import run_tournament

__all__ = [
    'MinimaxAgent',
    'NoLegalMoveError',
    'ConnectFourGame',
    'InvalidMoveError',
    'InvalidTurnError',
    'run_tournament',
]
