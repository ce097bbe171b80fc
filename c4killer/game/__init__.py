# /c4killer/game/__init__.py

from .connect_four_game import ConnectFourGame, InvalidMoveError, InvalidTurnError

__all__ = [
    'ConnectFourGame',
    'InvalidMoveError',
    'InvalidTurnError',
]
