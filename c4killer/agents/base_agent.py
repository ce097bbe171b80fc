# FILE: agents/base_agent.py

from abc import ABC, abstractmethod


class BaseAgent(ABC):
    def __init__(self, team, name=None):
        self.team = team
        self.name = name or self.__class__.__name__

    @abstractmethod
    def select_move(self, game):
        """
        Given the current game, return the column index where the agent wants to drop its piece.
        """
        pass
