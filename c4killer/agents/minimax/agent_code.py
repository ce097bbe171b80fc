# agents/minimax/agent_code.py

import time
import logging
from dataclasses import dataclass

from c4killer.agents.base_agent import BaseAgent
from c4killer.agents.minimax.evaluation import calculate_consecutive_heuristic
from c4killer.agents.minimax.statistics import MoveStatistics
from c4killer.game.connect_four_game import ConnectFourGame
from c4killer.constants import RED_TEAM, YEL_TEAM, DEFAULT_DEPTH, INFINITE, MINUS_INFINITE

logger = logging.getLogger(__name__)


class NoLegalMoveError(Exception):
    """Exception raised when a move is requested on a board with no open column."""
    pass


@dataclass
class MinimaxContext:
    """State handed from one search level to the next."""
    game: ConnectFourGame
    depth: int
    column: int  # column of the move that produced this board
    team: int    # team the evaluation is computed for, fixed for the whole search
    alpha: int
    beta: int


class MinimaxAgent(BaseAgent):
    def __init__(self, depth=DEFAULT_DEPTH, team=RED_TEAM, pruning=True, name="C4_Killer"):
        """
        Initializes the MinimaxAgent with a specified search depth and team number.

        :param depth: Number of plies searched, counting the root move. Must be at least 1.
        :param team: The team (RED_TEAM or YEL_TEAM) that the agent is playing for.
        :param pruning: Whether alpha-beta cutoffs are applied.
        :param name: Name reported to drivers.
        """
        if team not in (RED_TEAM, YEL_TEAM):
            raise ValueError(f"Invalid team: {team}. Must be {RED_TEAM} or {YEL_TEAM}.")
        if not isinstance(depth, int) or isinstance(depth, bool) or depth < 1:
            raise ValueError(f"Search depth must be a positive integer, got {depth!r}.")
        super().__init__(team, name)
        self.depth = depth
        self.pruning = pruning
        self.boards_explored = 0
        self.game_boards = 0
        self.statistics = MoveStatistics()
        logger.info(f"MinimaxAgent initialized with team {self.team}, depth {self.depth}, pruning {self.pruning}")

    def select_move(self, game: ConnectFourGame):
        """
        Selects the best move for the agent's own team.

        :param game: The current state of the game.
        :return: The column where the agent decides to drop its piece.
        """
        _, column = self.best_move(game, self.team)
        return column

    def best_move(self, game: ConnectFourGame, team):
        """
        Runs the search from every open column and keeps the best one.

        The input game is never modified; every candidate is played on a copy
        that does not enforce turn order, so the caller decides who moves.

        :param game: The current state of the game.
        :param team: The team to move.
        :return: Tuple of (score, column)
        """
        valid_moves = game.get_valid_moves()
        if not valid_moves:
            raise NoLegalMoveError("No legal move: every column is full.")

        self.boards_explored = 0
        start_time = time.perf_counter()

        best_value = MINUS_INFINITE
        best_column = valid_moves[0]
        for column in valid_moves:
            child = game.copy()
            child.enforce_turns = False
            child.make_move(column, team)
            context = MinimaxContext(child, self.depth - 1, column, team, MINUS_INFINITE, INFINITE)
            value = self.min_movement(context)
            logger.debug(f"Root column {column} scored {value}")
            if value > best_value:
                best_value = value
                best_column = column

        elapsed = time.perf_counter() - start_time
        self.statistics.record(best_column, elapsed)
        logger.info(
            f"Selected move: {best_column} with score: {best_value} "
            f"({self.boards_explored} boards explored in {elapsed:.4f}s)"
        )
        logger.info("\n" + self.statistics.to_table())
        return best_value, best_column

    def _is_cutoff(self, context: MinimaxContext):
        """Return (won, stop): whether the last move won and whether the search ends here."""
        game = context.game
        won = game.completes_four(context.column, game.get_top_piece(context.column))
        return won, (won or context.depth <= 0 or not game.has_valid_moves())

    def max_movement(self, context: MinimaxContext):
        """
        Maximizing level: the agent's team is to move.

        :param context: Board, remaining depth, last column, evaluated team and bounds.
        :return: The best value reachable for the evaluated team.
        """
        best_value = MINUS_INFINITE
        won, stop = self._is_cutoff(context)
        if stop:
            return best_value if won else calculate_consecutive_heuristic(context.game, context.team)

        for column in range(context.game.size):
            if not context.game.is_valid_move(column):
                continue
            child = context.game.copy()
            child.make_move(column, context.team)
            value = self.min_movement(
                MinimaxContext(child, context.depth - 1, column, context.team, context.alpha, context.beta)
            )
            best_value = max(best_value, value)
            if self.pruning and best_value >= context.beta:
                break
            context.alpha = max(best_value, context.alpha)
        return best_value

    def min_movement(self, context: MinimaxContext):
        """
        Minimizing level: the opponent of the evaluated team is to move.

        :param context: Board, remaining depth, last column, evaluated team and bounds.
        :return: The lowest value the opponent can force.
        """
        self.boards_explored += 1
        self.game_boards += 1
        best_value = INFINITE
        won, stop = self._is_cutoff(context)
        if stop:
            return best_value if won else calculate_consecutive_heuristic(context.game, context.team)

        for column in range(context.game.size):
            if not context.game.is_valid_move(column):
                continue
            child = context.game.copy()
            child.make_move(column, -context.team)
            value = self.max_movement(
                MinimaxContext(child, context.depth - 1, column, context.team, context.alpha, context.beta)
            )
            best_value = min(best_value, value)
            if self.pruning and best_value <= context.alpha:
                break
            context.beta = min(best_value, context.beta)
        return best_value
