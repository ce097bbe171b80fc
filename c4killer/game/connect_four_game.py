# game/connect_four_game.py

import logging
import numpy as np
from c4killer.constants import RED_TEAM, YEL_TEAM, EMPTY, BOARD_SIZE, WIN_LENGTH

logger = logging.getLogger(__name__)

# (row step, column step) for horizontal, vertical and both diagonals
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

class InvalidMoveError(Exception):
    """Exception raised when an invalid move is made."""
    pass

class InvalidTurnError(Exception):
    """Exception raised when an invalid turn is attempted."""
    pass

class ConnectFourGame:
    """
    Square Connect Four board.

    Row 0 is the bottom of the board, so a dropped piece lands on the lowest
    row index that is still empty in its column.
    """

    def __init__(self, size=BOARD_SIZE, enforce_turns=True):
        if size < WIN_LENGTH:
            raise ValueError(f"Board size must be at least {WIN_LENGTH}, got {size}.")
        self.board = np.zeros((size, size), dtype=np.int8)
        self.last_team = None
        self.enforce_turns = enforce_turns

    @classmethod
    def from_rows(cls, rows, enforce_turns=False):
        """
        Build a game from a list of rows given top row first, the way the
        board is printed. Gravity is not checked.
        """
        grid = np.array(rows, dtype=np.int8)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"Board must be square, got shape {grid.shape}.")
        game = cls(size=grid.shape[0], enforce_turns=enforce_turns)
        game.board = np.flipud(grid).copy()
        return game

    @property
    def size(self):
        return self.board.shape[0]

    def new_game(self):
        """Creates and returns a new game instance."""
        return ConnectFourGame(size=self.size, enforce_turns=self.enforce_turns)

    def reset(self):
        """Resets the game to initial state."""
        self.board = np.zeros((self.size, self.size), dtype=np.int8)
        self.last_team = None
        return self.board.copy()

    def copy(self):
        """Independent copy of the game; the grid is never shared."""
        clone = ConnectFourGame.__new__(ConnectFourGame)
        clone.board = self.board.copy()
        clone.last_team = self.last_team
        clone.enforce_turns = self.enforce_turns
        return clone

    def get_piece(self, row, column):
        return int(self.board[row][column])

    def make_move(self, column, team):
        """Drop a piece for the given team in the specified column and return its row."""
        if team not in [RED_TEAM, YEL_TEAM]:
            logger.error(f"Invalid team: {team}. Must be {RED_TEAM} or {YEL_TEAM}.")
            raise InvalidMoveError(f"Invalid team: {team}. Must be {RED_TEAM} or {YEL_TEAM}.")

        if self.enforce_turns:
            if self.last_team is not None and team == self.last_team:
                logger.error(f"Invalid turn: team {team} cannot move twice in a row.")
                raise InvalidTurnError(f"Invalid turn: team {team} cannot move twice in a row.")

        if not self.is_valid_move(column):
            logger.error(f"Invalid move: Column {column} is full or out of bounds.")
            raise InvalidMoveError(f"Invalid move: Column {column} is full or out of bounds.")

        row = self.get_next_open_row(column)
        self.board[row][column] = team
        self.last_team = team
        logger.debug(f"Team {team} placed in column {column}, row {row}.")
        return row

    def is_valid_move(self, column):
        """Check if a move is valid."""
        if column < 0 or column >= self.size:
            return False
        return self.board[self.size - 1][column] == EMPTY

    def get_next_open_row(self, column):
        """Get the next available row in the given column starting from the bottom."""
        for r in range(self.size):
            if self.board[r][column] == EMPTY:
                return r
        raise InvalidMoveError(f"Column {column} is full.")

    def get_top_piece(self, column):
        """Return the team of the topmost piece in a column, or EMPTY."""
        for r in range(self.size - 1, -1, -1):
            if self.board[r][column] != EMPTY:
                return int(self.board[r][column])
        return EMPTY

    def _top_row(self, column):
        for r in range(self.size - 1, -1, -1):
            if self.board[r][column] != EMPTY:
                return r
        return None

    def _run_length(self, row, column, d_row, d_col, team):
        length = 0
        r, c = row + d_row, column + d_col
        while 0 <= r < self.size and 0 <= c < self.size and self.board[r][c] == team:
            length += 1
            r += d_row
            c += d_col
        return length

    def completes_four(self, column, team):
        """
        Check whether the topmost piece of a column belongs to the team and
        lies on a line of at least four of its pieces.
        """
        row = self._top_row(column)
        if row is None or self.board[row][column] != team:
            return False
        for d_row, d_col in DIRECTIONS:
            length = 1
            length += self._run_length(row, column, d_row, d_col, team)
            length += self._run_length(row, column, -d_row, -d_col, team)
            if length >= WIN_LENGTH:
                return True
        return False

    def check_win(self, team):
        """Check if the given team has a four-in-a-row anywhere on the board."""
        n = self.size
        for r in range(n):
            for c in range(n):
                for d_row, d_col in DIRECTIONS:
                    end_r = r + d_row * (WIN_LENGTH - 1)
                    end_c = c + d_col * (WIN_LENGTH - 1)
                    if not (0 <= end_r < n and 0 <= end_c < n):
                        continue
                    if all(self.board[r + d_row * i][c + d_col * i] == team for i in range(WIN_LENGTH)):
                        return True
        return False

    def is_board_full(self):
        """Check if the board is full."""
        return not self.has_valid_moves()

    def has_valid_moves(self):
        return any(self.is_valid_move(c) for c in range(self.size))

    def get_game_state(self):
        """Return the current game state."""
        if self.check_win(RED_TEAM):
            return RED_TEAM
        elif self.check_win(YEL_TEAM):
            return YEL_TEAM
        elif self.is_board_full():
            return "Draw"
        return "ONGOING"

    def get_valid_moves(self):
        """Return list of valid column moves."""
        return [col for col in range(self.size) if self.is_valid_move(col)]

    def get_board(self):
        """Return copy of current board state."""
        return self.board.copy()

    def board_to_string(self):
        """Return string representation of the board, top row first."""
        symbols = {EMPTY: '.', RED_TEAM: 'R', YEL_TEAM: 'Y'}
        board_str = ''
        for row in self.board[::-1]:
            board_str += ' '.join(symbols[int(cell)] for cell in row) + '\n'
        return board_str
