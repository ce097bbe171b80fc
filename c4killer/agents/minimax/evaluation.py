# agents/minimax/evaluation.py

from c4killer.constants import EMPTY, WIN_LENGTH


def calculate_consecutive_heuristic(game, team):
    """
    Score a board for ``team`` from the diagonal runs that start on each piece.

    Every occupied cell opens a run of up to four cells going up and to the
    right. The run is signed by its first piece: +1 when it belongs to
    ``team``, -1 otherwise. Inside the run a piece of ``team`` adds the sign,
    an empty cell adds ten times the sign and an opponent piece adds nothing.

    :param game: The ConnectFourGame to score. Must not be a finished game.
    :param team: The team the score is computed for.
    :return: Integer score, higher is better for ``team``.
    """
    board = game.board.tolist()
    size = game.size
    h = 0
    for c in range(size):
        for f in range(size):
            start = board[f][c]
            if start == EMPTY:
                continue
            sign = 1 if start == team else -1
            for i in range(WIN_LENGTH):
                if f + i < size and c + i < size:
                    piece = board[f + i][c + i]
                    if piece == team:
                        h += sign
                    elif piece == EMPTY:
                        h += sign * 10
    return h
