# FILE: constants.py

RED_TEAM = 1
YEL_TEAM = -1
EMPTY = 0

BOARD_SIZE = 8
WIN_LENGTH = 4
DEFAULT_DEPTH = 4

# Integer extremes used as terminal scores and as the initial alpha/beta window.
INFINITE = 2 ** 31 - 1
MINUS_INFINITE = -2 ** 31
