"""
Move directions of the 2048 game and the functions telling which of them are legal on a grid.
"""

from enum import Enum

from numpy import ndarray


class Direction(str, Enum):
    """
    Direction in which the tiles are pushed.
    """

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


def parse_direction(value) -> Direction | None:
    """
    Convert a host value into a direction.

    Parameters
    ----------
    value : Direction or str
        The direction, or its name in any case (``"left"``, ``"UP"``, ...).

    Returns
    -------
    Direction or None
        The matching direction, None if the value names no direction.
    """
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        try:
            return Direction(value.strip().lower())
        except ValueError:
            return None
    return None


def can_move(board: ndarray, direction: Direction) -> bool:
    """
    Check if a move is possible in a specific direction.

    Parameters
    ----------
    board : ndarray
        The game board to check.
    direction : Direction
        Direction to check.

    Returns
    -------
    bool
        True if at least one tile slides or merges, False otherwise.

    Notes
    -----
    A move is possible if there's an empty cell on the side the tiles are pushed to,
    or if two adjacent cells along the axis have the same non-zero value.
    """
    if direction in (Direction.LEFT, Direction.RIGHT):
        before, after = board[:, :-1], board[:, 1:]
    else:
        before, after = board[:-1, :], board[1:, :]

    can_merge = (before != 0) & (before == after)
    if direction in (Direction.LEFT, Direction.UP):
        can_slide = (before == 0) & (after != 0)
    else:
        can_slide = (after == 0) & (before != 0)

    return bool(can_slide.any() or can_merge.any())


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Determine legal directions for the current game board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions that change the board, in declaration order.
    """
    return [direction for direction in Direction if can_move(board, direction)]


def illegal_directions(board: ndarray) -> list[Direction]:
    """
    Determine illegal directions for the current game board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions that leave the board unchanged.
    """
    return [direction for direction in Direction if not can_move(board, direction)]
