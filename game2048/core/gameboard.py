"""
Core functionality of the 2048 game: sliding, merging, tile spawning and end of game detection.

Every direction is reduced to a slide towards the left: the grid is reversed and/or transposed
before the slide and the same transformation is undone afterwards.
"""

import logging

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, array_equal, ascontiguousarray, ndarray, zeros_like
from numpy.random import Generator

from game2048.config import TILE_SPAWN_PROBS
from game2048.core.gamemove import Direction

# ##>: Module logger.
_logger = logging.getLogger(__name__)


def merge_column(column: ndarray) -> tuple[int, ndarray]:
    """
    Merge adjacent equal values in a column and compute the total score.

    Parameters
    ----------
    column : ndarray
        A 1D array representing one line of the game board.

    Returns
    -------
    score : int
        The total score obtained from merging.
    merged_column : ndarray
        The non-empty values after merging, without padding.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs from the start of the column towards the end.
    - Each value can only be merged once per function call: ``[2, 2, 2]`` gives ``[4, 2]``.
    """
    # ##: Handle empty columns.
    non_zero = column[column != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    # ##: Initialize the score.
    result = []
    score = 0

    # ##: Iterate over the column and merge values.
    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged = non_zero[i] * 2
            result.append(merged)
            score += int(merged)
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    if i == len(non_zero) - 1:
        result.append(non_zero[-1])

    return score, array(result, dtype=column.dtype)


def slide(row: ndarray) -> tuple[int, ndarray]:
    """
    Slide a line to the left, merging equal neighbours once.

    Parameters
    ----------
    row : ndarray
        A 1D array representing one line of the game board.

    Returns
    -------
    score : int
        Sum of the tiles created by merges.
    slid_row : ndarray
        The line after sliding, padded on the right with zeros.
    """
    row = array(row)
    score, merged = merge_column(row)
    result = zeros_like(row)
    result[: len(merged)] = merged
    return score, result


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The updated game board after sliding and merging.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, orient the board before calling this function.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row = merge_column(row)
        score += score_row
        result[i, : len(merged_row)] = merged_row

    return score, result


def orient(board: ndarray, direction: Direction) -> ndarray:
    """
    View the board so that the given direction becomes a move to the left.

    Parameters
    ----------
    board : ndarray
        The game board.
    direction : Direction
        Direction of the move.

    Returns
    -------
    ndarray
        The reversed and/or transposed board.
    """
    if direction is Direction.RIGHT:
        return board[:, ::-1]
    if direction is Direction.UP:
        return board.T
    if direction is Direction.DOWN:
        return board.T[:, ::-1]
    return board


def restore(board: ndarray, direction: Direction) -> ndarray:
    """
    Undo ``orient`` for the given direction.

    Parameters
    ----------
    board : ndarray
        An oriented game board.
    direction : Direction
        Direction the board was oriented for.

    Returns
    -------
    ndarray
        The board in its original orientation.
    """
    if direction is Direction.RIGHT:
        return board[:, ::-1]
    if direction is Direction.UP:
        return board.T
    if direction is Direction.DOWN:
        return board[:, ::-1].T
    return board


def latent_state(state: ndarray, direction: Direction) -> tuple[ndarray, int]:
    """
    Compute the board after applying a move, without adding a new tile.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Not modified.
    direction : Direction
        The direction of the move.

    Returns
    -------
    new_state : ndarray
        A new board after the move.
    score : int
        The score obtained from the merges of this move.
    """
    score, updated_board = slide_and_merge(orient(state, direction))
    return ascontiguousarray(restore(updated_board, direction)), score


def has_changed(before: ndarray, after: ndarray) -> bool:
    """Compare two boards by content."""
    return not array_equal(before, after)


def empty_cells(state: ndarray) -> list[tuple[int, int]]:
    """
    List the empty cells of the board.

    Parameters
    ----------
    state : ndarray
        The game board.

    Returns
    -------
    list[tuple[int, int]]
        Positions (row, col) of the empty cells, in row-major order.
    """
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(state == 0)]


def spawn_tile(
    state: ndarray, rng: Generator, tile_spawn_probs: dict[int, float] | None = None
) -> tuple[int, int] | None:
    """
    Put a new tile on an empty cell chosen uniformly at random.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    rng : Generator
        Source of randomness.
    tile_spawn_probs : dict[int, float], optional
        Probability of each tile value (default: 90% for 2, 10% for 4).

    Returns
    -------
    tuple[int, int] or None
        The cell that received the tile, None when the board is full.

    Notes
    -----
    A full board is a normal position on the way to the end of the game: nothing happens.
    """
    probs = tile_spawn_probs or TILE_SPAWN_PROBS

    # ##: Only if there are still available places.
    available_cells = empty_cells(state)
    if not available_cells:
        return None

    cell = available_cells[int(rng.integers(len(available_cells)))]
    value = int(rng.choice(list(probs), p=list(probs.values())))
    state[cell] = value

    _logger.debug('Spawned tile %d at %s', value, cell)
    return cell


def has_available_moves(state: ndarray) -> bool:
    """
    Check if any move is still possible.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the board has an empty cell or two equal neighbours, False otherwise.
    """
    if not np_all(state != 0):
        return True
    return bool(np_any(state[:-1] == state[1:]) or np_any(state[:, :-1] == state[:, 1:]))


def is_done(state: ndarray) -> bool:
    """
    Check if the game has ended.

    Notes
    -----
    The game is over when there are no empty cells AND no adjacent cells have the same value.
    """
    return not has_available_moves(state)


def reached(state: ndarray, target: int) -> bool:
    """Check if a tile of the board equals the target value."""
    return bool(np_any(state == target))
