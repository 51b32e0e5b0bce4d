"""Text shown to the player: board dump, end of session message and shareable score."""

from numpy import ndarray

from game2048.core.status import GameStatus


def format_grid(board: ndarray) -> str:
    """
    Format the board as tab separated rows, empty cells shown as 0.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    str
        One line per row of the board.
    """
    return '\n'.join(' \t'.join(map(str, row)) for row in board.tolist())


def status_message(status: GameStatus) -> str | None:
    """
    Message displayed at the end of a session.

    Returns
    -------
    str or None
        ``"You won!"`` for a won session, ``"Game Over"`` for a lost one, None while the game goes on.
    """
    if status is GameStatus.WON_OVER or status is GameStatus.WON:
        return 'You won!'
    if status is GameStatus.OVER:
        return 'Game Over'
    return None


def share_text(score: int, url: str = '') -> str:
    """Text the host shares with the final score."""
    return f'I scored {score} points in 2048! {url}'.rstrip()
