"""
Status of a 2048 session, derived from the win and game over flags.
"""

from enum import Enum


class GameStatus(str, Enum):
    """
    PLAYING: moves are possible and the target tile was never reached.
    WON: the target tile was reached, the session can go on.
    OVER: no move is possible and the target tile was never reached.
    WON_OVER: no move is possible after reaching the target tile, reported as a win.
    """

    PLAYING = 'playing'
    WON = 'won'
    OVER = 'over'
    WON_OVER = 'won_over'

    @classmethod
    def from_flags(cls, won: bool, game_over: bool) -> 'GameStatus':
        if game_over:
            return cls.WON_OVER if won else cls.OVER
        return cls.WON if won else cls.PLAYING

    @property
    def is_finished(self) -> bool:
        return self in (GameStatus.OVER, GameStatus.WON_OVER)

    @property
    def is_win(self) -> bool:
        return self in (GameStatus.WON, GameStatus.WON_OVER)
