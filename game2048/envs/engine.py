"""2048 game session: owns the grid, the score and the end of game flags."""

import logging

from numpy import int64, ndarray, zeros
from numpy.random import default_rng

from game2048.config import EngineConfig
from game2048.core.gameboard import has_available_moves, has_changed, latent_state, reached, spawn_tile
from game2048.core.gamemove import Direction, legal_directions, parse_direction
from game2048.core.status import GameStatus
from game2048.utils.summary import format_grid

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GridEngine:
    """
    2048 game engine.

    This class holds the state of one game session and applies the rules of the game to it. It is driven by
    a single host, one command at a time: every call commits its changes before returning.

    Parameters
    ----------
    config : EngineConfig, optional
        Size of the grid, target tile, spawn probabilities and seed (default: standard 4x4 game).
    """

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        self._rng = default_rng(self.config.seed)

        self._grid: ndarray = zeros((self.size, self.size), dtype=int64)
        self._score = 0
        self._won = False
        self._game_over = False

        self.initialize()

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def grid(self) -> ndarray:
        """
        Get a copy of the game board.

        Returns
        -------
        ndarray
            The current board as a 2D numpy array, 0 for empty cells.
        """
        return self._grid.copy()

    @property
    def score(self) -> int:
        return self._score

    @property
    def won(self) -> bool:
        """True once a tile reached the target value, for the rest of the session."""
        return self._won

    @property
    def game_over(self) -> bool:
        """True once no move is possible. Further moves are ignored."""
        return self._game_over

    @property
    def status(self) -> GameStatus:
        return GameStatus.from_flags(self._won, self._game_over)

    @property
    def max_tile(self) -> int:
        return int(self._grid.max())

    @property
    def legal_directions(self) -> list[Direction]:
        """Directions that would change the board, empty once the game is over."""
        if self._game_over:
            return []
        return legal_directions(self._grid)

    def initialize(self, seed: int | None = None) -> ndarray:
        """
        Start a new session: empty board, two random tiles, zero score.

        Parameters
        ----------
        seed : int, optional
            Reseed the random generator, so that the same seed replays the same session.

        Returns
        -------
        ndarray
            A copy of the new board.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._grid = zeros((self.size, self.size), dtype=int64)
        self._score = 0
        self._won = False
        self._game_over = False

        for _ in range(self.config.start_tiles):
            self.spawn_random_tile()

        _logger.debug('New session on a %dx%d grid', self.size, self.size)
        return self.grid

    def spawn_random_tile(self) -> None:
        """
        Put a 2 (90%) or a 4 (10%) on a random empty cell. Nothing happens on a full board.
        """
        spawn_tile(self._grid, self._rng, self.config.tile_spawn_probs)

    def has_available_moves(self) -> bool:
        return has_available_moves(self._grid)

    def move(self, direction: Direction | str) -> bool:
        """
        Push every tile in the given direction.

        Parameters
        ----------
        direction : Direction or str
            One of up, down, left, right.

        Returns
        -------
        bool
            True if the board changed, False if the move was ignored.

        Notes
        -----
        - The move is ignored when the game is over, when the direction is unknown, or when no tile can
          slide or merge that way. An ignored move changes nothing and spawns no tile.
        - After a move, a new tile is spawned and the end of game is checked on the resulting board.
        """
        if self._game_over:
            _logger.debug('Ignored move %r: game over', direction)
            return False

        parsed = parse_direction(direction)
        if parsed is None:
            _logger.debug('Ignored move %r: unknown direction', direction)
            return False

        new_grid, gained = latent_state(self._grid, parsed)
        if not has_changed(self._grid, new_grid):
            _logger.debug('Ignored move %s: nothing to slide or merge', parsed.value)
            return False

        # ##: Commit the move.
        self._grid = new_grid
        self._score += gained
        _logger.debug('Moved %s, gained %d, score %d', parsed.value, gained, self._score)

        if not self._won and reached(self._grid, self.config.target_tile):
            self._won = True
            _logger.info('Reached %d with score %d', self.config.target_tile, self._score)

        # ##: Spawn on the committed board, then look for remaining moves.
        self.spawn_random_tile()
        if not has_available_moves(self._grid):
            self._game_over = True
            _logger.info('Game over with score %d (won: %s)', self._score, self._won)

        return True

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(format_grid(self._grid))
