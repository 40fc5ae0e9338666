"""Game session for the merge puzzle: score, flags, best score and undo history."""

import logging

from numpy import ndarray
from numpy.random import Generator, default_rng

from tilemerge.core.gameboard import apply_move, check_grid, empty_grid, freeze, is_terminal, spawn_random_tile
from tilemerge.core.gamemove import Direction, legal_moves
from tilemerge.session.config import GameConfig
from tilemerge.session.storage import BestScoreStore, MemoryScoreStore
from tilemerge.session.types import GameStatus, SessionState, UndoEntry

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GameSession:
    """
    A game of the merge puzzle.

    The session owns the grid, the score, the win and game-over flags and the undo history, and is
    the only thing that changes them. Every grid it hands out or keeps as a snapshot is a read-only
    copy.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: BestScoreStore | None = None,
        seed: int | None = None,
    ):
        """
        Start a session and its first game.

        Parameters
        ----------
        config : GameConfig, optional
            Session configuration (default is ``GameConfig()``).
        store : BestScoreStore, optional
            Where the best score is loaded from and saved to (default is an in-memory store).
        seed : int, optional
            Seed of the random generator used to spawn tiles.
        """
        self.config = config or GameConfig()
        self._store = store if store is not None else MemoryScoreStore()
        self._rng: Generator = default_rng(seed)

        self._grid: ndarray = freeze(empty_grid(self.config.size))
        self._score = 0
        self._won = False
        self._game_over = False
        self._history: list[UndoEntry] = []
        self._best_score = self._load_best_score()

        self.new_game()

    @classmethod
    def from_grid(
        cls,
        grid: ndarray,
        score: int = 0,
        config: GameConfig | None = None,
        store: BestScoreStore | None = None,
        seed: int | None = None,
    ) -> 'GameSession':
        """
        Create a session positioned on an existing grid.

        Parameters
        ----------
        grid : ndarray
            Grid to start from. It is copied.
        score : int
            Score matching the grid.
        config, store, seed
            As for the constructor.

        Returns
        -------
        GameSession
            A session with an empty undo history and flags computed from the grid.

        Raises
        ------
        ValueError
            If the grid does not fit the configured size or holds invalid values.
        """
        session = cls(config=config, store=store, seed=seed)
        grid = check_grid(grid, size=session.config.size)
        if score < 0:
            raise ValueError(f'score must be non-negative, got {score}')

        session._grid = freeze(grid)
        session._score = int(score)
        session._won = bool((grid >= session.config.target_tile).any())
        session._game_over = is_terminal(grid)
        session._history.clear()
        session._update_best_score()
        return session

    @property
    def grid(self) -> ndarray:
        """Read-only copy of the current grid."""
        return self._grid

    @property
    def score(self) -> int:
        return self._score

    @property
    def best_score(self) -> int:
        return self._best_score

    @property
    def won(self) -> bool:
        return self._won

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def legal_moves(self) -> list[Direction]:
        """Directions that would change the current grid."""
        return legal_moves(self._grid)

    @property
    def state(self) -> SessionState:
        """
        Snapshot of the session for the presentation layer.

        Returns
        -------
        SessionState
            Current grid, score, best score, flags and undo depth.
        """
        return SessionState(
            grid=self._grid,
            score=self._score,
            best_score=self._best_score,
            game_over=self._game_over,
            won=self._won,
            undo_depth=len(self._history),
        )

    def new_game(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on an empty grid with the initial tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the random generator before spawning.

        Returns
        -------
        ndarray
            The new grid.

        Notes
        -----
        Score, flags and undo history are reset. The best score is kept.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        grid = empty_grid(self.config.size)
        for _ in range(self.config.initial_tiles):
            spawn_random_tile(grid, rng=self._rng, probabilities=self.config.spawn_probs)

        self._grid = freeze(grid)
        self._score = 0
        self._won = False
        self._game_over = False
        self._history.clear()

        _logger.info('New %dx%d game started', self.config.size, self.config.size)
        return self._grid

    def move(self, direction: Direction | int | str) -> tuple[ndarray, int, bool]:
        """
        Apply a move to the grid.

        Parameters
        ----------
        direction : Direction | int | str
            The direction of the move ('left', 'up', 'right', 'down' or the matching ``Direction``).

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The grid after the move (ndarray)
            - The score obtained from this move (int)
            - Whether the game is over (bool)

        Raises
        ------
        InvalidDirectionError
            If the direction is unknown. Nothing is changed in that case.

        Notes
        -----
        - A snapshot of the grid and score is pushed before the move, even when the move turns out
          to change nothing, unless ``config.record_noop_moves`` is False.
        - After a move that changes the grid, one tile is spawned and the flags are recomputed.
        - A move on a terminal grid changes nothing.
        """
        direction = Direction.parse(direction)
        snapshot = UndoEntry(self._grid, self._score)
        if self.config.record_noop_moves:
            self._history.append(snapshot)

        result = apply_move(self._grid, direction)
        if not result.changed:
            _logger.debug('Move %s left the grid unchanged', direction.name.lower())
            return self._grid, 0, self._game_over

        if not self.config.record_noop_moves:
            self._history.append(snapshot)

        grid = spawn_random_tile(result.grid, rng=self._rng, probabilities=self.config.spawn_probs)
        if self.config.target_tile in result.merged and not self._won:
            self._won = True
            _logger.info('Reached %d with score %d', self.config.target_tile, self._score + result.score)

        self._grid = freeze(grid)
        self._score += result.score
        self._game_over = is_terminal(grid)
        _logger.debug('Move %s scored %d, total %d', direction.name.lower(), result.score, self._score)
        if self._game_over:
            _logger.info('Game over with score %d', self._score)

        self._update_best_score()
        return self._grid, result.score, self._game_over

    def undo(self) -> bool:
        """
        Restore the grid and score saved before the last move.

        Returns
        -------
        bool
            True if a snapshot was restored, False if the history was empty.

        Notes
        -----
        The flags are left as they are, unless ``config.recompute_flags_on_undo`` is True, in which
        case the game-over flag is recomputed from the restored grid. The win flag is only reset by
        a new game.
        """
        if not self._history:
            return False

        entry = self._history.pop()
        self._grid = entry.grid
        self._score = entry.score
        if self.config.recompute_flags_on_undo:
            self._game_over = is_terminal(self._grid)

        _logger.debug('Undo restored score %d, %d snapshots left', self._score, len(self._history))
        return True

    def _load_best_score(self) -> int:
        try:
            value = self._store.load()
            return max(int(value), 0) if value is not None else 0
        except Exception:
            _logger.exception('Failed to load the best score, starting from 0')
            return 0

    def _update_best_score(self):
        if self._score <= self._best_score:
            return

        self._best_score = self._score
        _logger.info('New best score %d', self._best_score)
        try:
            saved = self._store.save(self._best_score)
        except Exception:
            _logger.exception('Failed to save best score %d', self._best_score)
            return
        if not saved:
            _logger.warning('Best score store rejected %d', self._best_score)

    def render(self) -> str:
        """
        Format the grid as text, one row per line, empty cells shown as '.'.
        """
        return '\n'.join(' \t'.join(str(value) if value else '.' for value in row) for row in self._grid.tolist())
