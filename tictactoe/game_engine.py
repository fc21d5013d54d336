import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from PySide6.QtCore import QObject, Signal, Slot

logger = logging.getLogger(__name__)

EMPTY = ''
X = 'X'
O = 'O'
DRAW = 'draw'
BOARD_CELLS = 9

# rows, then columns, then diagonals; first match wins
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

# center, corners, edges
AI_PREFERENCES = (4, 0, 2, 6, 8, 1, 3, 5, 7)


def other_player(mark):
    return O if mark == X else X


def check_winner(board) -> Tuple[str, Optional[Tuple[int, int, int]]]:
    """
    scan the fixed lines for three equal marks
    returns (mark, line), ('draw', None) or ('', None)
    """
    for line in WIN_LINES:
        a, b, c = line
        if board[a] and board[a] == board[b] == board[c]:
            return board[a], line
    if EMPTY not in board:
        return DRAW, None
    return EMPTY, None


def compute_ai_move(board, ai_player=O) -> Optional[int]:
    """
    greedy one-step choice: win, else block, else center/corner/edge
    """
    b = list(board)
    for side in (ai_player, other_player(ai_player)):
        for i in range(BOARD_CELLS):
            if b[i]:
                continue
            b[i] = side
            won = check_winner(b)[0] == side
            b[i] = EMPTY
            if won:
                return i
    for i in AI_PREFERENCES:
        if not b[i]:
            return i
    return None


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of the engine state handed to observers."""
    board: Tuple[str, ...]
    current_player: str
    winner: str
    winner_line: Optional[Tuple[int, int, int]]
    status: str

    @property
    def is_over(self):
        return self.winner != EMPTY

    @property
    def empty_cells(self):
        return tuple(i for i, cell in enumerate(self.board) if not cell)


class GameEngine(QObject):
    """
    tic-tac-toe rules, opponent and observable state
    """
    state_changed = Signal(object)  # GameSnapshot after each transition
    game_over = Signal(str)         # 'X', 'O' or 'draw'

    def __init__(self, mode_changed=None, ai_player=O, parent=None):
        """
        mode_changed: optional signal; any emission restarts the game
        ai_player: mark played by ai_move()
        """
        super().__init__(parent)
        if ai_player not in (X, O):
            raise ValueError(f"ai_player must be 'X' or 'O', got {ai_player!r}")
        self._ai_player = ai_player
        self._board = [EMPTY] * BOARD_CELLS
        self._current_player = X
        self._winner = EMPTY
        self._winner_line = None
        self._status = ''
        if mode_changed is not None:
            mode_changed.connect(self._on_mode_changed)

    # --- read side ---

    @property
    def board(self):
        return tuple(self._board)

    @property
    def current_player(self):
        return self._current_player

    @property
    def winner(self):
        return self._winner

    @property
    def winner_line(self):
        return self._winner_line

    @property
    def status(self):
        return self._status

    @property
    def ai_player(self):
        return self._ai_player

    @property
    def human_player(self):
        return other_player(self._ai_player)

    def snapshot(self):
        return GameSnapshot(
            board=tuple(self._board),
            current_player=self._current_player,
            winner=self._winner,
            winner_line=self._winner_line,
            status=self._status,
        )

    # --- mutators ---

    def make_move(self, index):
        """
        place current mark at index (0-8); invalid moves are ignored
        """
        # bool is an int subclass but never a cell
        if (isinstance(index, bool) or not isinstance(index, int)
                or not 0 <= index < BOARD_CELLS):
            logger.debug("ignoring invalid cell %r", index)
            return
        if self._board[index] or self._winner:
            logger.debug("ignoring move at %d (occupied or game over)", index)
            return
        mark = self._current_player
        self._board[index] = mark
        logger.debug("%s -> cell %d", mark, index)
        result, line = check_winner(self._board)
        if result:
            self._winner = result
            self._winner_line = line
            logger.info("game over: %s%s", result,
                        f" on line {line}" if line else "")
        else:
            self._current_player = other_player(mark)
        # notify only once the move is fully applied
        self.state_changed.emit(self.snapshot())
        if self._winner:
            self.game_over.emit(self._winner)

    def ai_move(self):
        """
        let the automated player move when it is its turn
        """
        if self._winner or self._current_player != self._ai_player:
            return
        idx = compute_ai_move(self._board, self._ai_player)
        if idx is not None:
            self.make_move(idx)

    @Slot()
    def restart(self):
        """
        back to an empty board with X to move
        """
        self._board = [EMPTY] * BOARD_CELLS
        self._current_player = X
        self._winner = EMPTY
        self._winner_line = None
        self._status = ''
        logger.debug("game restarted")
        self.state_changed.emit(self.snapshot())

    def reset(self):
        self.restart()

    def set_status(self, text):
        if text == self._status:
            return
        self._status = text
        self.state_changed.emit(self.snapshot())

    @Slot(str)
    def _on_mode_changed(self, mode):
        logger.info("mode changed to %s, resetting", mode)
        self.reset()
