import logging

from .game_engine import BOARD_CELLS, DRAW
from .mode import GameMode

logger = logging.getLogger(__name__)


def parse_cell(text):
    """
    'row,col' (0-2 each) or a single cell index 0-8 -> cell index
    raises ValueError on anything else
    """
    text = text.strip()
    if ',' in text:
        parts = text.split(',')
        if len(parts) != 2:
            raise ValueError("Use row,col (e.g., 0,0 or 1,2).")
        try:
            row, col = int(parts[0]), int(parts[1])
        except ValueError:
            raise ValueError("Enter numbers for row and column (e.g., 1,1).") from None
        if not (0 <= row <= 2 and 0 <= col <= 2):
            raise ValueError("Invalid row/column number. Must be between 0 and 2.")
        return row * 3 + col
    try:
        idx = int(text)
    except ValueError:
        raise ValueError("Invalid input. Enter row,col or a cell number 0-8.") from None
    if not 0 <= idx < BOARD_CELLS:
        raise ValueError("Invalid cell number. Must be between 0 and 8.")
    return idx


def outcome_message(winner):
    if winner == DRAW:
        return "It's a draw!"
    return f"Player {winner} wins!"


class ConsoleGame:
    """
    text front end bound to a GameEngine
    """
    def __init__(self, engine, selector, input_func=input, output_func=print):
        self.engine = engine
        self.selector = selector
        self._input = input_func
        self._output = output_func
        self._last_board = None   # last board printed
        engine.state_changed.connect(self._on_state_changed)
        engine.game_over.connect(self._on_game_over)
        selector.mode_changed.connect(self._on_mode_changed)

    def print_board(self, board):
        """board with row/column numbers, empty cells shown as '.'"""
        out = self._output
        out("\n-------------")
        for r in range(3):
            cells = board[r * 3:r * 3 + 3]
            out(f"{r}  {' | '.join(cell or '.' for cell in cells)}")
            if r < 2: out("  -----------")
        out("   0   1   2")
        out("-------------")
        self._last_board = tuple(board)

    def _on_state_changed(self, snap):
        # status-only updates don't redraw
        if snap.board != self._last_board:
            self.print_board(snap.board)

    def _on_game_over(self, winner):
        msg = outcome_message(winner)
        self.engine.set_status(msg)
        self._output(msg)

    def _on_mode_changed(self, mode):
        label = "vs computer" if mode == GameMode.VS_AI.value else "two players"
        self._output(f"Mode: {label}. New game started.")

    def _prompt(self, snap):
        if snap.is_over:
            return "Game over. (r)estart, (m)ode or (q)uit: "
        return f"Player {snap.current_player}, enter row,col (or r/m/q): "

    def run(self):
        """
        read commands until 'q' or end of input
        """
        self._output("--- Tic-Tac-Toe ---")
        self.print_board(self.engine.board)
        while True:
            if self.selector.mode is GameMode.VS_AI:
                self.engine.ai_move()   # no-op unless it's the computer's turn
            snap = self.engine.snapshot()
            try:
                line = self._input(self._prompt(snap)).strip().lower()
            except EOFError:
                break
            if not line:
                continue
            if line == 'q':
                break
            if line == 'r':
                self._output("New game.")
                self._last_board = None   # redraw even if already empty
                self.engine.restart()
                continue
            if line == 'm':
                self.selector.toggle()
                continue
            if snap.is_over:
                self._output("!! Game is over. Restart with 'r'.")
                continue
            try:
                idx = parse_cell(line)
            except ValueError as e:
                self._output(f"!! {e}")
                continue
            if idx not in snap.empty_cells:
                self._output("!! Cell already taken. Try again.")
                continue
            self.engine.make_move(idx)
        self._output("Exiting.")
        logger.debug("console loop finished")
