"""Small board helpers shared by the test modules."""


def board_from(text):
    """'XX.O.....' -> list of cells"""
    return ['' if ch == '.' else ch for ch in text]


def play(engine, *cells):
    """Make a sequence of moves alternating from the current player."""
    for cell in cells:
        engine.make_move(cell)
