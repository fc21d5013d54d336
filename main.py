import argparse
import sys

from PySide6.QtCore import QCoreApplication

from tictactoe import config
from tictactoe.console import ConsoleGame
from tictactoe.game_engine import GameEngine
from tictactoe.logging_setup import setup_logging
from tictactoe.mode import GameMode, ModeSelector

# -----------------------------------------------------------------------------
# ARGUMENTS
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal.")
    parser.add_argument("--mode", choices=[m.value for m in GameMode],
                        default=config.DEFAULT_MODE,
                        help="ai: play against the computer, pvp: two players")
    parser.add_argument("--ai-player", choices=["X", "O"], default=config.AI_PLAYER,
                        help="mark played by the computer")
    parser.add_argument("--log-level", default=None,
                        help="logging level (default from TICTACTOE_LOG_LEVEL)")
    return parser.parse_args(argv)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    # signals need an application instance; no event loop is started
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])

    selector = ModeSelector(args.mode)
    engine = GameEngine(selector.mode_changed, ai_player=args.ai_player)
    ConsoleGame(engine, selector).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
