# tictactoe/config.py
import os


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is not None and str(v).strip() != "":
        return str(v).strip()
    return default


LOG_LEVEL = _env("TICTACTOE_LOG_LEVEL", "INFO").upper()

# "ai" or "pvp"
DEFAULT_MODE = _env("TICTACTOE_DEFAULT_MODE", "ai").lower()

# mark played by the computer
AI_PLAYER = _env("TICTACTOE_AI_PLAYER", "O").upper()
