import logging
from enum import Enum

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class GameMode(Enum):
    VS_AI = "ai"
    TWO_PLAYER = "pvp"


class ModeSelector(QObject):
    """
    holds the selected game mode and announces changes
    """
    mode_changed = Signal(str)  # emits the new mode value

    def __init__(self, mode=GameMode.VS_AI, parent=None):
        super().__init__(parent)
        self._mode = GameMode(mode)

    @property
    def mode(self):
        return self._mode

    def set_mode(self, mode):
        """
        switch mode; only an actual change is announced
        raises ValueError for unknown modes
        """
        new_mode = GameMode(mode)
        if new_mode is self._mode:
            return
        self._mode = new_mode
        logger.debug("mode set to %s", new_mode.value)
        self.mode_changed.emit(new_mode.value)

    def toggle(self):
        if self._mode is GameMode.VS_AI:
            self.set_mode(GameMode.TWO_PLAYER)
        else:
            self.set_mode(GameMode.VS_AI)
