"""Screens around the stages: title, stage select, game over and game clear."""

from __future__ import annotations

from typing import Optional

from hoshiyoke.keyboard import Key, Keyboard
from hoshiyoke.scenery import TitleModel


class _ConfirmScene:
    """A still screen that ends once space is pressed."""

    texture: str = ""
    bgm: Optional[str] = None

    def __init__(self, keyboard: Keyboard) -> None:
        self.keyboard = keyboard
        self._finished = False

    @property
    def is_finished(self) -> bool:
        return self._finished

    def update(self) -> None:
        """Finish as soon as space goes down."""
        if self.keyboard.trigger_key(Key.SPACE):
            self._finished = True


class TitleScene(_ConfirmScene):
    """The title screen: the logo model over a black background, with music."""

    texture = "BlackBG.png"
    bgm = "startbgm.mp3"

    def __init__(self, keyboard: Keyboard) -> None:
        super().__init__(keyboard)
        self.title_model = TitleModel()

    def update(self) -> None:
        """Finish as soon as space goes down."""
        super().update()


class GameOverScene(_ConfirmScene):
    """Shown after the player is shot down."""

    texture = "gameOver.png"
    bgm = "gameoverbgm.mp3"

    def update(self) -> None:
        """Finish as soon as space goes down."""
        super().update()


class GameClearScene(_ConfirmScene):
    """Shown after the enemy is destroyed."""

    texture = "clear.png"

    def update(self) -> None:
        """Finish as soon as space goes down."""
        super().update()


class SelectScene:
    """Stage selection with the 1, 2 and 3 keys."""

    texture = "StageSelect.png"

    def __init__(self, keyboard: Keyboard) -> None:
        self.keyboard = keyboard
        self._one = False
        self._two = False
        self._three = False

    @property
    def is_one(self) -> bool:
        return self._one

    @property
    def is_two(self) -> bool:
        return self._two

    @property
    def is_three(self) -> bool:
        return self._three

    def update(self) -> None:
        """Record every stage key that went down this frame."""
        if self.keyboard.trigger_key(Key.ONE):
            self._one = True
        if self.keyboard.trigger_key(Key.TWO):
            self._two = True
        if self.keyboard.trigger_key(Key.THREE):
            self._three = True