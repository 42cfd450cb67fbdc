import pytest

from hoshiyoke.keyboard import Key, Keyboard
from hoshiyoke.scenes import GameClearScene, GameOverScene, SelectScene, TitleScene


@pytest.fixture
def keyboard():
    return Keyboard()


@pytest.mark.parametrize("scene_class", [TitleScene, GameOverScene, GameClearScene])
def test_space_finishes_confirm_scenes(keyboard, scene_class):
    scene = scene_class(keyboard)
    scene.update()
    assert scene.is_finished is False
    keyboard.update([Key.SPACE])
    scene.update()
    assert scene.is_finished is True


@pytest.mark.parametrize("scene_class", [TitleScene, GameOverScene, GameClearScene])
def test_held_space_does_not_trigger(keyboard, scene_class):
    keyboard.update([Key.SPACE])
    scene = scene_class(keyboard)
    keyboard.update([Key.SPACE])
    scene.update()
    assert scene.is_finished is False


@pytest.mark.parametrize("scene_class", [TitleScene, GameOverScene, GameClearScene])
def test_other_keys_do_not_finish(keyboard, scene_class):
    scene = scene_class(keyboard)
    keyboard.update([Key.W, Key.ONE])
    scene.update()
    assert scene.is_finished is False


def test_scene_assets(keyboard):
    assert TitleScene(keyboard).texture == "BlackBG.png"
    assert GameOverScene(keyboard).bgm == "gameoverbgm.mp3"
    assert GameClearScene(keyboard).texture == "clear.png"


def test_select_records_one(keyboard):
    scene = SelectScene(keyboard)
    keyboard.update([Key.ONE])
    scene.update()
    assert (scene.is_one, scene.is_two, scene.is_three) == (True, False, False)


def test_select_records_several_and_keeps_them(keyboard):
    scene = SelectScene(keyboard)
    keyboard.update([Key.TWO, Key.THREE])
    scene.update()
    keyboard.update([])
    scene.update()
    assert (scene.is_one, scene.is_two, scene.is_three) == (False, True, True)


def test_select_ignores_space(keyboard):
    scene = SelectScene(keyboard)
    keyboard.update([Key.SPACE])
    scene.update()
    assert not (scene.is_one or scene.is_two or scene.is_three)