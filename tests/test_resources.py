from unittest import mock

import pygame
import pytest

from brickbreaker.config import get_config
from brickbreaker.defs import BallType, BrickType, ButtonType, ObjectType, SoundType
from brickbreaker.resources import Music, ResourceError, ResourceManager, Sound, Texture

RED = (255, 0, 0, 255)
WHITE = (255, 255, 255, 255)


@pytest.fixture(autouse=True)
def _fonts():
    pygame.font.init()
    yield


@pytest.fixture
def png(tmp_path):
    surface = pygame.Surface((7, 5))
    surface.fill(RED)
    path = tmp_path / "img.png"
    pygame.image.save(surface, str(path))
    return path


class FakeChunk:
    def __init__(self):
        self.plays = 0
        self.volume = None

    def play(self):
        self.plays += 1

    def set_volume(self, volume):
        self.volume = volume


def test_texture_from_file_size(png):
    texture = Texture.from_file(png)
    assert (texture.width, texture.height) == (7, 5)


def test_texture_from_missing_file(tmp_path):
    with pytest.raises(ResourceError):
        Texture.from_file(tmp_path / "missing.png")


def test_texture_render_places_pixels():
    source = pygame.Surface((4, 4))
    source.fill(RED)
    target = pygame.Surface((50, 50))
    target.fill(WHITE)
    Texture(source).render(target, 10, 10)
    assert target.get_at((10, 10)) == RED
    assert target.get_at((9, 9)) == WHITE


def test_texture_render_scaled_fills_rect():
    source = pygame.Surface((2, 2))
    source.fill(RED)
    target = pygame.Surface((50, 50))
    target.fill(WHITE)
    Texture(source).render_scaled(target, pygame.Rect(0, 0, 20, 20))
    assert target.get_at((19, 19)) == RED
    assert target.get_at((20, 20)) == WHITE


def test_text_texture_grows_with_text():
    font = pygame.font.Font(None, 20)
    assert Texture.from_text("ab", font).width < Texture.from_text("abcdef", font).width


def test_sound_respects_switch(monkeypatch):
    chunk = FakeChunk()
    sound = Sound(chunk)
    monkeypatch.setattr(get_config(), "sound_on", True)
    sound.play()
    monkeypatch.setattr(get_config(), "sound_on", False)
    sound.play()
    assert chunk.plays == 1


def test_sound_set_volume_passes_through():
    chunk = FakeChunk()
    Sound(chunk).set_volume(0.25)
    assert chunk.volume == 0.25


def test_sound_from_missing_file(tmp_path):
    with pytest.raises(ResourceError):
        Sound.from_file(tmp_path / "missing.wav")


def test_music_play_loops_when_idle(monkeypatch):
    monkeypatch.setattr(get_config(), "music_on", True)
    with mock.patch("pygame.mixer.music") as music_mock:
        music_mock.get_busy.return_value = False
        music = Music()
        music.load("track.ogg")
        assert str(music.path) == "track.ogg"
        music.play()
        assert music_mock.load.call_count == 1
        assert music_mock.play.call_args_list == [mock.call(-1)]


def test_music_does_not_restart_when_busy(monkeypatch):
    monkeypatch.setattr(get_config(), "music_on", True)
    with mock.patch("pygame.mixer.music") as music_mock:
        music_mock.get_busy.return_value = True
        music = Music()
        music.load("track.ogg")
        assert str(music.path) == "track.ogg"
        music.play()
        assert music_mock.load.call_count == 1
        assert music_mock.play.call_args_list == []


def test_music_play_without_load():
    with pytest.raises(ResourceError):
        Music().play()


def test_music_load_failure():
    with mock.patch("pygame.mixer.music") as music_mock:
        music_mock.load.side_effect = pygame.error("bad file")
        music = Music()
        with pytest.raises(ResourceError):
            music.load("broken.ogg")
        assert music.path is None


def test_text_is_cached():
    manager = ResourceManager()
    manager.font = pygame.font.Font(None, 20)
    first = manager.add_text("Play")
    assert manager.add_text("Play") is first
    assert manager.get_text("Play") is first
    assert manager.get_text("Quit") is None


def test_add_text_without_font():
    with pytest.raises(ResourceError):
        ResourceManager().add_text("Play")


def test_object_textures(png):
    manager = ResourceManager(root=png.parent)
    manager.add_texture(ObjectType.BALL, BallType.NORMAL, png.name)
    texture = manager.get_object_texture(ObjectType.BALL, BallType.NORMAL)
    assert texture.width == 7
    assert manager.get_object_texture(ObjectType.BALL, BallType.FIRE) is None
    assert manager.get_object_texture(ObjectType.BRICK, BrickType.EASY) is None


def test_add_missing_object_texture(tmp_path):
    manager = ResourceManager(root=tmp_path)
    with pytest.raises(ResourceError):
        manager.add_texture(ObjectType.BALL, BallType.NORMAL, "missing.png")
    assert manager.get_object_texture(ObjectType.BALL, BallType.NORMAL) is None


def test_add_missing_sound(tmp_path):
    manager = ResourceManager(root=tmp_path)
    with pytest.raises(ResourceError):
        manager.add_sound(SoundType.HIT, "missing.wav")
    assert manager.get_sound(SoundType.HIT) is None


def test_load_from_empty_root_fails(tmp_path):
    manager = ResourceManager(root=tmp_path)
    with pytest.raises(ResourceError):
        manager.load()
    assert manager.font is None
    assert manager.get_button_texture(ButtonType.OPTION_ENTRY_LEFT) is None