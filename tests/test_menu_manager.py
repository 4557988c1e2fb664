import pygame
import pytest

from brickbreaker.config import Config
from brickbreaker.defs import GameState, MenuGroupType
from brickbreaker.events import GameEventQueue
from brickbreaker.menu_manager import MenuManager
from brickbreaker.menus import EndMenu, InGameMenu, Menu, StartMenu
from brickbreaker.resources import Texture


class FakeResources:
    def add_text(self, text):
        return Texture(pygame.Surface((max(len(text), 1) * 10, 20)))

    def get_button_texture(self, button_type):
        return Texture(pygame.Surface((20, 20)))


class FakeAudio:
    def play_music(self):
        pass

    def stop_music(self):
        pass

    def update_music_volume(self):
        pass

    def update_sound_volume(self):
        pass


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


@pytest.fixture
def manager():
    mgr = MenuManager(GameEventQueue(), Config(), FakeAudio())
    mgr.setup(FakeResources())
    return mgr


def test_setup_creates_menus(manager):
    assert [type(m) for m in manager.menus] == [StartMenu, InGameMenu, EndMenu]
    assert manager.setting_menu is not None
    assert manager.group is MenuGroupType.NORMAL


def test_settings_and_back(manager):
    settings_button = manager.menus[0].buttons[2]
    state = manager.handle_event(click(settings_button.rect.center), GameState.START)
    state = manager.update(state)
    assert manager.group is MenuGroupType.SETTINGS
    assert state is GameState.START

    back_button = manager.setting_menu.buttons[0]
    state = manager.handle_event(click(back_button.rect.center), state)
    state = manager.update(state)
    assert manager.group is MenuGroupType.NORMAL
    assert state is GameState.START


def test_play_from_title(manager):
    play_button = manager.menus[0].buttons[0]
    state = manager.handle_event(click(play_button.rect.center), GameState.START)
    assert manager.update(state) is GameState.PLAYING


def test_escape_pauses(manager):
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert manager.handle_event(event, GameState.PLAYING) is GameState.PAUSED


def test_settings_group_ignores_normal_menus(manager):
    manager.group = MenuGroupType.SETTINGS
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert manager.handle_event(event, GameState.PLAYING) is GameState.PLAYING


def test_render_settings_group_draws_background(manager):
    manager.group = MenuGroupType.SETTINGS
    surface = pygame.Surface((800, 600))
    manager.render(surface)
    assert tuple(surface.get_at((700, 500))) == Menu.BG_COLOR


def test_render_playing_draws_nothing(manager):
    manager.update(GameState.PLAYING)
    surface = pygame.Surface((800, 600))
    manager.render(surface)
    assert tuple(surface.get_at((700, 500))) == (0, 0, 0, 255)