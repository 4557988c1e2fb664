import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from brickbreaker.defs import GameState  # noqa: E402
from brickbreaker.events import GameEventQueue  # noqa: E402
from brickbreaker.game import Game, main  # noqa: E402
from brickbreaker.paddle import Paddle  # noqa: E402
from brickbreaker.resources import Texture  # noqa: E402

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


class FakeResources:
    def __init__(self):
        self.lost_texture = Texture(self._filled(RED))
        self.won_texture = Texture(self._filled(BLUE))

    @staticmethod
    def _filled(color):
        surface = pygame.Surface((40, 20))
        surface.fill(color)
        return surface

    def add_text(self, text):
        return Texture(pygame.Surface((max(len(text), 1) * 10, 20)))

    def get_text(self, text):
        return self.add_text(text)

    def get_object_texture(self, object_type, sub_type):
        return None

    def get_button_texture(self, button_type):
        return Texture(pygame.Surface((20, 20)))


class FakeClock:
    def __init__(self, *times):
        self.times = list(times)

    def __call__(self):
        return self.times.pop(0)


@pytest.fixture
def game(tmp_path):
    g = Game(save_dir=tmp_path / "save", resources=FakeResources(), events=GameEventQueue(),
             clock=FakeClock(100, 116, 132))
    g.level.setup()
    return g


@pytest.fixture
def display():
    pygame.display.init()
    pygame.event.clear()
    yield
    pygame.display.quit()


def test_save_event_writes_level(game, tmp_path):
    game.events.push("save")
    game.process_game_events()
    assert (tmp_path / "save" / "level.txt").is_file()
    assert len(game.events) == 0


def test_load_event_restores_and_starts_playing(game):
    game.level.lives = 2
    game.events.push("save")
    game.process_game_events()
    game.level.setup()
    game.events.push("load")
    game.process_game_events()
    assert game.level.lives == 2
    assert game.state is GameState.PLAYING


def test_play_again_resets_lives(game):
    game.level.lives = 1
    game.events.push("play_again")
    game.process_game_events()
    assert game.level.lives == 3


def test_update_quit_to_start_returns_to_title(game):
    game.level.lives = 1
    game.state = GameState.QUIT_TO_START
    game.update()
    assert game.state is GameState.START
    assert game.level.lives == 3
    assert game.last_update_time == 100


def test_update_losing_last_ball_ends_game(game):
    game.state = GameState.PLAYING
    game.level.lives = 1
    game.level.objects.balls = []
    game.update()
    assert game.level.has_lost
    assert game.state is GameState.END


def test_update_not_playing_leaves_level(game):
    game.state = GameState.START
    game.level.objects.balls = []
    lives = game.level.lives
    game.update()
    assert game.level.lives == lives
    assert game.state is GameState.START


def test_render_lost_texture(game):
    game.screen = pygame.Surface((800, 600))
    game.state = GameState.END
    game.level.lives = 0
    game.render()
    assert tuple(game.screen.get_at((0, 300))) == RED


def test_render_won_texture(game):
    game.screen = pygame.Surface((800, 600))
    game.state = GameState.END
    game.level.objects.bricks = [[] for _ in game.level.objects.bricks]
    game.render()
    assert tuple(game.screen.get_at((0, 300))) == BLUE


def test_render_without_window_raises(game):
    with pytest.raises(RuntimeError):
        game.render()


def test_quit_event_stops_game(game, display):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.handle_events()
    assert game.state is GameState.QUIT


def test_key_events_reach_level_while_playing(game, display):
    game.state = GameState.PLAYING
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    game.handle_events()
    assert game.level.objects.paddle.velocity == -Paddle.PADDLE_SPEED


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0