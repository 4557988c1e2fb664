"""The game window, main loop and command entry point."""

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, Union

import pygame

from .audio import audio_manager
from .ball import Ball
from .brick import Brick
from .config import get_config
from .defs import SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE, GameState
from .drop import PowerUpDrop
from .events import GameEventQueue, event_queue
from .level import DEFAULT_SAVE_DIR, GameLevel
from .menu_manager import MenuManager
from .paddle import Paddle
from .resources import ResourceError, ResourceManager

BACKGROUND_COLOR = (255, 255, 255)
FRAME_RATE = 60
MIXER_FREQUENCY = 44100
MIXER_BUFFER = 2048


class Game:
    """Ties the window, menus and level together and runs the loop."""

    def __init__(
        self,
        root: Union[str, Path] = ".",
        save_dir: Union[str, Path] = DEFAULT_SAVE_DIR,
        resources=None,
        events: Optional[GameEventQueue] = None,
        clock: Callable[[], int] = pygame.time.get_ticks,
    ) -> None:
        self.state = GameState.START
        self.resources = resources if resources is not None else ResourceManager(root)
        self.events = events if events is not None else event_queue()
        self.save_dir = Path(save_dir)
        self.level = GameLevel(self.resources)
        self.menus = MenuManager(self.events)
        self.screen: Optional[pygame.Surface] = None
        self._clock = clock
        self.last_update_time = 0

    def setup(self) -> None:
        """Open the window and load everything; raises if anything is missing."""
        pygame.display.set_caption(WINDOW_TITLE)
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.screen.fill(BACKGROUND_COLOR)

        self.resources.load()
        for kind in (Ball, Brick, Paddle, PowerUpDrop):
            kind.register_textures(self.resources)

        audio = audio_manager()
        audio.setup(self.resources)
        audio.play_music()

        self.level.setup()
        self.menus.setup(self.resources)
        self.last_update_time = self._clock()

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.state = GameState.QUIT
            self.state = self.menus.handle_event(event, self.state)
            if self.state is GameState.PLAYING:
                self.level.handle_event(event)
        self.process_game_events()

    def process_game_events(self) -> None:
        """Act on the events the menus queued: play again, save or load."""
        while self.events:
            name = self.events.pop()
            if name == "play_again":
                self.level.setup()
            elif name == "save":
                self.level.save(self.save_dir)
            elif name == "load":
                self.level.load(self.save_dir)
                self.state = GameState.PLAYING

    def update(self) -> None:
        current_time = self._clock()
        delta_time = current_time - self.last_update_time
        self.state = self.menus.update(self.state)
        if self.state is GameState.QUIT_TO_START:
            self.level.setup()
            self.state = GameState.START
        if self.state is GameState.PLAYING:
            self.state = self.level.update(delta_time, self.state)
        self.last_update_time = current_time

    def render(self) -> None:
        if self.screen is None:
            raise RuntimeError("no window to draw on")
        self.screen.fill(BACKGROUND_COLOR)
        self.menus.render(self.screen)
        if self.state is GameState.PLAYING:
            self.level.render(self.screen)
        if self.state is GameState.END:
            if self.level.has_lost and self.resources.lost_texture is not None:
                self.resources.lost_texture.render(self.screen, 0, SCREEN_HEIGHT // 2)
            if self.level.has_won and self.resources.won_texture is not None:
                self.resources.won_texture.render(self.screen, 0, SCREEN_HEIGHT // 2)
        if pygame.display.get_init() and pygame.display.get_surface() is self.screen:
            pygame.display.flip()

    def run(self) -> None:
        """Set up, then loop until the player quits."""
        self.setup()
        frame_clock = pygame.time.Clock()
        while self.state is not GameState.QUIT:
            self.handle_events()
            self.update()
            self.render()
            frame_clock.tick(FRAME_RATE)


def _init_pygame() -> None:
    pygame.display.init()
    pygame.font.init()
    pygame.mixer.init(frequency=MIXER_FREQUENCY, buffer=MIXER_BUFFER)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="brickbreaker", description="Play Brick Breaker.")
    parser.add_argument("--root", default=".", help="directory holding assets/ and res/")
    args = parser.parse_args(argv)

    try:
        try:
            _init_pygame()
        except pygame.error as exc:
            print(f"Failed to initialise pygame: {exc}", file=sys.stderr)
            return 1
        game = Game(root=args.root)
        try:
            game.run()
        except (ResourceError, pygame.error) as exc:
            print(f"Failed to init game: {exc}", file=sys.stderr)
            return 1
        finally:
            get_config().save()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())