"""One round of play: lives, the active power-up and the field's objects."""

from pathlib import Path
from typing import Optional, Union

import pygame

from .defs import LEVEL_HEIGHT, LEVEL_WIDTH, GameState, PowerUpType
from .object_manager import GameObjectManager
from .powerup import PowerUp, PowerUpStatus
from .utils import TokenReader

DEFAULT_SAVE_DIR = Path("save")
LEVEL_FILE = "level.txt"
OBJECTS_DIR = "objects"
STARTING_LIVES = 3


class GameLevel:
    """Tracks lives and power-ups and decides when the round ends."""

    def __init__(self, resources) -> None:
        self.resources = resources
        self.lives = STARTING_LIVES
        self.objects = GameObjectManager(resources)
        self.current_power_up: Optional[PowerUp] = None
        self.live_texture = None

    @property
    def has_lost(self) -> bool:
        return self.lives <= 0

    @property
    def has_won(self) -> bool:
        return self.objects.bricks_empty

    @property
    def has_finished(self) -> bool:
        return self.has_lost or self.has_won

    def setup(self) -> None:
        """Start a fresh round."""
        self.objects = GameObjectManager(self.resources)
        self.objects.setup()
        self.lives = STARTING_LIVES
        self.live_texture = self.resources.add_text("Live")

    def handle_event(self, event) -> None:
        self.objects.handle_event(event)

    def update(self, delta_time: int, state: GameState) -> GameState:
        """Advance the round and return the resulting game state."""
        if self.has_finished:
            return state

        self.objects.update(delta_time)

        if self.current_power_up is not None:
            self.current_power_up.update(delta_time)
            if self.current_power_up.status is PowerUpStatus.DEACTIVATED:
                self.objects.remove_power_up(self.current_power_up.type)
                self.current_power_up = None

        collected = self.objects.collected_power_up()
        if collected is not None:
            self.current_power_up = PowerUp(collected)
            self.objects.apply_power_up(collected)

        if self.objects.balls_empty:
            self.lives -= 1
            self.objects.reset_balls()

        if self.has_finished and state is not GameState.QUIT:
            state = GameState.END
        return state

    def render(self, target) -> None:
        self.objects.render(target)
        pygame.draw.line(target, (0, 0, 0), (LEVEL_WIDTH, 0), (LEVEL_WIDTH, LEVEL_HEIGHT))
        label = self.live_texture or self.resources.add_text("Live")
        label.render(target, LEVEL_WIDTH, 0)
        count = self.resources.add_text(f"0{self.lives}")
        count.render(target, LEVEL_WIDTH, label.height)

    def save(self, directory: Union[str, Path] = DEFAULT_SAVE_DIR) -> None:
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        with open(directory / LEVEL_FILE, "w") as out:
            out.write(f"{self.lives}\n")
            if self.current_power_up is not None:
                out.write("1 ")
                self.current_power_up.save(out)
            else:
                out.write("0\n")
        self.objects.save(directory / OBJECTS_DIR)

    def load(self, directory: Union[str, Path] = DEFAULT_SAVE_DIR) -> None:
        """Restore a saved round; do nothing if directory is missing."""
        directory = Path(directory)
        if not directory.is_dir():
            return
        reader = TokenReader((directory / LEVEL_FILE).read_text())
        self.lives = reader.next_int()
        if reader.next_int() == 1:
            power_up = PowerUp(PowerUpType.TOTAL)
            power_up.load(reader)
            self.current_power_up = power_up
        self.objects.load(directory / OBJECTS_DIR)