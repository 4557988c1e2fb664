"""The player's paddle."""

from typing import IO

import pygame

from .defs import LEVEL_HEIGHT, LEVEL_WIDTH, ObjectType, PaddleType
from .gameobject import GameObject
from .utils import to_seconds

PADDLE_TEXTURE_PATH = "assets/img/paddles/Paddle.png"


class Paddle(GameObject):
    """A paddle steered left and right with the arrow keys."""

    object_type = ObjectType.PADDLE

    PADDLE_WIDTH = 120
    PADDLE_HEIGHT = 30
    PADDLE_SPEED = 450

    def __init__(self) -> None:
        super().__init__(
            300.0,
            LEVEL_HEIGHT * 0.9,
            self.PADDLE_WIDTH,
            self.PADDLE_HEIGHT,
            PaddleType.NORMAL,
        )
        self.velocity = 0.0

    @staticmethod
    def register_textures(resources) -> None:
        resources.add_texture(ObjectType.PADDLE, PaddleType.NORMAL, PADDLE_TEXTURE_PATH)

    def handle_event(self, event) -> None:
        if getattr(event, "repeat", 0):
            return
        if event.type == pygame.KEYDOWN:
            sign = 1
        elif event.type == pygame.KEYUP:
            sign = -1
        else:
            return
        if event.key == pygame.K_LEFT:
            self.velocity -= sign * self.PADDLE_SPEED
        elif event.key == pygame.K_RIGHT:
            self.velocity += sign * self.PADDLE_SPEED

    def update(self, delta_time: int) -> None:
        self.pos_x += self.velocity * to_seconds(delta_time)
        if self.pos_x < 0:
            self.pos_x = 0.0
        if self.pos_x + self.width > LEVEL_WIDTH:
            self.pos_x = float(LEVEL_WIDTH - self.width)

    def on_collision(self, other: GameObject, delta_time: int) -> None:
        """The paddle is not affected by what hits it."""

    def save(self, out: IO[str]) -> None:
        super().save(out)
        out.write("\n")