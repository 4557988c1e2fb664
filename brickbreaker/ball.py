"""The ball, bouncing off walls, the paddle and bricks."""

import math
from enum import Enum
from typing import IO, Optional

import pygame

from .audio import audio_manager
from .defs import LEVEL_HEIGHT, LEVEL_WIDTH, BallType, ObjectType, SoundType
from .gameobject import GameObject
from .paddle import Paddle
from .utils import TokenReader, to_seconds

BALL_TEXTURE_PATHS = {
    BallType.NORMAL: "assets/img/balls/NormalBall.png",
    BallType.FIRE: "assets/img/balls/FireBall.png",
}


class BallState(Enum):
    START = 0
    MOVING = 1
    EXPIRED = 2
    DEAD = 3


class Ball(GameObject):
    """A ball resting on the paddle until launched with the space bar."""

    object_type = ObjectType.BALL

    BALL_SPEED = 400
    BALL_WIDTH = 24
    BALL_HEIGHT = 24

    # Hit offset from the paddle centre maps linearly onto the bounce angle.
    HIT_POS_START = -(Paddle.PADDLE_WIDTH - BALL_WIDTH) / 2.0
    HIT_POS_END = (Paddle.PADDLE_WIDTH - BALL_WIDTH) / 2.0
    RAD_ANGLE_START = 3 * math.pi / 4
    RAD_ANGLE_END = math.pi / 4

    def __init__(self) -> None:
        super().__init__(
            0.0,
            LEVEL_HEIGHT * 0.9,
            self.BALL_WIDTH,
            self.BALL_HEIGHT,
            BallType.NORMAL,
        )
        self.vel_x = 0.0
        self.vel_y = 0.0
        self.state = BallState.START

    @staticmethod
    def register_textures(resources) -> None:
        for ball_type, path in BALL_TEXTURE_PATHS.items():
            resources.add_texture(ObjectType.BALL, ball_type, path)

    def copy(self, x: Optional[float] = None, y: Optional[float] = None) -> "Ball":
        """Return a ball like this one, optionally placed elsewhere."""
        ball = Ball()
        ball.pos_x = self.pos_x if x is None else x
        ball.pos_y = self.pos_y if y is None else y
        ball.vel_x = self.vel_x
        ball.vel_y = self.vel_y
        ball.state = self.state
        ball.sub_type = self.sub_type
        ball.texture = self.texture
        return ball

    def handle_event(self, event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
            self.state = BallState.MOVING
            self.vel_x = 0.0
            self.vel_y = -float(self.BALL_SPEED)

    def update(self, delta_time: int, paddle: Paddle) -> None:
        if self.state is BallState.START:
            self.pos_x = paddle.pos_x + (paddle.width - self.width) / 2.0
            self.pos_y = paddle.pos_y - self.height
        elif self.state is BallState.MOVING:
            seconds = to_seconds(delta_time)
            self.pos_x += self.vel_x * seconds
            self.pos_y += self.vel_y * seconds
            hit_wall = False

            if self.pos_x < 0:
                self.pos_x = 0.0
                self.vel_x = -self.vel_x
                hit_wall = True
            if self.pos_x + self.width > LEVEL_WIDTH:
                self.pos_x = float(LEVEL_WIDTH - self.width)
                self.vel_x = -self.vel_x
                hit_wall = True
            if self.pos_y < 0:
                self.pos_y = 0.0
                self.vel_y = -self.vel_y
                hit_wall = True

            if hit_wall:
                audio_manager().play_sound(SoundType.HIT)

            if self.pos_y > LEVEL_HEIGHT:
                self.state = BallState.DEAD

    def _bounce_angle(self, other: GameObject) -> float:
        ball_center = self.pos_x + self.width / 2.0
        other_center = other.pos_x + other.width / 2.0
        t = (ball_center - other_center - self.HIT_POS_START) / (
            self.HIT_POS_END - self.HIT_POS_START
        )
        return t * (self.RAD_ANGLE_END - self.RAD_ANGLE_START) + self.RAD_ANGLE_START

    def _bounce_off_side(self, other: GameObject, check_x: float) -> None:
        if check_x + self.width < other.pos_x:
            self.pos_x = other.pos_x - self.width
        else:
            self.pos_x = other.pos_x + other.width
        self.vel_x = -self.vel_x

    def on_collision(self, other: GameObject, delta_time: int) -> None:
        seconds = to_seconds(delta_time)
        check_y = self.pos_y - self.vel_y * seconds
        check_x = self.pos_x - self.vel_x * seconds

        if other.object_type is ObjectType.PADDLE:
            if check_y + self.height < other.pos_y:
                self.pos_y = other.pos_y - self.height
                angle = self._bounce_angle(other)
                self.vel_x = self.BALL_SPEED * math.cos(angle)
                self.vel_y = -self.BALL_SPEED * math.sin(angle)
            elif check_y > other.pos_y + other.height:
                self.pos_y = other.pos_y + other.height
                angle = self._bounce_angle(other)
                self.vel_x = self.BALL_SPEED * math.cos(angle)
                self.vel_y = self.BALL_SPEED * math.sin(angle)
            else:
                self._bounce_off_side(other, check_x)
            audio_manager().play_sound(SoundType.HIT)

        elif other.object_type is ObjectType.BRICK:
            if self.sub_type is not BallType.FIRE:
                if check_y + self.height < other.pos_y:
                    self.pos_y = other.pos_y - self.height
                    self.vel_y = -self.vel_y
                elif check_y > other.pos_y + other.height:
                    self.pos_y = other.pos_y + other.height
                    self.vel_y = -self.vel_y
                else:
                    self._bounce_off_side(other, check_x)
            audio_manager().play_sound(SoundType.HIT)

    def save(self, out: IO[str]) -> None:
        super().save(out)
        out.write(
            f" {self.vel_x:g} {self.vel_y:g} {self.sub_type.value} {self.state.value}\n"
        )

    def load(self, reader: TokenReader) -> None:
        super().load(reader)
        self.vel_x = reader.next_float()
        self.vel_y = reader.next_float()
        self.sub_type = BallType(reader.next_int())
        self.state = BallState(reader.next_int())