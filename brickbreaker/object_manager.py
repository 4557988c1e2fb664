"""Owns the paddle, balls, bricks and falling power-ups of one level."""

from pathlib import Path
from typing import List, Optional, TypeVar, Union

from .ball import Ball, BallState
from .brick import Brick
from .collision import handle_collision
from .defs import BRICK_COLUMN, BRICK_ROW, BallType, PowerUpDropStatus, PowerUpType
from .drop import PowerUpDrop
from .gameobject import GameObject
from .paddle import Paddle
from .utils import TokenReader, uniform_random

BALL_SEP = 20

DEFAULT_OBJECTS_DIR = Path("save/objects")
PADDLE_FILE = "paddle.txt"
BALL_FILE = "ball.txt"
BRICK_FILE = "bricks.txt"
DROP_FILE = "powerUp.txt"

_T = TypeVar("_T", bound=GameObject)


class GameObjectManager:
    """Updates, collides, draws and persists every object on the field."""

    def __init__(self, resources) -> None:
        self.resources = resources
        self.paddle = Paddle()
        self.balls: List[Ball] = []
        self.bricks: List[List[Brick]] = []
        self.drops: List[PowerUpDrop] = []

    @property
    def balls_empty(self) -> bool:
        return not self.balls

    @property
    def bricks_empty(self) -> bool:
        return all(not row for row in self.bricks)

    def setup(self) -> None:
        """Place one ball on the paddle and fill the brick grid."""
        self.paddle.set_texture(self.resources)

        ball = Ball()
        ball.set_texture(self.resources)
        self.balls.append(ball)

        for i in range(BRICK_ROW):
            row = []
            for j in range(BRICK_COLUMN):
                brick = Brick()
                brick.pos_y = float(i * Brick.BRICK_HEIGHT)
                brick.pos_x = float(j * Brick.BRICK_WIDTH)
                brick.set_texture(self.resources)
                row.append(brick)
            self.bricks.append(row)

    def handle_event(self, event) -> None:
        self.paddle.handle_event(event)
        for ball in self.balls:
            ball.handle_event(event)

    def update(self, delta_time: int) -> None:
        self.drops = [d for d in self.drops if d.status is PowerUpDropStatus.ALIVE]

        self.paddle.update(delta_time)

        for row in self.bricks:
            for brick in row:
                brick.update(delta_time, self.resources)

        for ball in self.balls:
            ball.update(delta_time, self.paddle)
            handle_collision(ball, self.paddle, delta_time)
            for row in self.bricks:
                for brick in row:
                    handle_collision(ball, brick, delta_time)

        for drop in self.drops:
            drop.update(delta_time)
            handle_collision(self.paddle, drop, delta_time)

        self.balls = [b for b in self.balls if b.state is not BallState.DEAD]

        for row in self.bricks:
            survivors = []
            for brick in row:
                if brick.is_alive:
                    survivors.append(brick)
                elif brick.has_drop:
                    self.spawn_drop(brick.pos_x, brick.pos_y)
            row[:] = survivors

    def render(self, target) -> None:
        self.paddle.render(target)
        for row in self.bricks:
            for brick in row:
                brick.render(target)
        for ball in self.balls:
            ball.render(target)
        for drop in self.drops:
            drop.render(target)

    def add_ball(self, ball: Ball, x: float = 0.0, y: float = 0.0) -> None:
        """Add a copy of ball placed at (x, y)."""
        self.balls.append(ball.copy(x, y))

    def change_ball(self, ball: Ball, ball_type: BallType) -> None:
        ball.sub_type = ball_type
        ball.set_texture(self.resources)

    def collected_power_up(self) -> Optional[PowerUpType]:
        """Return the kind of the first collected drop, or None."""
        for drop in self.drops:
            if drop.status is PowerUpDropStatus.COLLECTED:
                return drop.sub_type
        return None

    def apply_power_up(self, power_up_type: PowerUpType) -> None:
        if power_up_type is PowerUpType.MULTI_BALL:
            for ball in list(self.balls):
                x, y = ball.pos_x, ball.pos_y
                self.add_ball(ball, x - BALL_SEP, y)
                self.add_ball(ball, x + BALL_SEP, y)
        elif power_up_type is PowerUpType.FIRE_BALL:
            for ball in self.balls:
                self.change_ball(ball, BallType.FIRE)

    def remove_power_up(self, power_up_type: PowerUpType) -> None:
        if power_up_type is PowerUpType.FIRE_BALL:
            for ball in self.balls:
                self.change_ball(ball, BallType.NORMAL)

    def spawn_drop(self, x: float, y: float) -> PowerUpDrop:
        """Drop a power-up of random kind at (x, y) and return it."""
        kind = PowerUpType(uniform_random(0, PowerUpType.TOTAL.value - 1))
        drop = PowerUpDrop(kind)
        drop.set_texture(self.resources)
        drop.pos_x = x
        drop.pos_y = y
        self.drops.append(drop)
        return drop

    def reset_balls(self) -> None:
        """Replace all balls with a single one resting on the paddle."""
        ball = Ball()
        ball.set_texture(self.resources)
        ball.state = BallState.START
        self.balls = [ball]

    def save(self, directory: Union[str, Path] = DEFAULT_OBJECTS_DIR) -> None:
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        with open(directory / PADDLE_FILE, "w") as out:
            self.paddle.save(out)

        with open(directory / BALL_FILE, "w") as out:
            out.write(f"{len(self.balls)}\n")
            for ball in self.balls:
                ball.save(out)

        with open(directory / BRICK_FILE, "w") as out:
            for row in self.bricks:
                out.write(f"{len(row)}\n")
                for brick in row:
                    brick.save(out)

        with open(directory / DROP_FILE, "w") as out:
            out.write(f"{len(self.drops)}\n")
            for drop in self.drops:
                drop.save(out)

    def _load_object(self, obj: _T, reader: TokenReader) -> _T:
        obj.load(reader)
        obj.set_texture(self.resources)
        return obj

    def load(self, directory: Union[str, Path] = DEFAULT_OBJECTS_DIR) -> None:
        """Restore objects saved in directory; do nothing if it is missing."""
        directory = Path(directory)
        if not directory.is_dir():
            return

        self._load_object(self.paddle, TokenReader((directory / PADDLE_FILE).read_text()))

        reader = TokenReader((directory / BALL_FILE).read_text())
        count = reader.next_int()
        self.balls = [self._load_object(Ball(), reader) for _ in range(count)]

        reader = TokenReader((directory / BRICK_FILE).read_text())
        rows = []
        for _ in range(BRICK_ROW):
            count = reader.next_int()
            rows.append([self._load_object(Brick(), reader) for _ in range(count)])
        self.bricks = rows

        reader = TokenReader((directory / DROP_FILE).read_text())
        count = reader.next_int()
        self.drops = [self._load_object(PowerUpDrop(), reader) for _ in range(count)]