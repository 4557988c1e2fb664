"""Bricks that take one to three hits and may leave a power-up behind."""

from typing import IO, Optional

from .defs import BrickType, ObjectType
from .gameobject import GameObject
from .utils import TokenReader, weighted_random

BRICK_TYPE_PROBABILITIES = (0.5, 0.3, 0.2)

POWER_UP_DROP_PROBABILITY = {
    BrickType.EASY: (0.9, 0.1),
    BrickType.MEDIUM: (0.6, 0.4),
    BrickType.HARD: (0.3, 0.7),
}

BRICK_TEXTURE_PATHS = {
    BrickType.EASY: "assets/img/bricks/EasyBrick.png",
    BrickType.MEDIUM: "assets/img/bricks/MediumBrick.png",
    BrickType.HARD: "assets/img/bricks/HardBrick.png",
}


class Brick(GameObject):
    """A brick whose kind is its remaining number of hits."""

    object_type = ObjectType.BRICK

    BRICK_WIDTH = 70
    BRICK_HEIGHT = 33
    COLLISION_COOLDOWN = 160

    def __init__(
        self,
        brick_type: Optional[BrickType] = None,
        has_drop: Optional[bool] = None,
    ) -> None:
        if brick_type is None:
            brick_type = BrickType(weighted_random(BRICK_TYPE_PROBABILITIES))
        if brick_type not in POWER_UP_DROP_PROBABILITY:
            raise ValueError(f"not a brick kind: {brick_type}")
        super().__init__(0.0, 0.0, self.BRICK_WIDTH, self.BRICK_HEIGHT, brick_type)
        self.lives = brick_type.value + 1
        self.time_since_last_cooldown = 0
        if has_drop is None:
            has_drop = bool(weighted_random(POWER_UP_DROP_PROBABILITY[brick_type]))
        self.has_drop = has_drop

    @property
    def is_alive(self) -> bool:
        return self.lives > 0

    @staticmethod
    def register_textures(resources) -> None:
        for brick_type, path in BRICK_TEXTURE_PATHS.items():
            resources.add_texture(ObjectType.BRICK, brick_type, path)

    def update(self, delta_time: int, resources) -> None:
        self.time_since_last_cooldown += delta_time
        self.set_texture(resources)

    def on_collision(self, other: GameObject, delta_time: int) -> None:
        if other.object_type is not ObjectType.BALL:
            return
        if self.time_since_last_cooldown > self.COLLISION_COOLDOWN:
            self.lives -= 1
            if self.lives > 0:
                self.sub_type = BrickType(self.lives - 1)
            self.time_since_last_cooldown = 0

    def save(self, out: IO[str]) -> None:
        super().save(out)
        out.write(f" {self.sub_type.value} {self.lives} {self.time_since_last_cooldown}\n")

    def load(self, reader: TokenReader) -> None:
        super().load(reader)
        self.sub_type = BrickType(reader.next_int())
        self.lives = reader.next_int()
        self.time_since_last_cooldown = reader.next_int()