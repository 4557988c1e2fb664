"""Power-up capsules that fall from destroyed bricks."""

from typing import IO

from .audio import audio_manager
from .defs import LEVEL_HEIGHT, ObjectType, PowerUpDropStatus, PowerUpType, SoundType
from .gameobject import GameObject
from .utils import TokenReader, to_seconds

DROP_TEXTURE_PATHS = {
    PowerUpType.FIRE_BALL: "assets/img/power_ups/p_FireBall.png",
    PowerUpType.MULTI_BALL: "assets/img/power_ups/p_MultiBall.png",
}


class PowerUpDrop(GameObject):
    """A falling power-up, collected by touching the paddle."""

    object_type = ObjectType.POWER_UP_DROP

    DROP_SPEED = 100
    WIDTH = 36
    HEIGHT = 36

    def __init__(self, power_up_type: PowerUpType = PowerUpType.MULTI_BALL) -> None:
        super().__init__(0.0, 0.0, self.WIDTH, self.HEIGHT, power_up_type)
        self.status = PowerUpDropStatus.ALIVE
        self.velocity = float(self.DROP_SPEED)

    @staticmethod
    def register_textures(resources) -> None:
        for power_up_type, path in DROP_TEXTURE_PATHS.items():
            resources.add_texture(ObjectType.POWER_UP_DROP, power_up_type, path)

    def update(self, delta_time: int) -> None:
        if self.status is PowerUpDropStatus.ALIVE:
            self.pos_y += self.velocity * to_seconds(delta_time)
            if self.pos_y > LEVEL_HEIGHT:
                self.status = PowerUpDropStatus.DEAD

    def on_collision(self, other: GameObject, delta_time: int) -> None:
        if other.object_type is ObjectType.PADDLE:
            self.status = PowerUpDropStatus.COLLECTED
            audio_manager().play_sound(SoundType.COLLECT)

    def save(self, out: IO[str]) -> None:
        super().save(out)
        out.write(f" {self.sub_type.value} {self.status.value}\n")

    def load(self, reader: TokenReader) -> None:
        super().load(reader)
        self.sub_type = PowerUpType(reader.next_int())
        self.status = PowerUpDropStatus(reader.next_int())