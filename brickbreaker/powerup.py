"""Timed power-ups held by the level."""

from dataclasses import dataclass, field
from enum import Enum
from typing import IO

from .defs import PowerUpType
from .utils import TokenReader, to_seconds


class PowerUpStatus(Enum):
    ACTIVATED = 0
    DEACTIVATED = 1


_DURATIONS = {
    PowerUpType.MULTI_BALL: -1.0,
    PowerUpType.FIRE_BALL: 15.0,
}


@dataclass
class PowerUp:
    """An active power-up that expires after its duration in seconds."""

    type: PowerUpType
    duration: float = field(init=False, default=0.0)
    elapsed_time: float = 0.0
    status: PowerUpStatus = PowerUpStatus.ACTIVATED

    def __post_init__(self) -> None:
        self.duration = _DURATIONS.get(self.type, 0.0)

    def update(self, delta_time: int) -> None:
        if self.status is PowerUpStatus.ACTIVATED:
            self.elapsed_time += to_seconds(delta_time)
            if self.elapsed_time > self.duration:
                self.status = PowerUpStatus.DEACTIVATED

    def save(self, out: IO[str]) -> None:
        out.write(f"{self.type.value} {self.duration:g} {self.elapsed_time:g}\n")

    def load(self, reader: TokenReader) -> None:
        self.type = PowerUpType(reader.next_int())
        self.duration = reader.next_float()
        self.elapsed_time = reader.next_float()