import io

import pytest

from brickbreaker.ball import Ball
from brickbreaker.defs import LEVEL_HEIGHT, ObjectType, PowerUpDropStatus, PowerUpType
from brickbreaker.drop import PowerUpDrop
from brickbreaker.paddle import Paddle
from brickbreaker.utils import TokenReader


class RecordingResources:
    def __init__(self):
        self.added = []

    def add_texture(self, object_type, sub_type, path):
        self.added.append((object_type, sub_type, path))


def test_defaults():
    drop = PowerUpDrop(PowerUpType.FIRE_BALL)
    assert drop.status is PowerUpDropStatus.ALIVE
    assert (drop.width, drop.height) == (PowerUpDrop.WIDTH, PowerUpDrop.HEIGHT)
    assert drop.sub_type is PowerUpType.FIRE_BALL
    assert drop.object_type is ObjectType.POWER_UP_DROP


def test_register_textures():
    resources = RecordingResources()
    PowerUpDrop.register_textures(resources)
    assert (
        ObjectType.POWER_UP_DROP,
        PowerUpType.FIRE_BALL,
        "assets/img/power_ups/p_FireBall.png",
    ) in resources.added
    assert (
        ObjectType.POWER_UP_DROP,
        PowerUpType.MULTI_BALL,
        "assets/img/power_ups/p_MultiBall.png",
    ) in resources.added


def test_falls_at_drop_speed():
    drop = PowerUpDrop()
    drop.update(1000)
    assert drop.pos_y == pytest.approx(PowerUpDrop.DROP_SPEED)
    assert drop.status is PowerUpDropStatus.ALIVE


def test_dies_below_level():
    drop = PowerUpDrop()
    drop.pos_y = float(LEVEL_HEIGHT)
    drop.update(100)
    assert drop.status is PowerUpDropStatus.DEAD


def test_collected_by_paddle_and_stops():
    drop = PowerUpDrop()
    drop.on_collision(Paddle(), 16)
    assert drop.status is PowerUpDropStatus.COLLECTED
    before = drop.pos_y
    drop.update(500)
    assert drop.pos_y == before


def test_ball_does_not_collect():
    drop = PowerUpDrop()
    drop.on_collision(Ball(), 16)
    assert drop.status is PowerUpDropStatus.ALIVE


def test_save_format():
    drop = PowerUpDrop(PowerUpType.FIRE_BALL)
    out = io.StringIO()
    drop.save(out)
    assert out.getvalue() == "0 0 36 36 1 0\n"


def test_save_load_round_trip():
    drop = PowerUpDrop(PowerUpType.FIRE_BALL)
    drop.pos_x = 210.0
    drop.pos_y = 99.5
    drop.status = PowerUpDropStatus.COLLECTED
    out = io.StringIO()
    drop.save(out)
    restored = PowerUpDrop()
    restored.load(TokenReader(out.getvalue()))
    assert (restored.pos_x, restored.pos_y) == (drop.pos_x, drop.pos_y)
    assert restored.sub_type is PowerUpType.FIRE_BALL
    assert restored.status is PowerUpDropStatus.COLLECTED


def test_load_rejects_unknown_status():
    drop = PowerUpDrop()
    with pytest.raises(ValueError):
        drop.load(TokenReader("0 0 36 36 0 9"))