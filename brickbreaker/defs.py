"""Game-wide constants and enumerations."""

from enum import Enum
from typing import Union

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_TITLE = "Brick Breaker"

LEVEL_WIDTH = SCREEN_WIDTH - 100
LEVEL_HEIGHT = SCREEN_HEIGHT

BRICK_ROW = 5
BRICK_COLUMN = 10


class GameState(Enum):
    START = 0
    PLAYING = 1
    PAUSED = 2
    SETTINGS = 3
    QUIT_TO_START = 4
    END = 5
    QUIT = 6


class ObjectType(Enum):
    BALL = 0
    PADDLE = 1
    BRICK = 2
    POWER_UP_DROP = 3
    TOTAL = 4


class BallType(Enum):
    NORMAL = 0
    FIRE = 1
    TOTAL = 2


class PaddleType(Enum):
    NORMAL = 0
    TOTAL = 1


class BrickType(Enum):
    EASY = 0
    MEDIUM = 1
    HARD = 2
    TOTAL = 3


class PowerUpType(Enum):
    MULTI_BALL = 0
    FIRE_BALL = 1
    TOTAL = 2


ObjectSubType = Union[BallType, PaddleType, BrickType, PowerUpType]


class PowerUpDropStatus(Enum):
    ALIVE = 0
    COLLECTED = 1
    DEAD = 2


class ManagerType(Enum):
    RESOURCE_MANAGER = 0
    GAME_OBJECT_MANAGER = 1
    POWER_UP_MANAGER = 2
    COLLISION_MANAGER = 3


class ButtonType(Enum):
    PLAY = 0
    SETTINGS = 1
    RESUME = 2
    BACK = 3
    OPTION_ENTRY_LEFT = 4
    OPTION_ENTRY_RIGHT = 5
    PLAY_AGAIN = 6
    SAVE = 7
    LOAD = 8
    QUIT = 9
    EXIT = 10


class MenuGroupType(Enum):
    NORMAL = 0
    SETTINGS = 1


class SettingType(Enum):
    MUSIC_ON_OFF = 0
    MUSIC_VOLUME = 1
    SOUND_ON_OFF = 2
    SOUND_VOLUME = 3


class SoundType(Enum):
    HIT = 0
    COLLECT = 1