"""Persistent audio settings."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .utils import TokenReader

DEFAULT_CONFIG_PATH = Path("res/conf/setting.conf")


def _read_bool(reader: TokenReader) -> bool:
    value = reader.next_int()
    if value not in (0, 1):
        raise ValueError(f"expected 0 or 1, got {value}")
    return bool(value)


@dataclass
class Config:
    """Music and sound switches and volumes (0 to 10)."""

    music_on: bool = True
    sound_on: bool = True
    music_volume: int = 10
    sound_volume: int = 10

    def save(self, path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            f"{int(self.music_on)}\n{self.music_volume}\n"
            f"{int(self.sound_on)}\n{self.sound_volume}\n"
        )

    def load(self, path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> None:
        """Read settings from path; a missing file leaves them unchanged."""
        path = Path(path)
        if not path.is_file():
            return
        reader = TokenReader(path.read_text())
        music_on = _read_bool(reader)
        music_volume = reader.next_int()
        sound_on = _read_bool(reader)
        sound_volume = reader.next_int()
        self.music_on = music_on
        self.music_volume = music_volume
        self.sound_on = sound_on
        self.sound_volume = sound_volume


_config: Optional[Config] = None


def get_config() -> Config:
    """Return the shared settings, loaded from the default path on first use."""
    global _config
    if _config is None:
        _config = Config()
        _config.load(DEFAULT_CONFIG_PATH)
    return _config