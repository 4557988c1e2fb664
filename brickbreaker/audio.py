"""Plays the game's music and sound effects at the configured volumes."""

from typing import Dict, Optional

from .config import get_config
from .defs import SoundType

HIT_SOUND_PATH = "assets/audio/sound/hit02.mp3.flac"
COLLECT_SOUND_PATH = "assets/audio/sound/game-bonus-2-294436.mp3"


def _volume_fraction(level: int) -> float:
    return level * 10.0 / 100


class AudioManager:
    """Holds the loaded music and sounds and applies volume settings."""

    def __init__(self) -> None:
        self.music = None
        self._sounds: Dict[SoundType, object] = {}

    def setup(self, resources) -> None:
        resources.add_sound(SoundType.HIT, HIT_SOUND_PATH)
        resources.add_sound(SoundType.COLLECT, COLLECT_SOUND_PATH)
        self.music = resources.music
        self._sounds = {
            sound_type: resources.get_sound(sound_type)
            for sound_type in (SoundType.HIT, SoundType.COLLECT)
        }
        self.update_music_volume()
        self.update_sound_volume()

    def play_sound(self, sound_type: SoundType) -> None:
        sound = self._sounds.get(sound_type)
        if sound is not None:
            sound.play()

    def play_music(self) -> None:
        if self.music is not None:
            self.music.play()

    def stop_music(self) -> None:
        if self.music is not None:
            self.music.stop()

    def update_music_volume(self) -> None:
        if self.music is not None:
            self.music.set_volume(_volume_fraction(get_config().music_volume))

    def update_sound_volume(self) -> None:
        volume = _volume_fraction(get_config().sound_volume)
        for sound in self._sounds.values():
            if sound is not None:
                sound.set_volume(volume)


_manager: Optional[AudioManager] = None


def audio_manager() -> AudioManager:
    """Return the shared audio manager."""
    global _manager
    if _manager is None:
        _manager = AudioManager()
    return _manager