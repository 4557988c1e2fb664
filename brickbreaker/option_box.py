"""A settings row: a name, left and right arrows and the selected value."""

from typing import List, Optional

import pygame

from .audio import audio_manager
from .buttons import OptionEntryButton
from .config import Config, get_config
from .defs import ButtonType, GameState, SettingType
from .resources import Texture

_NAMES = {
    SettingType.MUSIC_ON_OFF: "Music",
    SettingType.MUSIC_VOLUME: "Music Volume",
    SettingType.SOUND_ON_OFF: "Sound",
    SettingType.SOUND_VOLUME: "Sound Volume",
}

_SWITCH_OPTIONS = ("off", "on")
_VOLUME_OPTIONS = tuple(f"0{d}" for d in range(10)) + ("10",)


class OptionEntryBox:
    """Cycles one audio setting through its allowed values."""

    PADDING = 10

    def __init__(self, setting_type: SettingType, config: Optional[Config] = None, audio=None) -> None:
        if setting_type not in _NAMES:
            raise ValueError(f"not a setting: {setting_type!r}")
        self.setting_type = setting_type
        self.name = _NAMES[setting_type]
        self._config = config
        self._audio = audio
        self.rect = pygame.Rect(0, 0, 500, 40)
        self.left_button = OptionEntryButton(ButtonType.OPTION_ENTRY_LEFT)
        self.right_button = OptionEntryButton(ButtonType.OPTION_ENTRY_RIGHT)
        if setting_type in (SettingType.MUSIC_ON_OFF, SettingType.SOUND_ON_OFF):
            self.options = _SWITCH_OPTIONS
        else:
            self.options = _VOLUME_OPTIONS
        self.selected = len(self.options) - 1
        self.name_texture: Optional[Texture] = None
        self.option_textures: List[Texture] = []

    @property
    def config(self) -> Config:
        return self._config if self._config is not None else get_config()

    @property
    def audio(self):
        return self._audio if self._audio is not None else audio_manager()

    @property
    def width(self) -> int:
        return self.rect.w

    @property
    def height(self) -> int:
        return self.rect.h

    @property
    def value(self) -> str:
        return self.options[self.selected]

    def setup(self, resources) -> None:
        """Render labels and lay out the arrows after the name."""
        self.name_texture = resources.add_text(self.name)
        self.left_button.setup(resources)
        self.right_button.setup(resources)

        self.left_button.rect.x = self.rect.x + self.name_texture.width + 2 * self.PADDING
        self.left_button.rect.y = self.rect.y
        self.right_button.rect.x = self.left_button.rect.x + self.left_button.rect.w + self.PADDING
        self.right_button.rect.y = self.rect.y
        self.option_textures = [resources.add_text(option) for option in self.options]

    def handle_event(self, event, mouse_pos=None) -> None:
        self.left_button.handle_event(event, mouse_pos)
        self.right_button.handle_event(event, mouse_pos)

    def _read_setting(self) -> int:
        config = self.config
        if self.setting_type is SettingType.MUSIC_ON_OFF:
            return int(config.music_on)
        if self.setting_type is SettingType.MUSIC_VOLUME:
            return config.music_volume
        if self.setting_type is SettingType.SOUND_ON_OFF:
            return int(config.sound_on)
        return config.sound_volume

    def update(self) -> None:
        """Sync with the settings, apply arrow presses and store the result."""
        self.left_button.update(GameState.SETTINGS)
        self.right_button.update(GameState.SETTINGS)

        size = len(self.options)
        self.selected = self._read_setting()
        if self.left_button.pressed:
            self.selected = (self.selected - 1 + size) % size
            self.left_button.reset()
        elif self.right_button.pressed:
            self.selected = (self.selected + 1) % size
            self.right_button.reset()

        config = self.config
        audio = self.audio
        if self.setting_type is SettingType.MUSIC_ON_OFF:
            if self.value == "on":
                audio.play_music()
            else:
                audio.stop_music()
            config.music_on = bool(self.selected)
        elif self.setting_type is SettingType.SOUND_ON_OFF:
            config.sound_on = bool(self.selected)
        elif self.setting_type is SettingType.MUSIC_VOLUME:
            config.music_volume = self.selected
            audio.update_music_volume()
        else:
            config.sound_volume = self.selected
            audio.update_sound_volume()

    def render(self, target) -> None:
        self.left_button.render(target)
        self.right_button.render(target)
        if self.name_texture is not None:
            self.name_texture.render(target, self.rect.x, self.rect.y)
        if self.option_textures:
            x = self.right_button.rect.x + self.right_button.rect.w + 2 * self.PADDING
            self.option_textures[self.selected].render(target, x, self.rect.y)