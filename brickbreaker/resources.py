"""Textures, sounds, music and the manager that loads and caches them."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .config import get_config  # noqa: E402
from .defs import ButtonType, ObjectSubType, ObjectType, SoundType  # noqa: E402

FONT_PATH = "res/fonts/GohuFont14NerdFontMono-Regular.ttf"
FONT_SIZE = 36
MUSIC_PATH = "assets/audio/music/best-game-console-301284.mp3"
BUTTON_TEXTURE_PATHS = {
    ButtonType.OPTION_ENTRY_LEFT: "assets/img/button/LefttOption.png",
    ButtonType.OPTION_ENTRY_RIGHT: "assets/img/button/RightOption.png",
}
TEXT_COLOR = (0, 0, 0)

PathLike = Union[str, Path]


class ResourceError(Exception):
    """A resource could not be loaded or used."""


@dataclass
class Texture:
    """An image that can be drawn onto a surface."""

    surface: pygame.Surface

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    @classmethod
    def from_file(cls, path: PathLike) -> "Texture":
        try:
            surface = pygame.image.load(str(path))
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"failed to load texture {path}: {exc}") from exc
        if pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        return cls(surface)

    @classmethod
    def from_text(cls, text: str, font: pygame.font.Font) -> "Texture":
        try:
            surface = font.render(text, False, TEXT_COLOR)
        except pygame.error as exc:
            raise ResourceError(f"failed to render text {text!r}: {exc}") from exc
        return cls(surface)

    def render(self, target: pygame.Surface, x: int, y: int) -> None:
        target.blit(self.surface, (x, y))

    def render_scaled(self, target: pygame.Surface, rect) -> None:
        """Draw the texture stretched to fill rect."""
        rect = pygame.Rect(rect)
        surface = self.surface
        if surface.get_size() != rect.size:
            surface = pygame.transform.scale(surface, rect.size)
        target.blit(surface, rect.topleft)


class Sound:
    """A short sound effect, played only when sound is switched on."""

    def __init__(self, chunk) -> None:
        self.chunk = chunk

    @classmethod
    def from_file(cls, path: PathLike) -> "Sound":
        try:
            chunk = pygame.mixer.Sound(str(path))
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"failed to load sound {path}: {exc}") from exc
        return cls(chunk)

    def play(self) -> None:
        if get_config().sound_on:
            self.chunk.play()

    def set_volume(self, volume: float) -> None:
        """Set the volume as a fraction between 0 and 1."""
        self.chunk.set_volume(volume)


def _mixer_ready() -> bool:
    return bool(pygame.mixer.get_init())


class Music:
    """The looping background track."""

    def __init__(self) -> None:
        self.path: Optional[Path] = None

    def load(self, path: PathLike) -> None:
        try:
            pygame.mixer.music.load(str(path))
        except (OSError, pygame.error) as exc:
            self.path = None
            raise ResourceError(f"failed to load music {path}: {exc}") from exc
        self.path = Path(path)

    def play(self) -> None:
        """Start looping the track unless it is playing or music is off."""
        if self.path is None:
            raise ResourceError("no music loaded")
        if not pygame.mixer.music.get_busy() and get_config().music_on:
            pygame.mixer.music.play(-1)

    def stop(self) -> None:
        if _mixer_ready():
            pygame.mixer.music.stop()

    def pause(self) -> None:
        if _mixer_ready():
            pygame.mixer.music.pause()

    def resume(self) -> None:
        if _mixer_ready():
            pygame.mixer.music.unpause()

    def set_volume(self, volume: float) -> None:
        """Set the volume as a fraction between 0 and 1."""
        if _mixer_ready():
            pygame.mixer.music.set_volume(volume)


class ResourceManager:
    """Loads and caches every resource, with paths relative to root."""

    def __init__(self, root: PathLike = ".") -> None:
        self.root = Path(root)
        self.font: Optional[pygame.font.Font] = None
        self.won_texture: Optional[Texture] = None
        self.lost_texture: Optional[Texture] = None
        self.music = Music()
        self._texts: Dict[str, Texture] = {}
        self._sounds: Dict[SoundType, Sound] = {}
        self._button_textures: Dict[ButtonType, Texture] = {}
        self._object_textures: Dict[ObjectType, Dict[ObjectSubType, Texture]] = {}

    def _path(self, path: PathLike) -> Path:
        return self.root / path

    def load(self) -> None:
        """Load the font, end-of-game texts, music and option button images."""
        errors = []
        pygame.font.init()
        try:
            self.font = pygame.font.Font(str(self._path(FONT_PATH)), FONT_SIZE)
        except (OSError, pygame.error) as exc:
            errors.append(f"failed to load font: {exc}")
        else:
            try:
                self.won_texture = Texture.from_text("You won", self.font)
            except ResourceError as exc:
                errors.append(str(exc))
            try:
                self.lost_texture = Texture.from_text("You lost", self.font)
            except ResourceError as exc:
                errors.append(str(exc))

        try:
            self.music.load(self._path(MUSIC_PATH))
        except ResourceError as exc:
            errors.append(str(exc))

        for button_type, path in BUTTON_TEXTURE_PATHS.items():
            try:
                self._button_textures[button_type] = Texture.from_file(self._path(path))
            except ResourceError as exc:
                errors.append(str(exc))
                break

        if errors:
            raise ResourceError("; ".join(errors))

    def add_sound(self, sound_type: SoundType, path: PathLike) -> None:
        if sound_type not in self._sounds:
            self._sounds[sound_type] = Sound.from_file(self._path(path))

    def get_sound(self, sound_type: SoundType) -> Optional[Sound]:
        return self._sounds.get(sound_type)

    def get_button_texture(self, button_type: ButtonType) -> Optional[Texture]:
        return self._button_textures.get(button_type)

    def add_texture(self, object_type: ObjectType, sub_type: ObjectSubType, path: PathLike) -> None:
        textures = self._object_textures.setdefault(object_type, {})
        if sub_type not in textures:
            textures[sub_type] = Texture.from_file(self._path(path))

    def get_object_texture(self, object_type: ObjectType, sub_type: ObjectSubType) -> Optional[Texture]:
        return self._object_textures.get(object_type, {}).get(sub_type)

    def add_text(self, text: str) -> Texture:
        """Render text once with the loaded font and cache it."""
        if text not in self._texts:
            if self.font is None:
                raise ResourceError("no font loaded")
            self._texts[text] = Texture.from_text(text, self.font)
        return self._texts[text]

    def get_text(self, text: str) -> Optional[Texture]:
        return self._texts.get(text)