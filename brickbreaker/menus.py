"""Menu screens: start, pause, end-of-game and settings."""

from typing import Callable, ClassVar, List, Optional, Tuple

import pygame

from .buttons import (
    BackButton,
    Button,
    ExitGameButton,
    LoadButton,
    PlayAgainButton,
    PlayButton,
    QuitButton,
    ResumeButton,
    SaveButton,
    SettingsButton,
)
from .config import Config
from .defs import SCREEN_HEIGHT, SCREEN_WIDTH, GameState, SettingType
from .events import GameEventQueue
from .option_box import OptionEntryBox

Color = Tuple[int, int, int, int]

BORDER_COLOR = (0, 0, 0, 255)


class Menu:
    """A full-screen panel holding a column of buttons."""

    BG_COLOR: ClassVar[Color] = (0xE9, 0xF2, 0xCF, 0xFF)
    PADDING: ClassVar[int] = 10

    def __init__(self) -> None:
        self.rect = pygame.Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
        self.hidden = False
        self.buttons: List[Button] = []
        self._mouse_pos: Tuple[int, int] = (-1, -1)

    def _make_buttons(self) -> List[Button]:
        return []

    def _pointer(self, event) -> Tuple[int, int]:
        """Return the mouse position for event, falling back to the last known one."""
        pos = getattr(event, "pos", None)
        if pos is not None:
            self._mouse_pos = (int(pos[0]), int(pos[1]))
        elif pygame.display.get_init():
            try:
                self._mouse_pos = pygame.mouse.get_pos()
            except pygame.error:
                pass
        return self._mouse_pos

    def setup(self, resources) -> None:
        """Create the buttons, render their labels and stack them vertically."""
        self.buttons = self._make_buttons()
        for i, button in enumerate(self.buttons):
            button.setup(resources)
            button.rect.y = i * (button.rect.h + self.PADDING)

    def handle_event(self, event, state: GameState) -> GameState:
        mouse_pos = self._pointer(event)
        for button in self.buttons:
            button.handle_event(event, mouse_pos)
        return state

    def update(self, state: GameState) -> GameState:
        if not self.hidden:
            for button in self.buttons:
                state = button.update(state)
        return state

    def render(self, target) -> None:
        if self.hidden:
            return
        pygame.draw.rect(target, self.BG_COLOR, self.rect)
        pygame.draw.rect(target, BORDER_COLOR, self.rect, 1)
        for button in self.buttons:
            button.render(target)


class StartMenu(Menu):
    """Title screen: play, load, settings and exit."""

    def __init__(self, on_settings: Callable[[], None], events: Optional[GameEventQueue] = None) -> None:
        super().__init__()
        self.on_settings = on_settings
        self.events = events

    def _make_buttons(self) -> List[Button]:
        return [
            PlayButton(),
            LoadButton(self.events),
            SettingsButton(self.on_settings),
            ExitGameButton(),
        ]

    def setup(self, resources) -> None:
        super().setup(resources)

    def handle_event(self, event, state: GameState) -> GameState:
        if state is GameState.START:
            state = super().handle_event(event, state)
        return state

    def update(self, state: GameState) -> GameState:
        if state is GameState.START:
            self.hidden = False
            state = super().update(state)
        else:
            self.hidden = True
        return state


class InGameMenu(Menu):
    """Pause screen, toggled with the escape key while playing."""

    def __init__(self, on_settings: Callable[[], None], events: Optional[GameEventQueue] = None) -> None:
        super().__init__()
        self.on_settings = on_settings
        self.events = events

    def _make_buttons(self) -> List[Button]:
        return [
            ResumeButton(),
            SaveButton(self.events),
            SettingsButton(self.on_settings),
            QuitButton(),
        ]

    def setup(self, resources) -> None:
        super().setup(resources)

    def handle_event(self, event, state: GameState) -> GameState:
        if state in (GameState.PLAYING, GameState.PAUSED):
            state = super().handle_event(event, state)
            if event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_ESCAPE:
                state = GameState.PAUSED if state is GameState.PLAYING else GameState.PLAYING
        return state

    def update(self, state: GameState) -> GameState:
        self.hidden = state is not GameState.PAUSED
        return super().update(state)


class EndMenu(Menu):
    """Shown once the round is won or lost."""

    def __init__(self, events: Optional[GameEventQueue] = None) -> None:
        super().__init__()
        self.events = events

    def _make_buttons(self) -> List[Button]:
        return [QuitButton(), PlayAgainButton(self.events)]

    def setup(self, resources) -> None:
        super().setup(resources)

    def handle_event(self, event, state: GameState) -> GameState:
        if state is GameState.END:
            state = super().handle_event(event, state)
        return state

    def update(self, state: GameState) -> GameState:
        self.hidden = state is not GameState.END
        return super().update(state)


class SettingMenu(Menu):
    """Audio settings with a back button."""

    SETTINGS = (
        SettingType.MUSIC_ON_OFF,
        SettingType.MUSIC_VOLUME,
        SettingType.SOUND_ON_OFF,
        SettingType.SOUND_VOLUME,
    )

    def __init__(self, on_back: Callable[[], None], config: Optional[Config] = None, audio=None) -> None:
        super().__init__()
        self.on_back = on_back
        self._config = config
        self._audio = audio
        self.entries: List[OptionEntryBox] = []

    def _make_buttons(self) -> List[Button]:
        return [BackButton(self.on_back)]

    def setup(self, resources) -> None:
        self.entries = [OptionEntryBox(kind, self._config, self._audio) for kind in self.SETTINGS]
        for i, entry in enumerate(self.entries, start=1):
            entry.rect.y = i * (entry.height + self.PADDING)
            entry.setup(resources)
        super().setup(resources)

    def handle_event(self, event, state: GameState) -> GameState:
        state = super().handle_event(event, state)
        for entry in self.entries:
            entry.handle_event(event, self._mouse_pos)
        return state

    def update(self, state: GameState) -> GameState:
        state = super().update(state)
        for entry in self.entries:
            entry.update()
        return state

    def render(self, target) -> None:
        super().render(target)
        for entry in self.entries:
            entry.render(target)