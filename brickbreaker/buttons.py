"""Clickable menu buttons."""

from typing import Callable, ClassVar, Optional, Tuple

import pygame

from .defs import ButtonType, GameState
from .events import GameEventQueue, event_queue
from .resources import Texture

Color = Tuple[int, int, int, int]

BORDER_COLOR = (0, 0, 0, 255)


class Button:
    """A labelled box that reacts to hovering and clicking."""

    NORMAL_COLOR: ClassVar[Color] = (0x85, 0xFF, 0xBC, 0xFF)
    HOVERED_COLOR: ClassVar[Color] = (0x1F, 0xFF, 0x84, 0xFF)
    PRESSED_COLOR: ClassVar[Color] = (0x00, 0xA3, 0x49, 0xFF)

    button_type: ButtonType
    text: str = ""

    def __init__(self) -> None:
        self.rect = pygame.Rect(0, 0, 32, 32)
        self.pressed = False
        self.hovered = False
        self.texture: Optional[Texture] = None
        self.bg_color: Color = self.NORMAL_COLOR

    def setup(self, resources) -> None:
        """Render the label and size the button to fit it."""
        self.texture = resources.add_text(self.text)
        self.rect.size = (self.texture.width, self.texture.height)

    def handle_event(self, event, mouse_pos=None) -> None:
        if mouse_pos is None:
            mouse_pos = pygame.mouse.get_pos()
        self.hovered = bool(self.rect.collidepoint(mouse_pos))
        if event.type == pygame.MOUSEBUTTONDOWN and self.hovered:
            self.pressed = True

    def update(self, state: GameState) -> GameState:
        """Refresh the colour, run the click action if pressed, return the state."""
        if self.pressed:
            self.bg_color = self.PRESSED_COLOR
            state = self.on_click(state)
        elif self.hovered:
            self.bg_color = self.HOVERED_COLOR
        else:
            self.bg_color = self.NORMAL_COLOR
        return state

    def render(self, target) -> None:
        pygame.draw.rect(target, self.bg_color, self.rect)
        pygame.draw.rect(target, BORDER_COLOR, self.rect, 1)
        if self.texture is not None:
            self.texture.render_scaled(target, self.rect)

    def on_click(self, state: GameState) -> GameState:
        """Perform the button's action and return the resulting state."""
        raise NotImplementedError

    def reset(self) -> None:
        self.hovered = False
        self.pressed = False


class _StateButton(Button):
    target_state: ClassVar[GameState]

    def on_click(self, state: GameState) -> GameState:
        self.reset()
        return self.target_state


class _EventButton(Button):
    event_name: ClassVar[str]

    def __init__(self, events: Optional[GameEventQueue] = None) -> None:
        super().__init__()
        self.events = events if events is not None else event_queue()

    def on_click(self, state: GameState) -> GameState:
        self.events.push(self.event_name)
        self.reset()
        return state


class _CallbackButton(Button):
    def __init__(self, callback: Callable[[], None]) -> None:
        super().__init__()
        self.callback = callback

    def on_click(self, state: GameState) -> GameState:
        self.callback()
        self.reset()
        return state


class PlayButton(_StateButton):
    button_type = ButtonType.PLAY
    text = "Play"
    target_state = GameState.PLAYING

    def on_click(self, state: GameState) -> GameState:
        return super().on_click(state)


class ResumeButton(_StateButton):
    button_type = ButtonType.RESUME
    text = "Resume"
    target_state = GameState.PLAYING

    def on_click(self, state: GameState) -> GameState:
        return super().on_click(state)


class QuitButton(_StateButton):
    button_type = ButtonType.QUIT
    text = "Quit to Title"
    target_state = GameState.QUIT_TO_START

    def on_click(self, state: GameState) -> GameState:
        return super().on_click(state)


class LoadButton(_EventButton):
    button_type = ButtonType.LOAD
    text = "Load"
    event_name = "load"

    def on_click(self, state: GameState) -> GameState:
        return super().on_click(state)


class SaveButton(_EventButton):
    button_type = ButtonType.SAVE
    text = "Save"
    event_name = "save"

    def on_click(self, state: GameState) -> GameState:
        return super().on_click(state)


class PlayAgainButton(_EventButton):
    button_type = ButtonType.PLAY_AGAIN
    text = "Play Again"
    event_name = "play_again"

    def on_click(self, state: GameState) -> GameState:
        super().on_click(state)
        return GameState.PLAYING


class SettingsButton(_CallbackButton):
    button_type = ButtonType.SETTINGS
    text = "Settings"

    def on_click(self, state: GameState) -> GameState:
        return super().on_click(state)


class BackButton(_CallbackButton):
    button_type = ButtonType.BACK
    text = "Back"

    def on_click(self, state: GameState) -> GameState:
        return super().on_click(state)


class ExitGameButton(Button):
    button_type = ButtonType.EXIT
    text = "Exit"

    def on_click(self, state: GameState) -> GameState:
        """Ask the game to quit by posting a quit event."""
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        return state


class OptionEntryButton(Button):
    """An arrow button beside a setting; its owner reads the pressed flag."""

    def __init__(self, button_type: ButtonType) -> None:
        super().__init__()
        self.button_type = button_type

    def setup(self, resources) -> None:
        self.texture = resources.get_button_texture(self.button_type)

    def on_click(self, state: GameState) -> GameState:
        return state