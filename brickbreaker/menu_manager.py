"""Switches between the normal menus and the settings menu."""

from typing import List, Optional

from .config import Config
from .defs import GameState, MenuGroupType
from .events import GameEventQueue
from .menus import EndMenu, InGameMenu, Menu, SettingMenu, StartMenu


class MenuManager:
    """Routes events, updates and drawing to the menus of the active group."""

    def __init__(
        self,
        events: Optional[GameEventQueue] = None,
        config: Optional[Config] = None,
        audio=None,
    ) -> None:
        self._events = events
        self._config = config
        self._audio = audio
        self.menus: List[Menu] = []
        self.setting_menu: Optional[SettingMenu] = None
        self.group = MenuGroupType.NORMAL

    def _show_normal(self) -> None:
        self.group = MenuGroupType.NORMAL

    def _show_settings(self) -> None:
        self.group = MenuGroupType.SETTINGS

    def _active(self) -> List[Menu]:
        if self.group is MenuGroupType.SETTINGS and self.setting_menu is not None:
            return [self.setting_menu]
        return self.menus

    def setup(self, resources) -> None:
        self.menus = [
            StartMenu(self._show_settings, self._events),
            InGameMenu(self._show_settings, self._events),
            EndMenu(self._events),
        ]
        self.setting_menu = SettingMenu(self._show_normal, self._config, self._audio)
        self.setting_menu.setup(resources)
        for menu in self.menus:
            menu.setup(resources)

    def handle_event(self, event, state: GameState) -> GameState:
        for menu in self._active():
            state = menu.handle_event(event, state)
        return state

    def update(self, state: GameState) -> GameState:
        for menu in self._active():
            state = menu.update(state)
        return state

    def render(self, target) -> None:
        for menu in self._active():
            menu.render(target)