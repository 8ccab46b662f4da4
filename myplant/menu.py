"""Main menu screen: selection state, drawing and key handling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from myplant.model import CHOOSE, INTRO, MENU_ITEMS, NOT_CHOOSE, AppState, Key


class MenuAction(Enum):
    """What the user picked from the main menu."""

    RUN = "run"
    OPTIONS = "options"
    LEAVE = "leave"

    @property
    def target(self) -> AppState | None:
        """Screen to switch to, or None when the action ends the application."""
        return {MenuAction.RUN: AppState.RUN, MenuAction.OPTIONS: AppState.OPTIONS}.get(self)


_ACTIONS = (MenuAction.RUN, MenuAction.OPTIONS, MenuAction.LEAVE)


@dataclass
class MenuConfig:
    """State of the main menu: the index of the highlighted entry."""

    stage: int = 0

    def lines(self) -> list[str]:
        """Screen lines for the menu, with the highlighted entry marked."""
        return [INTRO] + [
            (CHOOSE if index == self.stage else NOT_CHOOSE) + item
            for index, item in enumerate(MENU_ITEMS)
        ]

    def handle_key(self, key: Key) -> MenuAction | None:
        """Move the highlight or confirm the current entry."""
        last = len(MENU_ITEMS) - 1
        if key is Key.DOWN:
            self.stage = 0 if self.stage == last else self.stage + 1
        elif key is Key.UP:
            self.stage = last if self.stage == 0 else self.stage - 1
        elif key in (Key.SPACE, Key.ENTER) and 0 <= self.stage < len(_ACTIONS):
            return _ACTIONS[self.stage]
        return None