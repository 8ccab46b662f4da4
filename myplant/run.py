"""Plant screen: cursor state, drawing of plant columns and key handling."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import date
from enum import Enum, auto

from myplant.model import (
    AGE,
    CHOOSE,
    DOWN_PANEL,
    FIRST_TO_CHOOSE,
    INTRO,
    LAST_TO_CHOOSE,
    LAST_WATER,
    LINE_LEN,
    LINE_STARTER_LEN,
    NAME,
    NOT_CHOOSE,
    PLANT_PANEL,
    SEEDING_DATE,
    SPECIES,
    TIME_LEFT,
    WATER_AMOUNT,
    AppState,
    Key,
    Plant,
    Point,
    PositionPrint,
)

_VISIBLE_COLUMNS = 3

_INFO_FIELDS: tuple[tuple[PositionPrint, Callable[[Plant], str]], ...] = (
    (NAME, lambda p: p.name),
    (SPECIES, lambda p: p.species),
    (AGE, lambda p: f"{p.age} dni"),
    (SEEDING_DATE, lambda p: p.seeding.isoformat()),
    (LAST_WATER, lambda p: p.last_water.isoformat()),
    (TIME_LEFT, lambda p: f"{p.time_to_dry} dni"),
    (WATER_AMOUNT, lambda p: f"{p.water_amount} L"),
)


class RunState(Enum):
    """Sub-view of the plant screen."""

    MAIN = auto()


def sample_plants() -> list[Plant]:
    """The plants the plant screen starts with."""
    first_day = date(2014, 7, 8)
    other_day = date(2015, 7, 8)
    plants = [Plant("Test", "Test", 12, first_day, first_day, 0, 1)]
    plants += [Plant("Test2", "Test2", 10, other_day, other_day, 1, 0) for _ in range(5)]
    return plants


@dataclass
class RunConfig:
    """State of the plant screen."""

    user_position: Point = field(default_factory=lambda: Point(0, FIRST_TO_CHOOSE))
    state: RunState = RunState.MAIN
    down_panel: bool = True
    plants: list[Plant] = field(default_factory=list)

    def _visible(self) -> Iterator[tuple[int, Plant, str]]:
        """Yield the plants in the visible window with the text that ends each column."""
        x = self.user_position.x
        last = len(self.plants) - 1 if len(self.plants) <= 4 else x + 4
        for index, plant in enumerate(self.plants):
            if 0 <= index - x < _VISIBLE_COLUMNS:
                yield index, plant, "\n" if index == last else " | "

    def _info_line(self, label: PositionPrint, value_of: Callable[[Plant], str]) -> str:
        parts = []
        for _, plant, end in self._visible():
            value = value_of(plant)
            padding = " " * max(0, LINE_LEN - (len(value) + len(label.text)))
            parts.append(label.text + value + padding + end)
        return "".join(parts)

    def _panel_line(self, number: int, label: PositionPrint) -> str:
        selected_row = number + FIRST_TO_CHOOSE == self.user_position.y
        padding = " " * max(0, LINE_LEN - (len(label.text) + LINE_STARTER_LEN))
        parts = []
        for index, _, end in self._visible():
            marked = selected_row and index == self.user_position.x
            parts.append((CHOOSE if marked else NOT_CHOOSE) + label.text + padding + end)
        return "".join(parts)

    def lines(self) -> list[str]:
        """Screen lines for the current view."""
        result = [INTRO]
        result += [self._info_line(label, value_of) for label, value_of in _INFO_FIELDS]
        result += [self._panel_line(number, label) for number, label in enumerate(PLANT_PANEL)]
        result.append("")
        result += [
            (CHOOSE if item.y == self.user_position.y else NOT_CHOOSE) + item.text
            for item in DOWN_PANEL
        ]
        return result

    def handle_key(self, key: Key) -> AppState | None:
        """Move the cursor or confirm; returns the screen to switch to, if any."""
        position = self.user_position
        if key is Key.DOWN:
            position.y = FIRST_TO_CHOOSE if position.y == LAST_TO_CHOOSE else position.y + 1
        elif key is Key.UP:
            position.y = LAST_TO_CHOOSE if position.y == FIRST_TO_CHOOSE else position.y - 1
        elif key is Key.LEFT:
            if position.x != 0:
                position.x -= 1
        elif key is Key.RIGHT:
            if position.x != len(self.plants) - 1:
                position.x += 1
        elif key in (Key.SPACE, Key.ENTER):
            return {0: AppState.MENU, 1: AppState.OPTIONS}.get(position.y)
        return None