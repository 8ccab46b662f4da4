"""Core data types, screen texts and key decoding for the plant tracker."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum, auto


class AppState(Enum):
    """Top-level screen the application is showing."""

    MENU = auto()
    RUN = auto()
    OPTIONS = auto()


class Key(Enum):
    """Keys the application reacts to."""

    Q = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SPACE = auto()
    ENTER = auto()


@dataclass
class Plant:
    """A tracked plant and its watering data."""

    name: str
    species: str
    age: int
    seeding: date
    last_water: date
    time_to_dry: int
    water_amount: int


@dataclass
class Point:
    """Cursor position: x selects a plant column, y a selectable row."""

    x: int
    y: int


@dataclass(frozen=True)
class PositionPrint:
    """A piece of screen text together with the row it belongs to."""

    text: str
    y: int


# Shared screen texts.
INTRO = "   > My plant <\n"
CHOOSE = ">> "
NOT_CHOOSE = "   "
LINE_STARTER_LEN = 3
LINE_LEN = 30

# Main menu entries.
MENU_RUN = "Zobacz rośliny\n"
MENU_OPTIONS = "Opcje\n"
MENU_LEAVE = "Wyjdź\n"
MENU_ITEMS = (MENU_RUN, MENU_OPTIONS, MENU_LEAVE)

# Plant screen: bottom panel.
NEW_PLANT = PositionPrint("Dodaj roślinę\n", 10)
RUN_OPTIONS = PositionPrint("Opcje\n", 11)
BACK_TO_MENU = PositionPrint("Powrót do menu\n", 12)
DOWN_PANEL = (NEW_PLANT, RUN_OPTIONS, BACK_TO_MENU)

# Plant screen: information rows.
NAME = PositionPrint("Roślina: ", 0)
SPECIES = PositionPrint("Gatunek: ", 1)
AGE = PositionPrint("Wiek: ", 2)
SEEDING_DATE = PositionPrint("Data wysiewu: ", 3)
LAST_WATER = PositionPrint("Ostatnio podlany: ", 4)
TIME_LEFT = PositionPrint("Czas do uschnięcia: ", 5)
WATER_AMOUNT = PositionPrint("Ilość wody: ", 6)

# Plant screen: per-plant actions.
WATER = PositionPrint("Podlej", 7)
CHANGE_NAME = PositionPrint("Zmień nazwę", 8)
DELETE = PositionPrint("Usuń", 9)
IMAGE = PositionPrint("Zmień obraz", 10)

PLANT_INFO = (NAME, SPECIES, AGE, SEEDING_DATE, LAST_WATER, TIME_LEFT, WATER_AMOUNT)
PLANT_PANEL = (WATER, CHANGE_NAME, DELETE, IMAGE)

FIRST_TO_CHOOSE = 6
LAST_TO_CHOOSE = 12

_KEY_SEQUENCES = {
    "q": Key.Q,
    " ": Key.SPACE,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\r\n": Key.ENTER,
    "\x1b[A": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1b[C": Key.RIGHT,
    "\x1b[D": Key.LEFT,
    "\x1bOA": Key.UP,
    "\x1bOB": Key.DOWN,
    "\x1bOC": Key.RIGHT,
    "\x1bOD": Key.LEFT,
}


def decode_key(data: bytes | str) -> Key | None:
    """Map raw terminal input for one key press to a Key, or None if unhandled."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8", errors="replace")
    return _KEY_SEQUENCES.get(data)