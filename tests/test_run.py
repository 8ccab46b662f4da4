from datetime import date

import pytest

from myplant.model import (
    BACK_TO_MENU,
    CHANGE_NAME,
    CHOOSE,
    DOWN_PANEL,
    FIRST_TO_CHOOSE,
    INTRO,
    LAST_TO_CHOOSE,
    LINE_LEN,
    NAME,
    NEW_PLANT,
    NOT_CHOOSE,
    PLANT_INFO,
    PLANT_PANEL,
    SEEDING_DATE,
    WATER,
    AppState,
    Key,
    Point,
)
from myplant.run import RunConfig, RunState, sample_plants

PANEL_START = 1 + len(PLANT_INFO)
BLANK = PANEL_START + len(PLANT_PANEL)


@pytest.fixture
def config():
    return RunConfig(plants=sample_plants())


def test_defaults():
    fresh = RunConfig()
    assert fresh.user_position == Point(0, FIRST_TO_CHOOSE)
    assert fresh.state is RunState.MAIN
    assert fresh.down_panel is True
    assert fresh.plants == []


def test_sample_plants():
    plants = sample_plants()
    assert plants[0].name == "Test"
    assert plants[0].age == 12
    assert plants[0].seeding == date(2014, 7, 8)
    assert all(p.name == "Test2" and p.last_water == date(2015, 7, 8) for p in plants[1:])
    assert len(plants) > 4


def test_line_layout(config):
    lines = config.lines()
    assert len(lines) == BLANK + 1 + len(DOWN_PANEL)
    assert lines[0] == INTRO
    assert lines[BLANK] == ""
    assert lines[1].startswith(NAME.text + "Test ")


def test_many_plants_show_three_padded_columns(config):
    for line in config.lines()[1:BLANK]:
        parts = line.split(" | ")
        assert parts[-1] == ""
        assert [len(part) for part in parts[:-1]] == [LINE_LEN] * 3


def test_few_plants_end_with_newline():
    few = RunConfig(plants=sample_plants()[:2])
    name_line = few.lines()[1]
    assert name_line.endswith("\n")
    first, second = name_line.split(" | ")
    assert len(first) == LINE_LEN
    assert second.startswith(NAME.text + "Test2")


def test_date_formatting(config):
    line = config.lines()[1 + PLANT_INFO.index(SEEDING_DATE)]
    assert line.startswith(SEEDING_DATE.text + "2014-07-08")


def test_panel_marks_current_plant_and_row(config):
    lines = config.lines()
    water_parts = lines[PANEL_START].split(" | ")
    assert water_parts[0].startswith(CHOOSE + WATER.text)
    assert all(p.startswith(NOT_CHOOSE) for p in water_parts[1:-1])
    config.handle_key(Key.DOWN)
    lines = config.lines()
    assert lines[PANEL_START + 1].startswith(CHOOSE + CHANGE_NAME.text)
    assert not lines[PANEL_START].startswith(CHOOSE)


def test_moving_right_shifts_window(config):
    config.handle_key(Key.RIGHT)
    assert config.user_position.x == 1
    assert config.lines()[1].startswith(NAME.text + "Test2")


def test_down_panel_selection(config):
    config.user_position.y = NEW_PLANT.y
    lines = config.lines()
    assert lines[BLANK + 1] == CHOOSE + NEW_PLANT.text
    assert lines[-1] == NOT_CHOOSE + BACK_TO_MENU.text
    assert all(not line.startswith(CHOOSE) for line in lines[PANEL_START:BLANK])


def test_vertical_wrapping(config):
    config.user_position.y = LAST_TO_CHOOSE
    config.handle_key(Key.DOWN)
    assert config.user_position.y == FIRST_TO_CHOOSE
    config.handle_key(Key.UP)
    assert config.user_position.y == LAST_TO_CHOOSE
    config.handle_key(Key.UP)
    assert config.user_position.y == LAST_TO_CHOOSE - 1


def test_horizontal_limits(config):
    config.handle_key(Key.LEFT)
    assert config.user_position.x == 0
    config.user_position.x = len(config.plants) - 1
    config.handle_key(Key.RIGHT)
    assert config.user_position.x == len(config.plants) - 1
    config.handle_key(Key.LEFT)
    assert config.user_position.x == len(config.plants) - 2


@pytest.mark.parametrize("key", [Key.ENTER, Key.SPACE])
def test_confirm_on_selectable_rows_does_nothing(config, key):
    assert config.handle_key(key) is None
    assert config.user_position == Point(0, FIRST_TO_CHOOSE)


def test_confirm_on_low_rows_switches_screen(config):
    config.user_position.y = 0
    assert config.handle_key(Key.ENTER) is AppState.MENU
    config.user_position.y = 1
    assert config.handle_key(Key.SPACE) is AppState.OPTIONS