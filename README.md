# myplant

A small keyboard-driven terminal application that shows a list of plants:
their names, species, age, sowing date, when they were last watered, how
long until they dry out, and how much water they need.

The interface text is in Polish.

## Installation

```
pip install .
```

## Usage

Start the application in a terminal:

```
myplant
```

On a POSIX terminal the command switches standard input to raw mode for the
duration of the session and restores it on exit. The screen opens on the
main menu:

```
   > My plant <
>> Zobacz rośliny
   Opcje
   Wyjdź
```

### Keys

| Key               | Action                                        |
|-------------------|-----------------------------------------------|
| Up / Down         | Move the selection (wraps around)             |
| Left / Right      | Scroll between plants on the plants screen    |
| Space / Enter     | Choose the selected menu entry                |
| q                 | Quit                                          |

Choosing **Zobacz rośliny** opens the plants screen, which shows up to three
plants side by side, a panel of actions under each plant (*Podlej*,
*Zmień nazwę*, *Usuń*, *Zmień obraz*) and a lower panel (*Dodaj roślinę*,
*Opcje*, *Powrót do menu*). Up and Down move the highlight through these
rows; Left and Right move the plant window. Choosing **Wyjdź** in the menu,
or pressing `q` anywhere, closes the application.

## What it does not do

- The plants screen always starts with the same built-in sample plants
  (`myplant.run.sample_plants()`); nothing is read from or saved to disk.
- The actions on the plants screen (*Podlej*, *Zmień nazwę*, *Usuń*,
  *Zmień obraz*, *Dodaj roślinę*, *Opcje*, *Powrót do menu*) are only
  drawn and highlighted; choosing them does nothing. From the plants
  screen, `q` is the way out.
- **Opcje** in the main menu switches to an options state that has no
  screen: the display is left empty and only `q` leaves it.

## Using it as a library

The screens can be driven without a terminal:

```python
from myplant.app import App
from myplant.model import Key

app = App()
app.handle_key(Key.ENTER)      # open the plants screen
for line in app.lines():
    print(line.rstrip("\n"))
```

- `myplant.app.App` holds the active screen (`state`, an `AppState`), its
  configuration (`config`) and `running`. `handle_key(key)` passes a key to
  the active screen and switches screens when needed; `initialize(target)`
  switches to a fresh screen; `lines()` returns the screen text.
- `myplant.menu.MenuConfig` and `myplant.run.RunConfig` hold the state of
  the menu and the plants screen; each offers `lines()` and
  `handle_key(key)`. The menu returns a `MenuAction`, the plants screen an
  `AppState` to switch to, or `None`.
- `myplant.model` has the `Key`, `AppState`, `Plant`, `Point` and
  `PositionPrint` types, the screen texts, and `decode_key(data)`, which
  maps raw terminal input for one key press (bytes or text) to a `Key`.
- `myplant.app.read_key(stream)` reads one key press from a stream
  (raising `EOFError` when it is exhausted), `render(lines, stream)` clears
  the terminal and draws the lines, and `run(stream)` drives the whole
  application from a stream of key presses, drawing to standard output, and
  returns the final `App`.

## Running the tests

```
pip install .[test]
pytest
```