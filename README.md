# board_game

This package is a small foundation for terminal board games. It has no third-party dependencies.

## Modules

- `board_game.board` holds the board model.
  - `Board` is a 3×3 grid (`HEIGHT`, `WIDTH`) whose cells are either `None` or a `Tile`.
  - You read and write a cell with `board[row, col]`. Coordinates outside the grid raise `IndexError`.
  - A `Tile` has an optional `owner`, which is a `Player`. `PLAYER_NUM` is 2.
- `board_game.printer` builds ANSI escape sequences.
  - `Color(red, green, blue)` takes components from 0 to 255. Any other value raises `ValueError`.
  - `Color.from_hex_str("#1a2b3c")` also accepts the string without the leading `#`. A malformed string raises `ColorError`.
  - `Color.from_hex(0x1a2b3c)` builds a colour from an integer.
  - `ColorType.FOREGROUND` and `ColorType.BACKGROUND` choose which colour a sequence sets.
  - `ClearType` has the members `BEFORE_CURSOR`, `AFTER_CURSOR` and `ENTIRE_SCREEN`.
  - `Position(x, y)` is 1-based. A zero or negative coordinate raises `PositionError`.
  - `rgb_ansi`, `reset_rgb_ansi`, `clear` and `move_cursor` return the escape strings.
- `board_game.messages` defines the enums exchanged between manager and executor: `ManagerToExecutorRequest`, `ManagerToExecutorResponse`, `ExecutorToManagerRequest` and `ExecutorToManagerResponse`.
- `board_game.game_manager` provides `GameManager`.
  - It owns a `Board` and the players.
  - `start()` sends `INIT_GAME` and then reacts to the executor's messages until the executor reports that it has quit.
  - A missing queue raises `GameManagerError`.
- `board_game.game_executor` provides `GameExecutor`, an abstract base class.
  - `run()` reads manager messages and dispatches them to `init_game`, `execute_game` and `quit_game`.
  - It stops when `None` is put into its inbox.
  - A missing queue raises `GameExecutorError`.
- `board_game.app` provides `DemoGameExecutor`, `run_game`, `configure_logging` and the `main` command.

## Running the demo

```
pip install .
board-game
```

The demo connects a `GameManager` and a `DemoGameExecutor` through two `asyncio.Queue`s, each with a capacity of 32. It goes through one full cycle: initialise, execute, wait, ready to quit, quit.

Options:

- `--delay SECONDS` sets how long the executor waits before it asks to quit. The default is 2.
- `--log-dir DIR` sets where the debug log goes. The default is `./log`. The log file is `game.log` and is rotated at midnight.

## Writing a game

1. Subclass `GameExecutor` and implement the async methods `draw_opening_screen`, `init_game`, `quit_game` and `execute_game`.
2. Give the executor and the `GameManager` the same two queues, with inbox and outbox swapped.
3. Run `executor.run()` and `manager.start()` together.

Example:

```python
from board_game.printer import Color, ColorType, Position, rgb_ansi, reset_rgb_ansi, move_cursor

red = Color.from_hex_str("#ff0000")
print(move_cursor(Position(1, 1)) + rgb_ansi(ColorType.FOREGROUND, red) + "X" + reset_rgb_ansi())
```

## What it does not do

There are no game rules, no moves and no win detection.

The demo executor draws nothing on screen and reads no input. It only passes the lifecycle messages and then exits.

## Tests

```
pip install .[test]
pytest
```