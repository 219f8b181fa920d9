# spaceteam

A puzzle game for the terminal. Two spaceships, a small one (`@@`) and a big
one (`##`), have to reach the exit (`X`). Items (`1`–`9`) fall when nothing
holds them up, a falling pile that weighs at least half of a ship crushes it,
bombs (`*`) go off when something touches them, and enemy troops (`W`) chase
the nearer ship.

## Installing

```
pip install .
```

## Playing

```
spaceteam [LEVELS_DIRECTORY]
```

The optional argument is the directory that holds the level, save and
solution files. Without it, file names are taken relative to the current
directory.

### Main menu

- `1` New game – starts the level with the lowest screen ID and goes on from there
- `2` Instructions
- `3` Validate level file – pick one of the first nine levels and see its errors
- `4` Load game – pick one of the first nine saved games
- `5` Select level – pick one of the first nine levels to start from
- `9` Exit

### Keys in a level

Small spaceship:

- `A` / `W` / `D` / `X` – move left / up / right / down
- `Z` – rotate

Big spaceship:

- `J` / `I` / `L` / `M` (or `4` / `8` / `6` / `2`) – move left / up / right / down

Other:

- `B` – toggle slow push mode (items resting on a pushed item move with it)
- `Esc` – open the in-game menu

A ship can only push what weighs no more than itself; when both ships push the
same pile in the same direction, their masses add up.

### In-game menu

- `1` Restart level
- `2` Save and exit to menu – asks for a save name
- `3` View level solution – plays back the stored solution
- `8` Exit to main menu
- `9` Quit

When a level is finished in fewer clock ticks than its stored solution (or it
has none yet), the game asks for the player's name and stores the new
solution. After the last level, a screen lists the best score of every level.

## Files

All files live in the levels directory:

| Extension | Contents |
|-----------|----------|
| `.spg`    | A level: a `ScreenID=<n>` line followed by 24 rows of up to 80 characters |
| `.spp`    | A saved game: screen ID, clock ticks, a picture of the screen, the keys pressed |
| `.sps`    | The best solution of the level of the same name: screen ID, solver's name, the keys pressed |

In a level, characters other than `+ X @ # W * 1-9` and space are read as
walls. A level needs exactly one small spaceship (two cells in a row or
column), one big spaceship (a 2×2 square) and at least one exit; each digit
may be used for one item only, and no two levels may share a screen ID.

## Using it as a library

`spaceteam.builder.GameScreenBuilder` reads a level (`load_from_lines` or
`load_from_file`), reports its `errors`, and `build()` returns a
`spaceteam.game_screen.GameScreen`, which is advanced one tick at a time with
`set_initial_state`, `read_user_input`, `process` and `update`, and drawn on a
`spaceteam.canvas.Canvas`. `spaceteam.screens.ScreenManager.step` runs one
tick of the topmost screen with given keys, without a terminal.

## What it does not do

- No levels come with the package; without `.spg` files, a new game only
  shows a message.
- Output uses ANSI cursor escapes, and key input needs either a Windows
  console or a terminal that supports `termios`.