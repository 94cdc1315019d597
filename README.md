# spacecorridor

A small arcade game built on pygame. You pilot a spaceship that drifts
steadily upward through a corridor of meteorites. Reach the finish line at
the top of each level without touching a meteorite. When you clear the last
level, you win and your total playing time is printed.

## Installing

```
pip install .
```

The game needs `pygame`, which pip installs along with it.

## Running

```
spacecorridor
```

The command calls `spacecorridor.main:main`. The game looks for a
`resources` directory in the same directory as the program it was started
from (the directory part of the first command-line argument, or `.` if there
is none). That directory holds:

- `splash_screen.png`, `background.png`, `spaceship.png`, `flame.png`,
  `finish_line.png`, `meteorite.png`
- `splash_screen.wav`, `loss.wav`, `win.wav`
- `COOPBL.ttf`
- the levels: `level_0.png`, `level_1.png`, and so on

The images and the font are required: if one cannot be loaded, the game
prints an error and exits with status 1. A sound that cannot be loaded is
reported on standard error and the game runs without it.

### Levels

Each level is a small PNG image. Every pixel whose red, green and blue are
all 255 becomes a meteorite, whatever its alpha, and the image's width sets
the width of the corridor. The finish line sits just past the top of the
image and spans its full width. The game loads levels in order, starting at
`level_0.png`, and stops counting at the first number that has no file.

### How a game runs

1. A splash screen shows for 3 seconds, with its sound.
2. You play the current level. The playing time is shown in the top-left
   corner.
3. Touching the finish line shows "Level N complete!" for 3 seconds, then
   the next level starts. Touching the finish line of the last level shows
   "You won!"; touching a meteorite shows "You lost!". Either end screen
   stays up for 3 seconds, then the game closes.

Collisions are pixel-accurate: two images touch where their alpha values
add up to more than 255.

## Controls

| Key                      | Action                                      |
|--------------------------|---------------------------------------------|
| Left / A / Q             | push left                                   |
| Right / D                | push right                                  |
| Up / W / Z               | push forward                                |
| Down / S                 | brake                                       |
| Space                    | skip the splash screen                      |
| I                        | turn invincibility on or off while playing  |
| Escape or close window   | quit                                        |

Drag slows the ship over time, and the ship cannot leave the sides of the
corridor. The camera follows the ship smoothly. The ship's flame grows
brighter and longer as the ship speeds forward. While invincible, the ship
is drawn half transparent and meteorites do not stop it.

## Using the pieces

The game logic does not need a window. `spacecorridor.game.Game` takes a
`Resources` object, a level count and a level loader such as
`spacecorridor.level.load_level`, and `Game.update(elapsed_ms, controls)`
advances it by a number of milliseconds with a `Controls` value, returning
the new `GameState`. `spacecorridor.level.build_level` turns a level image
into a `Level`, and `spacecorridor.game.objects_collide` tests two images
placed in world rectangles for a collision.

## What it does not do

There is no menu, no pause, no sound or display settings and no high-score
table: finishing times are printed to standard output and not saved.

## Development

```
pip install -e ".[test]"
pytest
```