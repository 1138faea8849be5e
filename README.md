# timber

A small arcade game built with pygame. A lumberjack stands at the foot of a
tree and chops it from the left or the right. Each chop scores a point and
drops the branches one slot down the trunk. If the lowest branch ends up on
the side where you are standing, you are squished. A red time bar drains all
the time, and each chop adds a little back to it. The first two chops add the
most. A bee and six clouds drift across the sky in the background.

## Installing

```
pip install .
```

## Playing

```
timber
```

Options:

- `--assets DIR`: the directory that holds `graphics/`, `fonts/` and
  `sound/`. The default is `..`, the parent of the current directory.
- `--windowed`: play in a window. The default is fullscreen.

The window is 1920x1080, scaled to fit the display. At start-up the game
prints the screen size, the image sizes and the text settings to standard
output.

### Controls

| Key         | Action                                                   |
|-------------|----------------------------------------------------------|
| Enter       | Start, pause or resume; after being squished, restart    |
| Left arrow  | Chop from the left side                                  |
| Right arrow | Chop from the right side                                 |
| Escape      | Quit                                                     |

After each chop, release a key before you chop again. Holding an arrow down
does not keep chopping.

When time runs out, the game pauses and shows "Out of time!! Press Enter to
restart." The score and the clock reset. When a branch lands on you, the game
shows "SQUISHED!! Press Enter to restart." and puts a gravestone where you
stood.

### Asset layout

The game needs these files under the asset directory:

- `graphics/background.png`, `graphics/tree.png`, `graphics/bee.png`,
  `graphics/cloud.png`, `graphics/branch.png`
- `fonts/KOMIKAP_.ttf`
- `sound/chop.wav`, `sound/death.wav`, `sound/out_of_time.wav`

These graphics are optional. The game runs without drawing any of them that
are missing: `graphics/player.png`, `graphics/rip.png`, `graphics/axe.png`,
`graphics/log.png`.

If a required file is missing or cannot be loaded, `timber` prints a message
such as `Error: Could not load tree image!` to standard error and exits with
status 1. If no audio device can be opened, the game runs without sound.

## Using the pieces

The game rules in `timber.game` do not depend on pygame, so you can drive
them directly:

```python
import random

from timber.branches import Side
from timber.game import Game

game = Game(rng=random.Random(1))
game.press_enter()            # unpause
events = game.chop(Side.RIGHT)
events += game.update(0.016)
print(events, game.score, game.time_bar_width(), game.message)
```

`Game.chop` and `Game.update` return lists of `GameEvent` values (`CHOP`,
`DEATH`, `OUT_OF_TIME`). `Game.score_text()` is refreshed only every tenth
frame, the way it is on screen.

You can also use these classes on their own:

- `timber.branches`: `Side`, `BranchColumn` (`shift`, `clear`,
  `sprite_positions`), `branch_placement` and `TimeBar`
- `timber.world`: `Bee` and `Cloud`
- `timber.props`: `FlyingLog`
- `timber.hud`: `FpsCounter` and `format_score`

From your own code, `timber.app.load_assets(root)` checks an asset directory
and raises `timber.app.AssetError` if a file is missing.
`timber.app.run(asset_dir, fullscreen)` starts the game.

## What it does not do

There is no menu, no high-score table and no saved state. Every run starts
from a score of zero. The game ships no artwork, fonts or sounds of its own.
You have to supply them in the layout above.

## Running the tests

```
pip install .[test]
pytest
```