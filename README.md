# brickbreaker

A classic brick breaker arcade game built on pygame. Steer the paddle,
keep the ball in play and clear every brick on the board before you run
out of lives.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

Start the game with:

```
brickbreaker
```

The game loads its images, sounds, music and font from `assets/` and
`res/` under a root directory, which is the current directory unless you
name another:

```
brickbreaker --root path/to/game-data
```

It expects, relative to that root:

- `res/fonts/GohuFont14NerdFontMono-Regular.ttf`
- `assets/audio/music/best-game-console-301284.mp3`
- `assets/audio/sound/hit02.mp3.flac` and
  `assets/audio/sound/game-bonus-2-294436.mp3`
- `assets/img/button/LefttOption.png` and `assets/img/button/RightOption.png`
- `assets/img/balls/NormalBall.png` and `assets/img/balls/FireBall.png`
- `assets/img/bricks/EasyBrick.png`, `MediumBrick.png`, `HardBrick.png`
- `assets/img/paddles/Paddle.png`
- `assets/img/power_ups/p_FireBall.png` and `p_MultiBall.png`

If any of these cannot be loaded the game prints an error and the
command exits with status 1. The package does not ship these files.

### Controls

- **Left / Right arrows**: move the paddle
- **Space**: launch the ball
- **Escape**: pause and resume
- **Mouse**: click menu buttons

### The board

The board holds five rows of ten bricks. Each brick is easy (one hit),
medium (two hits) or hard (three hits), chosen at random with odds of
50, 30 and 20 percent. A broken brick may drop a power-up: easy bricks
drop one 10 percent of the time, medium 40 percent, hard 70 percent.
Catch a falling power-up with the paddle to collect it:

- **Multi-ball**: every ball in play gains two copies beside it.
- **Fire ball**: for fifteen seconds balls pass straight through bricks
  instead of bouncing off them.

The ball's bounce angle depends on where it meets the paddle. You start
with three lives; a life is lost when the last ball falls below the
board, and a new ball is placed on the paddle. The game ends when every
brick is gone or all lives are spent.

### Menus

- **Start menu**: Play, Load, Settings, Exit.
- **Pause menu** (Escape while playing): Resume, Save, Settings,
  Quit to Title.
- **End menu**: Quit to Title, Play Again.
- **Settings**: music on/off, music volume, sound on/off and sound
  volume (0 to 10), changed with the arrow buttons.

### Saving

*Save* writes the current game as plain text files to a `save/`
directory in the current directory (`save/level.txt` and
`save/objects/`); *Load* on the start menu restores it, and does
nothing if no save exists. Audio settings are read from
`res/conf/setting.conf` in the current directory at start-up and written
back there when the game exits.

## Using the modules

The game logic can be driven without a window:

- `brickbreaker.level.GameLevel` runs one round: `setup()`,
  `update(delta_time, state)` (returns the new `GameState`), `save()`
  and `load()`, with `has_won`, `has_lost` and `has_finished`.
- `brickbreaker.object_manager.GameObjectManager` owns the paddle,
  balls, bricks and falling power-ups.
- `brickbreaker.collision.check_collision` and `handle_collision` test
  and resolve overlaps between boxes.
- `brickbreaker.config.Config` holds the audio settings, with `save()`
  and `load()`.
- `brickbreaker.game.Game` ties window, menus and level together;
  `brickbreaker.game.main()` is the command's entry point.