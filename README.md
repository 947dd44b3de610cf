# prismpong

A bright, rainbow-coloured paddle game. The ball leaves a glowing trail and
sends particles flying on every paddle hit. The screen shakes briefly after
each hit, and the colours keep cycling while you play.

## Installing

```
pip install .
```

This installs `pygame`, which handles the window, drawing and keyboard input.

## Playing

```
prismpong
```

This opens an 800 × 600 window titled "Colorful Pong". The game starts on a
menu with two options:

- **1 PLAYER**: you play the left paddle and the computer plays the right one.
- **2 PLAYERS**: two people share the keyboard.

Use the arrow keys or W/S to move between the options. Press ENTER or SPACE to
pick one.

### Controls

| Action                 | Keys            |
|------------------------|-----------------|
| Left paddle up / down  | W / S           |
| Right paddle up / down | Up / Down       |
| Pause / resume         | P or ESC        |
| Back to menu after win | ENTER or SPACE  |

After every paddle hit the ball speeds up by 20 units per second, to a limit of
600. The point where the ball strikes the paddle sets the bounce angle, up to
60 degrees from the horizontal. The computer paddle follows the ball once the
ball is more than 20 pixels above or below its centre. The first player to
reach 7 points wins.

## Using the pieces

The game logic runs without a window, so you can drive it from code. Keys are
given as members of `prismpong.consts.Key`:

```python
from prismpong.consts import Key
from prismpong.game import Game, GameResult

game = Game(two_players=True)
result = game.update(1 / 60, held={Key.W})
assert result is GameResult.CONTINUE
```

- `prismpong.app.App` switches between the menu, play, pause and game-over
  states. Each frame, pass `App.step` the frame time, the keys pressed this
  frame and the keys held down. It returns the current `GameState`.
  `App.draw` renders the frame onto a `pygame.Surface`.
- `prismpong.menu.Menu.update` returns a `MenuChoice` once a mode is chosen.
- `prismpong.game.Game.update` returns a `GameResult` for each frame.
- `prismpong.ball.Ball` and `prismpong.paddle.Paddle` hold the movement and
  collision rules. `prismpong.effects` holds the colour helpers, particles,
  trails and drawing functions.

`App`, `Menu`, `Game` and `Ball` take an optional `random.Random`. Pass a
seeded one to get repeatable serves and backgrounds.

## What it does not do

The game plays no sound. `prismpong.audio.AudioSystem` tracks only which music
loop should be active and keeps a list of the sound cues requested ("hit",
"select", "score"). Nothing else in the package uses it. Scores are not saved
between matches, and the game has no settings or command-line options.

## Running the tests

```
pip install .[test]
pytest
```