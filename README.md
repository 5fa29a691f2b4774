# sheepfight

A two-player real-time strategy game for one keyboard. White sheep enter
from the left, black sheep from the right, across four lanes. Sheep of the
same team that touch move together at the speed of the one ahead. When the
two front sheep of a lane meet and every sheep in that lane is in contact,
the lane's total strength decides the push: white strengths count as
positive, black as negative, and the whole lane moves towards the weaker
side (or stops when the totals are equal).

A sheep that crosses the far edge costs the opposing player its damage in
health and leaves the field; a sheep pushed back past its own starting
edge is removed. The first player whose health reaches zero loses, and the
winner's picture is shown.

## Installing

```
pip install .
```

## Playing

```
sheepfight
```

Click the start button on the menu to begin. Pictures are read from
`files/pics` by default; another directory can be given with

```
sheepfight --pics-dir path/to/pics
```

| Action             | White (left) | Black (right) |
|--------------------|--------------|---------------|
| Select lane above  | Up           | W             |
| Select lane below  | Down         | S             |
| Send next sheep    | Enter        | Space         |

Lane selection wraps around. Escape or closing the window quits. Each
player can send a sheep at most once per second (the first one at any
time); the next three sheep in each player's queue are shown at the top
of the screen, and each player's health is shown at the side.

Sheep kinds:

| Kind  | Damage | Strength | Chance |
|-------|--------|----------|--------|
| Timmy | 50     | 50       | 50%    |
| Shaun | 30     | 150      | 30%    |
| Meow  | 10     | 250      | 20%    |

Black sheep have the same values under the names Timmyblack, Shaunblack
and Meowblack. Both players start with 400 health. Each queue starts with
100 sheep drawn by these chances; after each sheep is sent, a kind chosen
uniformly at random is added to the end.

## What is not included

The package holds no pictures, font or music. Running the game needs,
relative to the working directory:

- `files/pics` (or the `--pics-dir` directory): `menu.png`,
  `background.png`, `timmy.png`, `shaun.png`, `meow.png`,
  `timmyblack.png`, `shaunblack.png`, `meowblack.png`,
  `White_Sheep_Win_Resized_Corrected.png`, `Black_Sheep_Win_Resized-1.png`
- `files/fonts/KaiseiDecol-Medium.ttf`
- `files/audio/03. Choose Your Seeds.flac`

A missing menu picture, background, font or music file stops the game
with `FileNotFoundError`.

## Using the game logic

The rules in `sheepfight.game` run without a window:

```python
import random

from sheepfight.game import Game, Team

game = Game(rng=random.Random(1))
game.select_down(Team.WHITE)
game.spawn(Team.WHITE)
game.update()
print(game.health, game.state)
print(game.queue_preview(Team.WHITE))
```

`Game` also takes a `clock` callable (seconds, monotonic) used for the
spawn cooldown, and a `texture_size` used for the sheep's bounding boxes.
`sheepfight.config` holds the constants and the sheep kinds,
`sheepfight.sheep` the `WhiteSheep` and `BlackSheep` classes, and
`sheepfight.render` the pygame drawing functions.

## Running the tests

```
pip install .[test]
pytest
```