"""Game state: lanes, sheep queues, spawning, movement and pushing."""

from __future__ import annotations

import random
import time
from collections import deque
from enum import Enum
from itertools import pairwise
from typing import Callable, Iterable, Optional, Sequence

from .config import (
    BLACK_GOAL_X,
    BLACK_SHEEP,
    BLACK_SPAWN_X,
    CONSTANT_SPEED,
    COOLDOWN_MS,
    DEFAULT_TEXTURE_SIZE,
    INITIAL_HEALTH,
    LINECOUNT,
    TOTAL_SHEEP_IN_QUEUE,
    WHITE_GOAL_X,
    WHITE_SHEEP,
    WHITE_SPAWN_X,
    SheepConfig,
    lane_spawn_y,
    pick_weighted,
)
from .sheep import BlackSheep, Sheep, WhiteSheep

PREVIEW_SIZE = 3


class GameState(Enum):
    IN_GAME = "in_game"
    WHITE_SHEEP_VICTORY = "white_sheep_victory"
    BLACK_SHEEP_VICTORY = "black_sheep_victory"
    EXIT = "exit"


class Team(Enum):
    WHITE = "white"
    BLACK = "black"


_OPPONENT = {Team.WHITE: Team.BLACK, Team.BLACK: Team.WHITE}
_CONFIGS = {Team.WHITE: WHITE_SHEEP, Team.BLACK: BLACK_SHEEP}
_SHEEP_CLASS = {Team.WHITE: WhiteSheep, Team.BLACK: BlackSheep}
_SPAWN_X = {Team.WHITE: WHITE_SPAWN_X, Team.BLACK: BLACK_SPAWN_X}
_GOAL_X = {Team.WHITE: WHITE_GOAL_X, Team.BLACK: BLACK_GOAL_X}
_VICTORY = {
    Team.WHITE: GameState.WHITE_SHEEP_VICTORY,
    Team.BLACK: GameState.BLACK_SHEEP_VICTORY,
}


def fill_queue(
    configs: Sequence[SheepConfig], count: int, rng: random.Random
) -> deque[SheepConfig]:
    """Draw ``count`` sheep kinds by their display probabilities.

    A draw that falls beyond the total probability adds nothing.
    """
    queue: deque[SheepConfig] = deque()
    for _ in range(count):
        config = pick_weighted(configs, rng.random())
        if config is not None:
            queue.append(config)
    return queue


def handle_team_collisions(players: Sequence[Sheep]) -> None:
    """Make each sheep touching the one ahead of it take that sheep's speed."""
    for current, following in pairwise(players):
        if current.bounds.intersects(following.bounds):
            following.speed = current.speed
            following.aligned = True


def all_aligned(players: Iterable[Sheep]) -> bool:
    """True when every sheep is in contact with its line; true for no sheep."""
    return all(sheep.aligned for sheep in players)


def line_strength(players: Iterable[Sheep]) -> int:
    """Sum of the pushing strengths of the given sheep."""
    return sum(sheep.strength for sheep in players)


class Game:
    """Two teams sending sheep down shared lanes towards each other's goal."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        texture_size: tuple[int, int] = DEFAULT_TEXTURE_SIZE,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.texture_size = texture_size
        self.state = GameState.IN_GAME
        self.current_line = {team: 0 for team in Team}
        self.health = {team: INITIAL_HEALTH for team in Team}
        self.lanes: dict[Team, list[list[Sheep]]] = {
            team: [[] for _ in range(LINECOUNT)] for team in Team
        }
        self.queues = {
            team: fill_queue(_CONFIGS[team], TOTAL_SHEEP_IN_QUEUE, self.rng)
            for team in Team
        }
        start = self.clock()
        self._last_spawn = {team: start for team in Team}
        self._first_spawn = {team: True for team in Team}

    def select_up(self, team: Team) -> None:
        """Move the team's lane cursor up, wrapping to the bottom lane."""
        if self.state is GameState.IN_GAME:
            self.current_line[team] = (self.current_line[team] - 1) % LINECOUNT

    def select_down(self, team: Team) -> None:
        """Move the team's lane cursor down, wrapping to the top lane."""
        if self.state is GameState.IN_GAME:
            self.current_line[team] = (self.current_line[team] + 1) % LINECOUNT

    def spawn(self, team: Team) -> Optional[Sheep]:
        """Send the next queued sheep into the selected lane, cooldown permitting."""
        if self.state is not GameState.IN_GAME:
            return None
        now = self.clock()
        elapsed_ms = int((now - self._last_spawn[team]) * 1000)
        if not (self._first_spawn[team] or elapsed_ms >= COOLDOWN_MS):
            return None

        spawned: Optional[Sheep] = None
        queue = self.queues[team]
        if queue:
            config = queue.popleft()
            line = self.current_line[team]
            spawned = _SHEEP_CLASS[team](
                config,
                _SPAWN_X[team],
                lane_spawn_y(line),
                CONSTANT_SPEED,
                self.texture_size,
            )
            self.lanes[team][line].append(spawned)
            configs = _CONFIGS[team]
            if configs:
                queue.append(configs[self.rng.randrange(len(configs))])

        self._last_spawn[team] = now
        self._first_spawn[team] = False
        return spawned

    def _advance(self, team: Team) -> None:
        opponent = _OPPONENT[team]
        boundary = _GOAL_X[team]
        for lane in self.lanes[team]:
            survivors: list[Sheep] = []
            for position, sheep in enumerate(lane):
                if sheep.move(boundary):
                    self.health[opponent] -= sheep.damage
                    if self.health[opponent] <= 0:
                        self.health[opponent] = 0
                        self.state = _VICTORY[team]
                        lane[:] = survivors + lane[position:]
                        return
                elif not sheep.is_out_of_self_boundary():
                    survivors.append(sheep)
            lane[:] = survivors

    def update(self) -> None:
        """Advance one frame: move both teams, then resolve each lane's pushing."""
        self._advance(Team.WHITE)
        self._advance(Team.BLACK)
        for line_index in range(LINECOUNT):
            self.check_collisions(line_index)

    def check_collisions(self, line_index: int) -> None:
        """Chain sheep within each team and settle the push between the fronts."""
        whites = self.lanes[Team.WHITE][line_index]
        blacks = self.lanes[Team.BLACK][line_index]
        everyone = whites + blacks

        handle_team_collisions(whites)
        handle_team_collisions(blacks)

        if not whites or not blacks:
            return
        front_white, front_black = whites[0], blacks[0]
        if not front_white.bounds.intersects(front_black.bounds):
            return
        front_white.aligned = True
        front_black.aligned = True
        if not (all_aligned(whites) and all_aligned(blacks)):
            return

        power = line_strength(everyone)
        if power > 0:
            speed = CONSTANT_SPEED
        elif power < 0:
            speed = -CONSTANT_SPEED
        else:
            speed = 0
        for sheep in everyone:
            sheep.speed = speed

    def queue_preview(self, team: Team) -> list[SheepConfig]:
        """The next few sheep kinds the team will send."""
        return list(self.queues[team])[:PREVIEW_SIZE]