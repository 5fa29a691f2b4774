import random

import pytest

from sheepfight.config import (
    BLACK_SHEEP,
    BLACK_SPAWN_X,
    CONSTANT_SPEED,
    INITIAL_HEALTH,
    LINECOUNT,
    TOTAL_SHEEP_IN_QUEUE,
    WHITE_SHEEP,
    WHITE_SPAWN_X,
    lane_spawn_y,
)
from sheepfight.game import (
    Game,
    GameState,
    Team,
    all_aligned,
    fill_queue,
    handle_team_collisions,
    line_strength,
)
from sheepfight.sheep import BlackSheep, WhiteSheep

TIMMY, SHAUN, MEOW = WHITE_SHEEP
TIMMY_B, SHAUN_B, MEOW_B = BLACK_SHEEP


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class FixedDraws:
    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def game(clock):
    return Game(rng=random.Random(7), clock=clock)


def test_fill_queue_follows_cumulative_probabilities():
    queue = fill_queue(WHITE_SHEEP, 3, FixedDraws([0.1, 0.6, 0.9]))
    assert list(queue) == [TIMMY, SHAUN, MEOW]


def test_fill_queue_skips_draws_past_total():
    queue = fill_queue(WHITE_SHEEP, 2, FixedDraws([1.5, 0.2]))
    assert list(queue) == [TIMMY]


def test_fill_queue_uses_given_kinds():
    queue = fill_queue(BLACK_SHEEP, 50, random.Random(1))
    assert len(queue) == 50
    assert set(queue) <= set(BLACK_SHEEP)


def test_line_strength_sums_config_strengths():
    players = [WhiteSheep(MEOW, 0, 0), BlackSheep(TIMMY_B, 0, 0)]
    assert line_strength(players) == MEOW.strength + TIMMY_B.strength


def test_all_aligned():
    a, b = WhiteSheep(TIMMY, 0, 0), WhiteSheep(SHAUN, 0, 0)
    assert all_aligned([])
    a.aligned = True
    assert not all_aligned([a, b])
    b.aligned = True
    assert all_aligned([a, b])


def test_handle_team_collisions_passes_speed_back():
    front = WhiteSheep(TIMMY, 500, 100)
    front.stop()
    behind = WhiteSheep(SHAUN, 480, 100)
    far = WhiteSheep(MEOW, 100, 100)
    handle_team_collisions([front, behind, far])
    assert behind.speed == 0
    assert behind.aligned
    assert far.speed == CONSTANT_SPEED
    assert not far.aligned


def test_new_game_state(game):
    assert game.state is GameState.IN_GAME
    assert game.health == {Team.WHITE: INITIAL_HEALTH, Team.BLACK: INITIAL_HEALTH}
    assert all(len(q) <= TOTAL_SHEEP_IN_QUEUE for q in game.queues.values())
    assert all(len(lane) == 0 for lanes in game.lanes.values() for lane in lanes)
    assert len(game.lanes[Team.WHITE]) == LINECOUNT


def test_select_wraps(game):
    game.select_up(Team.WHITE)
    assert game.current_line[Team.WHITE] == LINECOUNT - 1
    game.select_down(Team.WHITE)
    assert game.current_line[Team.WHITE] == 0
    for _ in range(LINECOUNT):
        game.select_down(Team.BLACK)
    assert game.current_line[Team.BLACK] == 0
    assert game.current_line[Team.WHITE] == 0


def test_spawn_places_queue_front_in_selected_lane(game):
    game.select_down(Team.WHITE)
    expected = game.queue_preview(Team.WHITE)[0]
    before = len(game.queues[Team.WHITE])
    sheep = game.spawn(Team.WHITE)
    assert sheep.config == expected
    assert (sheep.x, sheep.y) == (WHITE_SPAWN_X, lane_spawn_y(1))
    assert game.lanes[Team.WHITE][1] == [sheep]
    assert len(game.queues[Team.WHITE]) == before


def test_black_spawn_walks_left(game):
    sheep = game.spawn(Team.BLACK)
    assert sheep.x == BLACK_SPAWN_X
    assert sheep.speed == -CONSTANT_SPEED


def test_spawn_cooldown(game, clock):
    assert game.spawn(Team.WHITE) is not None
    clock.now = 0.5
    assert game.spawn(Team.WHITE) is None
    assert game.spawn(Team.BLACK) is not None
    clock.now = 1.0
    assert game.spawn(Team.WHITE) is not None
    assert len(game.lanes[Team.WHITE][0]) == 2


def test_preview_tracks_queue(game):
    preview = game.queue_preview(Team.BLACK)
    assert len(preview) == 3
    game.spawn(Team.BLACK)
    assert game.queue_preview(Team.BLACK)[:2] == preview[1:]


def test_keys_ignored_after_game_over(game):
    game.state = GameState.WHITE_SHEEP_VICTORY
    assert game.spawn(Team.WHITE) is None
    game.select_down(Team.WHITE)
    assert game.current_line[Team.WHITE] == 0


def test_scoring_sheep_damages_opponent(game):
    sheep = WhiteSheep(SHAUN, 1030, 100)
    game.lanes[Team.WHITE][2].append(sheep)
    game.update()
    assert game.health[Team.BLACK] == INITIAL_HEALTH - SHAUN.damage
    assert game.lanes[Team.WHITE][2] == []
    assert game.state is GameState.IN_GAME


def test_black_scoring_damages_white(game):
    game.lanes[Team.BLACK][0].append(BlackSheep(MEOW_B, 130, 100))
    game.update()
    assert game.health[Team.WHITE] == INITIAL_HEALTH - MEOW_B.damage
    assert game.lanes[Team.BLACK][0] == []


def test_victory_when_health_runs_out(game):
    game.health[Team.BLACK] = 1
    sheep = WhiteSheep(TIMMY, 1030, 100)
    game.lanes[Team.WHITE][0].append(sheep)
    game.update()
    assert game.health[Team.BLACK] == 0
    assert game.state is GameState.WHITE_SHEEP_VICTORY
    assert game.lanes[Team.WHITE][0] == [sheep]


def test_pushed_back_sheep_is_removed(game):
    sheep = WhiteSheep(TIMMY, 130, 100, speed=-CONSTANT_SPEED)
    game.lanes[Team.WHITE][3].append(sheep)
    game.update()
    assert game.lanes[Team.WHITE][3] == []
    assert game.health == {Team.WHITE: INITIAL_HEALTH, Team.BLACK: INITIAL_HEALTH}


@pytest.mark.parametrize(
    "white, black, speed",
    [
        (MEOW, TIMMY_B, CONSTANT_SPEED),
        (TIMMY, MEOW_B, -CONSTANT_SPEED),
        (SHAUN, SHAUN_B, 0),
    ],
)
def test_fronts_push_by_strength(game, white, black, speed):
    w = WhiteSheep(white, 500, 100)
    b = BlackSheep(black, 550, 100)
    game.lanes[Team.WHITE][0].append(w)
    game.lanes[Team.BLACK][0].append(b)
    game.check_collisions(0)
    assert w.aligned and b.aligned
    assert w.speed == speed
    assert b.speed == speed


def test_no_push_while_apart(game):
    w = WhiteSheep(MEOW, 200, 100)
    b = BlackSheep(TIMMY_B, 900, 100)
    game.lanes[Team.WHITE][1].append(w)
    game.lanes[Team.BLACK][1].append(b)
    game.check_collisions(1)
    assert w.speed == CONSTANT_SPEED
    assert b.speed == -CONSTANT_SPEED
    assert not w.aligned


def test_no_push_until_whole_team_aligned(game):
    w = WhiteSheep(MEOW, 500, 100)
    straggler = WhiteSheep(TIMMY, 200, 100)
    b = BlackSheep(TIMMY_B, 550, 100)
    game.lanes[Team.WHITE][0].extend([w, straggler])
    game.lanes[Team.BLACK][0].append(b)
    game.check_collisions(0)
    assert w.aligned and b.aligned
    assert b.speed == -CONSTANT_SPEED
    assert straggler.speed == CONSTANT_SPEED