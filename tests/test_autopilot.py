from snake_sim.autopilot import best_move_toward_food, choose_direction, is_safe, wrapped_delta
from snake_sim.grid import Direction, Position


def test_wrapped_delta_takes_short_way_round():
    assert wrapped_delta(0, 19, 20) == -1
    assert wrapped_delta(19, 0, 20) == 1
    assert wrapped_delta(3, 8, 20) == 5
    assert wrapped_delta(8, 3, 20) == -5


def test_preferences_point_at_food():
    prefs = best_move_toward_food(Position(10, 10), Position(12, 7), 20)
    assert prefs[:2] == [Direction.RIGHT, Direction.UP]
    assert sorted(d.name for d in prefs) == ["DOWN", "LEFT", "RIGHT", "UP"]


def test_preferences_use_wrap():
    prefs = best_move_toward_food(Position(0, 10), Position(19, 10), 20)
    assert prefs[0] is Direction.LEFT


def test_avoids_obstacle(make_state):
    snap = make_state([(5, 5), (4, 5)], food=(7, 5), obstacles=[(6, 5)]).snapshot()
    assert not is_safe(snap, Direction.RIGHT)
    assert choose_direction(snap) is Direction.UP


def test_never_reverses(make_state):
    snap = make_state([(5, 5), (6, 5)], food=(1, 5), direction=Direction.RIGHT).snapshot()
    assert choose_direction(snap) is not Direction.LEFT


def test_tail_cell_is_safe_unless_eating(make_state):
    # moving up from (5, 5) lands on the tail, which moves away this tick
    state = make_state([(5, 5), (6, 5), (6, 4), (5, 4)], food=(0, 0), direction=Direction.LEFT)
    assert is_safe(state.snapshot(), Direction.UP)
