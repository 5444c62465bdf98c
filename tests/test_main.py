import pytest

from snake_sim.config import Config
from snake_sim.difficulty import Difficulty
from snake_sim.main import main, parse_args, play


def test_play_stops_at_max_ticks_or_ends():
    final = play(Difficulty.NORMAL, Config(seed=3), max_ticks=50)
    assert final.ticks <= 50
    assert final.phase.is_terminal or final.ticks == 50
    assert final.food.position not in final.snake


def test_play_hard_keeps_food_off_obstacles():
    final = play(Difficulty.HARD, Config(seed=5), max_ticks=200)
    assert final.food.position not in final.obstacles


def test_parse_args_defaults():
    args = parse_args([])
    assert args.difficulty == "normal"
    assert args.grid_size == 20
    assert not args.realtime


def test_main_prints_summary(capsys):
    assert main(["--difficulty", "easy", "--seed", "1", "--max-ticks", "20"]) == 0
    out = capsys.readouterr().out
    assert "difficulty=easy" in out
    assert "score=" in out


def test_grid_too_small_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["--grid-size", "1", "--difficulty", "normal"])
    assert exc.value.code == 2
    assert "--grid-size must be at least 3" in capsys.readouterr().err


def test_hard_needs_room_for_five_segments():
    with pytest.raises(SystemExit):
        main(["--grid-size", "4", "--difficulty", "hard"])
    assert parse_args(["--grid-size", "5", "--difficulty", "hard"]).grid_size == 5
    assert parse_args(["--grid-size", "2", "--difficulty", "easy"]).grid_size == 2
