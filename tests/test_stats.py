import random
import statistics

import pytest

from cpalgos.stats import Dashboard, DataDashboard, PlayerStats


def _check(board, values):
    assert len(board) == len(values)
    assert board.mean() == pytest.approx(statistics.mean(values))
    assert board.variance() == pytest.approx(statistics.pvariance(values))
    assert board.median() == pytest.approx(statistics.median(values))
    assert board.mode() == max(statistics.multimode(values))


def test_dashboard_matches_statistics_on_inserts():
    rng = random.Random(7)
    board = DataDashboard()
    values = []
    for _ in range(60):
        x = rng.randint(-10, 10)
        board.insert(x)
        values.append(x)
        _check(board, values)


def test_dashboard_matches_statistics_on_removals():
    rng = random.Random(11)
    board = DataDashboard()
    values = [rng.randint(0, 6) for _ in range(40)]
    for x in values:
        board.insert(x)
    while len(values) > 1:
        x = rng.choice(values)
        values.remove(x)
        board.remove(x)
        _check(board, values)


def test_remove_absent_value_raises():
    board = DataDashboard()
    board.insert(3)
    with pytest.raises(ValueError):
        board.remove(4)
    assert board.median() == 3


def test_empty_dashboard_raises():
    board = DataDashboard()
    with pytest.raises(ValueError):
        board.median()
    with pytest.raises(ValueError):
        board.mode()


def test_player_dashboard_worked_example():
    dash = Dashboard()
    dash.ingest("virat", 6)
    dash.ingest("dhoni", 2)
    dash.ingest("virat", 0)
    assert dash.details("virat") == {"mean": 3.0, "sum": 6.0}


def test_unknown_player_raises():
    dash = Dashboard()
    with pytest.raises(KeyError):
        dash.details("nobody")


def test_player_stats_without_scores_raises():
    with pytest.raises(ZeroDivisionError):
        PlayerStats().mean()