import io
import re

import pytest

from dining.settings import Settings
from dining.table import RESET, Status, Table


def _lines(out):
    return out.getvalue().splitlines()


@pytest.mark.parametrize("count", [1, 2, 5, 8])
def test_fork_order_uses_adjacent_forks(count):
    table = Table(Settings(count, 800, 200, 200), io.StringIO())
    for philosopher in table.philosophers:
        first, second = philosopher.fork_order()
        assert {first, second} == {philosopher.id - 1, philosopher.id % count}
        if philosopher.id % 2 == 0:
            assert second == philosopher.id - 1
        else:
            assert first == philosopher.id - 1


def test_philosophers_numbered_from_one():
    table = Table(Settings(4, 800, 200, 200), io.StringIO())
    assert [p.id for p in table.philosophers] == [1, 2, 3, 4]
    assert len(table.forks) == 4


def test_print_status_format():
    out = io.StringIO()
    table = Table(Settings(3, 800, 200, 200), out)
    table.print_status(table.philosophers[1], Status.EATING)
    line = out.getvalue()
    pattern = re.escape(Status.EATING.color) + r"(\d+) 2 is eating" + re.escape(RESET) + "\n"
    match = re.fullmatch(pattern, line)
    assert match is not None
    assert 0 <= int(match.group(1)) < 1000
    assert line.startswith(Status.EATING.color)
    assert line.endswith(" 2 is eating" + RESET + "\n")


def test_print_status_silent_after_stop():
    out = io.StringIO()
    table = Table(Settings(3, 800, 200, 200), out)
    table.dead = True
    table.print_status(table.philosophers[0], Status.SLEEPING)
    assert out.getvalue() == ""
    assert table.is_finished() is True


def test_single_philosopher_dies():
    out = io.StringIO()
    table = Table(Settings(1, 100, 50, 50), out)
    verdict = table.run()
    assert verdict is table.philosophers[0]
    lines = _lines(out)
    assert "1 has taken a fork" in lines[0]
    assert lines[-1].endswith("1 died" + RESET)
    assert table.is_finished()


def test_starvation_is_reported_last():
    out = io.StringIO()
    table = Table(Settings(2, 60, 200, 10), out)
    verdict = table.run()
    assert verdict is not None and verdict in table.philosophers
    lines = _lines(out)
    assert sum("died" in line for line in lines) == 1
    assert "died" in lines[-1]


def test_everyone_eats_enough():
    out = io.StringIO()
    table = Table(Settings(4, 2000, 20, 20, 3), out)
    verdict = table.run()
    assert verdict is None
    assert all(p.eat_count >= 3 for p in table.philosophers)
    assert table.finished_philosophers >= 4
    assert not any("died" in line for line in _lines(out))


def test_monitor_stops_when_all_finished():
    table = Table(Settings(2, 5000, 10, 10, 1), io.StringIO())
    table.finished_philosophers = 2
    assert table.monitor() is None
    assert table.is_finished() is True