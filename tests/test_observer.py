import io

import pytest

from Observer import Observer
from RandomDelay import RandomDelay
from Ring import Ring
from Snapshot import CARON, UNDERLINE


@pytest.fixture
def ring():
    r = Ring(4, RandomDelay(mean=0.005, seed=5))
    yield r
    r.shutdown()


def snapshots(out):
    return [line for line in out.getvalue().split("\n\n") if line]


def test_initial_snapshot_shows_every_process_privileged(ring):
    out = io.StringIO()
    Observer(ring, out).print_snapshot()

    assert out.getvalue().endswith("\n\n")
    line, = snapshots(out)
    assert line.split(",") == ["p" + UNDERLINE + str(i) + UNDERLINE for i in range(4)]
    assert CARON not in line


def test_one_snapshot_per_notification(ring):
    out = io.StringIO()
    observer = Observer(ring, out)
    ring[3].step()
    ring[1].step()

    assert observer.run(max_notifications=2) == 2
    first, second = snapshots(out)
    assert first.split(",")[3].endswith(CARON)
    assert second.split(",")[1].endswith(CARON)
    assert first.count(CARON) == second.count(CARON) == 1


def test_run_stops_at_deadline_without_notifications(ring):
    out = io.StringIO()
    assert Observer(ring, out).run(running_time=0.05) == 0
    assert out.getvalue() == ""


def test_observes_running_threads(ring):
    out = io.StringIO()
    observer = Observer(ring, out)
    observer.print_snapshot()
    ring.start()

    assert observer.run(max_notifications=20) == 20
    lines = snapshots(out)
    assert len(lines) == 21
    assert all(len(line.split(",")) == 4 for line in lines)
    assert all(line.count(CARON) == 1 for line in lines[1:])
