import pytest

from ProcessVariant import ProcessVariant
from Ring import Ring, check_process_count
from RingErrors import InvalidProcessCountError


@pytest.fixture(params=[3, 4, 5, 8, 13])
def ring(request):
    r = Ring(request.param)
    yield r
    r.shutdown()


def test_following_previous_n_times_returns_to_start(ring):
    n = len(ring)
    for start in ring:
        p = start
        for step in range(1, n + 1):
            p = p.previous
            if step < n:
                assert p is not start
        assert p is start


def test_each_process_has_exactly_one_successor(ring):
    targets = [p.previous.getId() for p in ring]
    assert sorted(targets) == list(range(len(ring)))


def test_only_process_zero_closes_the_ring(ring):
    assert ring[0].variant is ProcessVariant.RING_CLOSING
    assert ring[0].previous is ring[len(ring) - 1]
    assert all(p.variant is ProcessVariant.REGULAR for p in list(ring)[1:])


def test_initial_values(ring):
    n = len(ring)
    assert ring.values() == [0] + list(range(1, n - 1)) + [0]
    assert [p.getId() for p in ring] == list(range(n))


def test_every_process_starts_privileged(ring):
    assert ring.privileged() == list(range(len(ring)))


def test_threads_are_not_started_by_construction(ring):
    assert not any(p.is_alive() for p in ring)


@pytest.mark.parametrize("n", [-1, 0, 1, 2])
def test_too_few_processes(n):
    with pytest.raises(InvalidProcessCountError):
        check_process_count(n)
    with pytest.raises(InvalidProcessCountError):
        Ring(n)
