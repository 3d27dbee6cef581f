"""
Convergence de l'anneau sans concurrence : à chaque pas, un processus
privilégié choisi au hasard effectue sa transition.
"""

import random

import pytest

from Ring import Ring

N = 5
MAX_STEPS_TO_CONVERGE = 10 * N * N
STEPS_AFTER_CONVERGENCE = 10 * N


@pytest.fixture
def ring():
    r = Ring(N)
    yield r
    r.shutdown()


@pytest.mark.parametrize("seed", range(20))
def test_converges_to_a_single_token(ring, seed):
    rng = random.Random(seed)
    acted = []

    steps = 0
    while len(ring.privileged()) != 1:
        assert steps < MAX_STEPS_TO_CONVERGE
        candidate = rng.choice(ring.privileged())
        assert ring[candidate].step()
        acted.append(candidate)
        steps += 1

    for _ in range(STEPS_AFTER_CONVERGENCE):
        holder, = ring.privileged()
        assert ring[holder].step()
        acted.append(holder)
        assert len(ring.privileged()) == 1

    notified = []
    while ring.channel.has_messages():
        notified.append(ring.channel.get_message())
    assert notified == acted


def test_token_circulates_in_ring_order(ring):
    rng = random.Random(7)
    while len(ring.privileged()) != 1:
        ring[rng.choice(ring.privileged())].step()

    holder, = ring.privileged()
    order = []
    for _ in range(2 * N):
        ring[holder].step()
        holder, = ring.privileged()
        order.append(holder)
    assert all(b == (a + 1) % N for a, b in zip(order, order[1:]))


@pytest.mark.parametrize("seed", range(5))
def test_never_zero_privileged(ring, seed):
    rng = random.Random(seed)
    for _ in range(200):
        privileged = ring.privileged()
        assert privileged
        ring[rng.choice(privileged)].step()
