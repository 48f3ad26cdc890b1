"""Per-worker random source."""

from utils.rng import RandomSource


def test_chance_bounds():
    rng = RandomSource(5)
    assert not any(rng.chance(0) for _ in range(1000))
    assert all(rng.chance(100) for _ in range(1000))


def test_chance_rate():
    rng = RandomSource(6)
    hits = sum(rng.chance(25) for _ in range(10000))
    assert 2200 < hits < 2800


def test_randint_inclusive():
    rng = RandomSource(7)
    draws = {rng.randint(3, 5) for _ in range(500)}
    assert draws == {3, 4, 5}


def test_worker_streams_differ():
    """Same base seed, different worker index: different seeds and draws."""
    a = RandomSource.for_worker(0, base_seed=42)
    b = RandomSource.for_worker(1, base_seed=42)
    assert a.seed == 42
    assert b.seed == 42 ^ 7919
    assert [a.randint(0, 10**6) for _ in range(5)] != [b.randint(0, 10**6) for _ in range(5)]
    assert RandomSource.for_worker(1, base_seed=42).seed == b.seed
