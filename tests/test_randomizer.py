import pytest

from lizardmeme.definitions import OBJECT_SPAWN_RATE_MAX
from lizardmeme.randomizer import Randomizer


@pytest.mark.parametrize("maximum", [1, 2, 3, 980])
def test_random_num_stays_in_range(maximum):
    rng = Randomizer(7)
    values = [rng.random_num(maximum) for _ in range(500)]
    assert min(values) >= 1
    assert max(values) <= maximum


def test_random_num_covers_every_value():
    rng = Randomizer(1)
    assert {rng.random_num(3) for _ in range(300)} == {1, 2, 3}


@pytest.mark.parametrize("maximum", [0, -4])
def test_random_num_rejects_non_positive(maximum):
    with pytest.raises(ValueError):
        Randomizer(0).random_num(maximum)


def test_same_seed_gives_same_sequence():
    a, b = Randomizer(42), Randomizer(42)
    assert [a.random_num(10) for _ in range(20)] == [b.random_num(10) for _ in range(20)]
    assert [a.random_spawn_time() for _ in range(20)] == [
        b.random_spawn_time() for _ in range(20)
    ]


def test_spawn_time_is_in_tenths_within_bounds():
    rng = Randomizer(3)
    times = [rng.random_spawn_time() for _ in range(2000)]
    for value in times:
        assert round(value * 10) == pytest.approx(value * 10)
    assert min(times) == pytest.approx(0.6)
    assert max(times) == pytest.approx(OBJECT_SPAWN_RATE_MAX)