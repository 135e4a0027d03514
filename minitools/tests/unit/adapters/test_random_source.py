import pytest

from minitools.adapters.random_source import RandomSource


def test_next_uniform_stays_in_half_open_range():
    rng = RandomSource()
    values = {rng.next_uniform(0, 36) for _ in range(2000)}

    assert values == set(range(36))


def test_seeded_sources_repeat_sequences():
    first = RandomSource(seed=99)
    second = RandomSource(seed=99)

    assert first.seed == 99
    assert [first.next_uniform(1, 101) for _ in range(10)] == [
        second.next_uniform(1, 101) for _ in range(10)
    ]


def test_empty_range_is_rejected():
    with pytest.raises(ValueError):
        RandomSource().next_uniform(5, 5)
