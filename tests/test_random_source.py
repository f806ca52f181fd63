import pytest

from random_source import SeededRandom


def test_seeded_random_is_reproducible():
    a = SeededRandom(99)
    b = SeededRandom(99)

    assert [a.random() for _ in range(10)] == [b.random() for _ in range(10)]
    assert [a.randrange(0, 100) for _ in range(10)] == [b.randrange(0, 100) for _ in range(10)]


def test_ranges():
    rng = SeededRandom(1)
    for _ in range(1000):
        assert 0.0 <= rng.random() < 1.0
        assert 3 <= rng.randrange(3, 7) < 7


def test_bernoulli_extremes():
    rng = SeededRandom(1)
    assert not any(rng.bernoulli(0.0) for _ in range(1000))
    assert all(rng.bernoulli(1.0) for _ in range(1000))


def test_bernoulli_rate():
    rng = SeededRandom(5)
    hits = sum(rng.bernoulli(0.5) for _ in range(100000))
    assert 0.49 < hits / 100000 < 0.51


def test_empty_range():
    with pytest.raises(ValueError):
        SeededRandom(1).randrange(0, 0)
