import pytest

from config import FeaturedWish, Pity, RegularWish, Weights


class ScriptedRandom:
    """按顺序回放预设的随机数，用于确定性测试"""

    def __init__(self, floats=(), ints=(), bools=()):
        self.floats = list(floats)
        self.ints = list(ints)
        self.bools = list(bools)
        self.calls = []

    def random(self):
        self.calls.append('random')
        return self.floats.pop(0)

    def randrange(self, start, stop):
        self.calls.append(('randrange', start, stop))
        value = self.ints.pop(0) if self.ints else start
        assert start <= value < stop
        return value

    def bernoulli(self, p):
        self.calls.append(('bernoulli', p))
        return self.bools.pop(0)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def regular_wish():
    return RegularWish(
        weights=Weights(0.006, 0.051),
        pity=Pity(73, 90, 9),
        top_tier_count=100,
        second_tier_count=100,
        third_tier_count=100,
    )


@pytest.fixture
def featured_wish(regular_wish):
    return FeaturedWish(
        base=regular_wish,
        top_tier_featured_count=100,
        second_tier_featured_count=100,
        featured_chance=0.5,
    )
