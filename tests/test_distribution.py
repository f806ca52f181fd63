import numpy as np
import pytest

from config import Pity, Weights
from distribution import get_distribution, odds_table, second_tier_odds, top_tier_odds
from pool_state import RegularState


WEIGHTS = Weights(0.006, 0.051)
PITY = Pity(73, 90, 9)


def test_weight_increase():
    """软保底后概率递增，硬保底必出"""
    arr = get_distribution(WEIGHTS, PITY, RegularState(74, 10))
    assert arr[0] > 0.006
    assert arr[1] >= 1.0

    arr = get_distribution(WEIGHTS, PITY, RegularState(89, 9))
    assert arr[0] < 1.0

    arr = get_distribution(WEIGHTS, PITY, RegularState(90, 9))
    assert arr[0] >= 1.0
    assert arr[1] != 1.0


@pytest.mark.parametrize("rolls", [1, 2, 10, 50, 72, 73])
def test_top_tier_base_until_soft_start(rolls):
    arr = get_distribution(WEIGHTS, PITY, RegularState(rolls, 1))
    assert arr[0] == 0.006


@pytest.mark.parametrize("rolls", [90, 91, 100, 150])
def test_top_tier_guaranteed_from_hard_cap(rolls):
    arr = get_distribution(WEIGHTS, PITY, RegularState(rolls, 1))
    assert arr[0] >= 1.0


def test_top_tier_ramp_is_linear():
    step = (1.0 - 0.006) / (90 - 73)
    for rolls in range(74, 90):
        expected = 0.006 + step * (rolls - 73)
        assert np.isclose(top_tier_odds(WEIGHTS, PITY, rolls), expected, rtol=1e-12)
        assert top_tier_odds(WEIGHTS, PITY, rolls) < 1.0


@pytest.mark.parametrize("rolls", [1, 4, 8])
def test_second_tier_base_below_threshold(rolls):
    assert second_tier_odds(WEIGHTS, PITY, rolls) == 0.051
    arr = get_distribution(WEIGHTS, PITY, RegularState(1, rolls))
    assert np.isclose(arr[1] - arr[0], 0.051, rtol=1e-12)


def test_second_tier_ramp_past_threshold():
    # 阈值当抽已递增一步，下一抽必出
    assert np.isclose(second_tier_odds(WEIGHTS, PITY, 9), 0.051 + (1 - 0.051) / 2)
    assert second_tier_odds(WEIGHTS, PITY, 10) >= 1.0 - 1e-12
    assert second_tier_odds(WEIGHTS, PITY, 11) > 1.0


def test_soft_start_equal_to_hard_cap():
    """软保底与硬保底重合：之前为基础概率，之后必出"""
    pity = Pity(90, 90, 9)

    assert get_distribution(WEIGHTS, pity, RegularState(90, 1))[0] == 0.006
    arr = get_distribution(WEIGHTS, pity, RegularState(91, 1))
    assert arr[0] == float('inf')
    assert arr[1] == float('inf')

    table = odds_table(WEIGHTS, pity, 92)
    assert table[89, 0] == 0.006
    assert table[90, 0] == 1.0


def test_distribution_is_not_clamped():
    arr = get_distribution(WEIGHTS, PITY, RegularState(100, 20))
    assert arr[0] > 1.0
    assert arr[1] > arr[0]


def test_odds_table_shape_and_clip():
    table = odds_table(WEIGHTS, PITY, 100)

    assert table.shape == (100, 2)
    assert table[0, 0] == 0.006
    assert table[72, 0] == 0.006
    assert table[73, 0] > 0.006
    assert table[89, 0] == 1.0
    assert table[99, 0] == 1.0
    assert np.all(table <= 1.0)
    assert np.all(np.diff(table[:, 0]) >= 0)
