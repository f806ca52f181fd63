"""
概率分布计算
"""
from typing import Tuple

import numpy as np

from config import Pity, Weights
from pool_state import RegularState


def top_tier_odds(weights: Weights, pity: Pity, rolls_since_top_tier: int) -> float:
    """计算当前5星概率（软保底后线性递增，到硬保底时达到或超过100%）"""
    base_rate = weights.base_top_tier_chance
    if rolls_since_top_tier <= pity.top_tier_soft_start:
        return base_rate
    
    # 软保底与硬保底重合时超过即必出
    if pity.top_tier_hard_cap == pity.top_tier_soft_start:
        return float('inf')
    
    increase = (1.0 - base_rate) / (pity.top_tier_hard_cap - pity.top_tier_soft_start)
    return base_rate + increase * (rolls_since_top_tier - pity.top_tier_soft_start)


def second_tier_odds(weights: Weights, pity: Pity, rolls_since_second_tier: int) -> float:
    """计算当前4星概率（达到阈值当抽起每抽递增 (1 - 基础概率) / 2）"""
    base_rate = weights.base_second_tier_chance
    if rolls_since_second_tier < pity.second_tier_guarantee_at:
        return base_rate
    
    increase = (1.0 - base_rate) / 2
    return base_rate + increase * (rolls_since_second_tier - pity.second_tier_guarantee_at + 1)


def get_distribution(weights: Weights, pity: Pity, state: RegularState) -> Tuple[float, float]:
    """
    计算考虑保底后的实际概率分布
    返回: (5星累计概率, 5星+4星累计概率)，3星概率为剩余部分
    
    不对结果做 1.0 截断：[0, 1) 上的随机数总是小于超过 1 的边界，即必出
    """
    top = top_tier_odds(weights, pity, state.rolls_since_top_tier)
    second = second_tier_odds(weights, pity, state.rolls_since_second_tier)
    return top, top + second


def odds_table(weights: Weights, pity: Pity, max_rolls: int) -> np.ndarray:
    """
    第 1..max_rolls 抽各自的5星、4星概率（非累计，截断到 [0, 1]）
    返回形状为 (max_rolls, 2) 的数组
    """
    rolls = np.arange(1, max_rolls + 1)
    table = np.array([
        [top_tier_odds(weights, pity, n), second_tier_odds(weights, pity, n)]
        for n in rolls
    ], dtype=float).reshape(max_rolls, 2)
    return np.clip(table, 0.0, 1.0)
