"""
卡池状态类

状态只做替换不做修改：每次抽卡返回新的状态，由调用方负责保存
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RegularState:
    """
    常驻卡池的保底状态
    计数含义为"本次是距上次出货的第几抽"，出货后重置为1，其余情况每抽+1
    """
    rolls_since_top_tier: int = 1  # 距上次5星的抽数
    rolls_since_second_tier: int = 1  # 距上次4星的抽数


@dataclass(frozen=True)
class FeaturedState:
    """
    UP卡池的状态：常驻保底 + 上一次同稀有度是否为UP
    标记仅在抽出对应稀有度时改变
    """
    base: RegularState = field(default_factory=RegularState)
    last_top_tier_was_featured: bool = True  # 上一个5星是否为UP（False 表示下个5星必为UP）
    last_second_tier_was_featured: bool = True  # 上一个4星是否为UP
