"""
核心抽卡模拟器

每次抽卡是纯函数：(卡池配置, 当前状态, 随机数来源) -> (抽卡结果, 新状态)
模拟器本身不保存任何状态
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from config import FeaturedWish, RegularWish
from distribution import get_distribution
from pool_state import FeaturedState, RegularState
from random_source import RandomSource


class RollKind(Enum):
    """抽卡结果的稀有度类型"""
    TOP_TIER = 'top_tier'
    TOP_TIER_FEATURED = 'top_tier_featured'
    SECOND_TIER = 'second_tier'
    SECOND_TIER_FEATURED = 'second_tier_featured'
    THIRD_TIER = 'third_tier'
    
    @property
    def tier(self) -> int:
        """稀有度排名：5星为1，4星为2，3星为3"""
        if self in (RollKind.TOP_TIER, RollKind.TOP_TIER_FEATURED):
            return 1
        if self in (RollKind.SECOND_TIER, RollKind.SECOND_TIER_FEATURED):
            return 2
        return 3
    
    @property
    def is_featured(self) -> bool:
        return self in (RollKind.TOP_TIER_FEATURED, RollKind.SECOND_TIER_FEATURED)


@dataclass(frozen=True)
class Roll:
    """
    单次抽卡结果：稀有度类型 + 该类型奖池内的物品下标
    例如 5星奖池为 ["狗剑士", "疯猫", "鬣蜥"] 时，Roll(RollKind.TOP_TIER, 1) 表示 "疯猫"
    """
    kind: RollKind
    index: int


class RegularWishSimulator:
    """常驻卡池抽卡"""
    
    def __init__(self, wish: RegularWish):
        self.wish = wish
    
    def make_third_tier_roll(self, state: RegularState, rng: RandomSource) -> Tuple[Roll, RegularState]:
        """出3星：两个保底计数都+1"""
        return (
            Roll(RollKind.THIRD_TIER, rng.randrange(0, self.wish.third_tier_count)),
            RegularState(state.rolls_since_top_tier + 1, state.rolls_since_second_tier + 1),
        )
    
    def make_second_tier_roll(self, state: RegularState, rng: RandomSource) -> Tuple[Roll, RegularState]:
        """出4星：重置4星计数，5星计数+1"""
        return (
            Roll(RollKind.SECOND_TIER, rng.randrange(0, self.wish.second_tier_count)),
            RegularState(state.rolls_since_top_tier + 1, 1),
        )
    
    def make_top_tier_roll(self, state: RegularState, rng: RandomSource) -> Tuple[Roll, RegularState]:
        """出5星：重置5星计数，4星计数+1"""
        return (
            Roll(RollKind.TOP_TIER, rng.randrange(0, self.wish.top_tier_count)),
            RegularState(1, state.rolls_since_second_tier + 1),
        )
    
    def roll(self, state: RegularState, rng: RandomSource) -> Tuple[Roll, RegularState]:
        """单次抽卡"""
        draw = rng.random()
        top, top_plus_second = get_distribution(self.wish.weights, self.wish.pity, state)
        
        if draw < top:
            return self.make_top_tier_roll(state, rng)
        if draw < top_plus_second:
            return self.make_second_tier_roll(state, rng)
        return self.make_third_tier_roll(state, rng)


class FeaturedWishSimulator:
    """
    UP卡池抽卡
    出5星/4星时：若上一个同稀有度不是UP，则必出UP；否则按 featured_chance 判定是否UP
    """
    
    def __init__(self, wish: FeaturedWish):
        self.wish = wish
        self.base = RegularWishSimulator(wish.base)
    
    def make_third_tier_roll(self, state: FeaturedState, rng: RandomSource) -> Tuple[Roll, FeaturedState]:
        roll, base = self.base.make_third_tier_roll(state.base, rng)
        return roll, FeaturedState(base, state.last_top_tier_was_featured, state.last_second_tier_was_featured)
    
    def make_second_tier_roll(self, state: FeaturedState, rng: RandomSource) -> Tuple[Roll, FeaturedState]:
        # 上一个4星歪了则不再判定，必出UP
        if not state.last_second_tier_was_featured or rng.bernoulli(self.wish.featured_chance):
            return (
                Roll(RollKind.SECOND_TIER_FEATURED, rng.randrange(0, self.wish.second_tier_featured_count)),
                FeaturedState(
                    RegularState(state.base.rolls_since_top_tier, 1),
                    state.last_top_tier_was_featured,
                    True,
                ),
            )
        
        roll, base = self.base.make_second_tier_roll(state.base, rng)
        return roll, FeaturedState(base, state.last_top_tier_was_featured, False)
    
    def make_top_tier_roll(self, state: FeaturedState, rng: RandomSource) -> Tuple[Roll, FeaturedState]:
        # 上一个5星歪了则不再判定，必出UP
        if not state.last_top_tier_was_featured or rng.bernoulli(self.wish.featured_chance):
            return (
                Roll(RollKind.TOP_TIER_FEATURED, rng.randrange(0, self.wish.top_tier_featured_count)),
                FeaturedState(
                    RegularState(1, state.base.rolls_since_second_tier),
                    True,
                    state.last_second_tier_was_featured,
                ),
            )
        
        roll, base = self.base.make_top_tier_roll(state.base, rng)
        return roll, FeaturedState(base, False, state.last_second_tier_was_featured)
    
    def roll(self, state: FeaturedState, rng: RandomSource) -> Tuple[Roll, FeaturedState]:
        """单次抽卡，概率分布与常驻卡池相同"""
        draw = rng.random()
        top, top_plus_second = get_distribution(self.wish.base.weights, self.wish.base.pity, state.base)
        
        if draw < top:
            return self.make_top_tier_roll(state, rng)
        if draw < top_plus_second:
            return self.make_second_tier_roll(state, rng)
        return self.make_third_tier_roll(state, rng)


def create_simulator(wish: Union[RegularWish, FeaturedWish]) -> Union[RegularWishSimulator, FeaturedWishSimulator]:
    """根据卡池类型创建对应的模拟器"""
    if isinstance(wish, FeaturedWish):
        return FeaturedWishSimulator(wish)
    if isinstance(wish, RegularWish):
        return RegularWishSimulator(wish)
    raise TypeError(f"未知的卡池类型: {type(wish).__name__}")


def fresh_state(wish: Union[RegularWish, FeaturedWish]) -> Union[RegularState, FeaturedState]:
    """卡池对应的初始状态"""
    if isinstance(wish, FeaturedWish):
        return FeaturedState()
    return RegularState()


def roll(wish: Union[RegularWish, FeaturedWish],
         state: Union[RegularState, FeaturedState],
         rng: RandomSource) -> Tuple[Roll, Union[RegularState, FeaturedState]]:
    """
    单次抽卡
    wish 为 RegularWish 时 state 为 RegularState，为 FeaturedWish 时 state 为 FeaturedState
    """
    return create_simulator(wish).roll(state, rng)
