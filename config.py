"""
抽卡配置类
"""
from dataclasses import dataclass, field
from typing import Union


class WishConfigError(ValueError):
    """卡池配置不合法"""


def _check_probability(name: str, value: float):
    if not 0.0 <= value <= 1.0:
        raise WishConfigError(f"{name} 必须在 [0, 1] 之间, 当前为 {value}")


def _check_pool_size(name: str, value: int):
    if value < 1:
        raise WishConfigError(f"{name} 至少为 1, 当前为 {value}")


@dataclass(frozen=True)
class Weights:
    """各稀有度的基础概率"""
    base_top_tier_chance: float = 0.006  # 5星基础概率 0.6%
    base_second_tier_chance: float = 0.051  # 4星基础概率 5.1%
    
    def validate(self):
        _check_probability('base_top_tier_chance', self.base_top_tier_chance)
        _check_probability('base_second_tier_chance', self.base_second_tier_chance)


@dataclass(frozen=True)
class Pity:
    """保底机制"""
    top_tier_soft_start: int = 73  # 73抽后开始递增
    top_tier_hard_cap: int = 90  # 90抽必出5星
    second_tier_guarantee_at: int = 9  # 第9抽开始4星概率递增，最迟第10抽必出
    
    def validate(self):
        if self.top_tier_soft_start < 0:
            raise WishConfigError(f"top_tier_soft_start 不能为负数, 当前为 {self.top_tier_soft_start}")
        if self.top_tier_soft_start > self.top_tier_hard_cap:
            raise WishConfigError(
                f"top_tier_soft_start ({self.top_tier_soft_start}) 不能大于 "
                f"top_tier_hard_cap ({self.top_tier_hard_cap})"
            )
        if self.second_tier_guarantee_at < 1:
            raise WishConfigError(
                f"second_tier_guarantee_at 至少为 1, 当前为 {self.second_tier_guarantee_at}"
            )


@dataclass(frozen=True)
class RegularWish:
    """
    常驻卡池
    weights: 各稀有度基础概率
    pity: 保底参数
    *_count: 各稀有度奖池中的物品数量，抽卡结果的 index 相对于对应奖池
    """
    weights: Weights = field(default_factory=Weights)
    pity: Pity = field(default_factory=Pity)
    top_tier_count: int = 1
    second_tier_count: int = 1
    third_tier_count: int = 1
    
    def validate(self):
        self.weights.validate()
        self.pity.validate()
        _check_pool_size('top_tier_count', self.top_tier_count)
        _check_pool_size('second_tier_count', self.second_tier_count)
        _check_pool_size('third_tier_count', self.third_tier_count)


@dataclass(frozen=True)
class FeaturedWish:
    """
    UP卡池：在常驻卡池的基础上增加UP奖池
    featured_chance: 上一次同稀有度已出UP时，本次出UP的概率
    """
    base: RegularWish = field(default_factory=RegularWish)
    top_tier_featured_count: int = 1
    second_tier_featured_count: int = 1
    featured_chance: float = 0.5  # 50% 出UP，歪了下次必出UP
    
    def validate(self):
        self.base.validate()
        _check_pool_size('top_tier_featured_count', self.top_tier_featured_count)
        _check_pool_size('second_tier_featured_count', self.second_tier_featured_count)
        _check_probability('featured_chance', self.featured_chance)


Wish = Union[RegularWish, FeaturedWish]


def validate_wish(wish: Wish) -> Wish:
    """
    在加载配置时校验一次，抽卡过程中不再重复校验
    返回原配置，便于链式调用
    """
    if not isinstance(wish, (RegularWish, FeaturedWish)):
        raise WishConfigError(f"未知的卡池类型: {type(wish).__name__}")
    wish.validate()
    return wish


# 常驻卡池
STANDARD_WISH = RegularWish(
    weights=Weights(0.006, 0.051),
    pity=Pity(73, 90, 9),
    top_tier_count=7,
    second_tier_count=30,
    third_tier_count=13,
)

# 角色UP卡池：1个UP 5星，3个UP 4星
CHARACTER_EVENT_WISH = FeaturedWish(
    base=STANDARD_WISH,
    top_tier_featured_count=1,
    second_tier_featured_count=3,
    featured_chance=0.5,
)
