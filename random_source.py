"""
随机数来源

引擎不使用全局随机数，每次抽卡由调用方传入随机数来源，便于复现和测试
"""
import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """抽卡所需的三种随机操作"""
    
    def random(self) -> float:
        """[0, 1) 上的均匀浮点数"""
        ...
    
    def randrange(self, start: int, stop: int) -> int:
        """[start, stop) 上的均匀整数"""
        ...
    
    def bernoulli(self, p: float) -> bool:
        """以概率 p 返回 True"""
        ...


class SeededRandom:
    """基于独立 random.Random 实例的随机数来源"""
    
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)
    
    def random(self) -> float:
        return self._random.random()
    
    def randrange(self, start: int, stop: int) -> int:
        # 空区间时 random.Random 抛出 ValueError
        return self._random.randrange(start, stop)
    
    def bernoulli(self, p: float) -> bool:
        return self._random.random() < p
