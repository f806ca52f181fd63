"""
蒙特卡洛分析器
"""
from typing import Dict, List, Optional, Union

import numpy as np

from config import FeaturedWish, Wish, validate_wish
from pool_state import FeaturedState, RegularState
from random_source import SeededRandom
from simulator_core import RollKind, create_simulator, fresh_state


class MonteCarloAnalyzer:
    """蒙特卡洛分析器"""
    
    def __init__(self, wish: Wish, iterations: int = 10000, seed: Optional[int] = None,
                 verbose: bool = True):
        if iterations <= 0:
            raise ValueError(f"iterations 必须为正数, 当前为 {iterations}")
        self.wish = validate_wish(wish)
        self.iterations = iterations
        self.verbose = verbose
        self.simulator = create_simulator(wish)
        self.rng = SeededRandom(seed)
    
    def _log(self, message: str):
        if self.verbose:
            print(message)
    
    def _target_kind(self) -> RollKind:
        # UP卡池目标为UP 5星，常驻卡池目标为任意5星
        if isinstance(self.wish, FeaturedWish):
            return RollKind.TOP_TIER_FEATURED
        return RollKind.TOP_TIER
    
    def simulate_rolls(self, rolls: int,
                       state: Optional[Union[RegularState, FeaturedState]] = None) -> Dict:
        """
        从 state 开始连续抽 rolls 次
        返回: {
            'rolls': 抽数,
            'counts': 各 RollKind 的次数,
            'top_tier_rate': 5星出率（含UP）,
            'second_tier_rate': 4星出率（含UP）,
            'third_tier_rate': 3星出率,
            'final_state': 最终状态
        }
        """
        if rolls <= 0:
            raise ValueError(f"rolls 必须为正数, 当前为 {rolls}")
        if state is None:
            state = fresh_state(self.wish)
        
        counts = {kind: 0 for kind in RollKind}
        self._log(f"正在连续抽卡，共 {rolls} 抽...")
        
        for _ in range(rolls):
            result, state = self.simulator.roll(state, self.rng)
            counts[result.kind] += 1
        
        tier_counts = {1: 0, 2: 0, 3: 0}
        for kind, count in counts.items():
            tier_counts[kind.tier] += count
        
        return {
            'rolls': rolls,
            'counts': counts,
            'top_tier_rate': tier_counts[1] / rolls,
            'second_tier_rate': tier_counts[2] / rolls,
            'third_tier_rate': tier_counts[3] / rolls,
            'final_state': state,
        }
    
    def pull_until_target(self, state: Optional[Union[RegularState, FeaturedState]] = None) -> Dict:
        """
        抽到目标为止（UP卡池为UP 5星，常驻卡池为任意5星）
        返回: {
            'pulls': 消耗的抽数,
            'top_tier_count': 期间5星数（含目标）,
            'second_tier_count': 期间4星数,
            'lost_featured': 歪掉的5星数,
            'final_state': 最终状态
        }
        """
        if state is None:
            state = fresh_state(self.wish)
        
        target = self._target_kind()
        pulls = 0
        top_tier_count = 0
        second_tier_count = 0
        lost_featured = 0
        
        while True:
            pulls += 1
            result, state = self.simulator.roll(state, self.rng)
            tier = result.kind.tier
            if tier == 1:
                top_tier_count += 1
            elif tier == 2:
                second_tier_count += 1
            
            if result.kind == target:
                break
            if result.kind == RollKind.TOP_TIER:
                lost_featured += 1
        
        return {
            'pulls': pulls,
            'top_tier_count': top_tier_count,
            'second_tier_count': second_tier_count,
            'lost_featured': lost_featured,
            'final_state': state,
        }
    
    def simulate_pool(self, state: Optional[Union[RegularState, FeaturedState]] = None) -> List[Dict]:
        """
        从同一初始状态独立模拟 iterations 次抽到目标
        返回: 模拟结果列表
        """
        results = []
        
        self._log(f"正在模拟卡池，共 {self.iterations} 次...")
        
        for i in range(self.iterations):
            if (i + 1) % 1000 == 0:
                self._log(f"进度: {i + 1}/{self.iterations}")
            
            results.append(self.pull_until_target(state))
        
        return results
    
    @staticmethod
    def summarize(results: List[Dict]) -> Dict:
        """统计抽到目标所需抽数的分布"""
        if not results:
            raise ValueError("没有可统计的模拟结果")
        
        pulls = np.array([r['pulls'] for r in results])
        lost = np.array([r['lost_featured'] for r in results])
        
        return {
            'iterations': len(results),
            'mean': float(np.mean(pulls)),
            'median': float(np.median(pulls)),
            'min': int(np.min(pulls)),
            'max': int(np.max(pulls)),
            'p25': float(np.percentile(pulls, 25)),
            'p75': float(np.percentile(pulls, 75)),
            'p90': float(np.percentile(pulls, 90)),
            'lost_featured_mean': float(np.mean(lost)),
        }
    
    def print_results(self, results: List[Dict]):
        """打印模拟结果"""
        summary = self.summarize(results)
        
        print("\n" + "=" * 60)
        print("【模拟结果】")
        print("=" * 60)
        print(f"\n模拟次数: {summary['iterations']}")
        print(f"\n抽到目标所需抽数:")
        print(f"  平均值: {summary['mean']:.2f} 抽")
        print(f"  中位数: {summary['median']:.0f} 抽")
        print(f"  最小值: {summary['min']} 抽")
        print(f"  最大值: {summary['max']} 抽")
        print(f"  25%分位数: {summary['p25']:.0f} 抽")
        print(f"  75%分位数: {summary['p75']:.0f} 抽")
        print(f"  90%分位数: {summary['p90']:.0f} 抽")
        print(f"\n平均歪掉的5星: {summary['lost_featured_mean']:.2f} 个")
        
        print("\n" + "=" * 60 + "\n")
