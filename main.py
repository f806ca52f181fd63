"""
祈愿抽卡模拟器 - 主程序入口

运行此文件以执行完整的模拟分析

核心规则（默认配置）：
1. 5星基础概率 0.6%，4星基础概率 5.1%
2. 第73抽之后5星概率线性递增，第90抽必出5星
3. 距上次4星第9抽起4星概率递增，第10抽必出4星
4. UP卡池出5星/4星时 50% 为UP；歪了之后下一个同稀有度必为UP
5. 保底计数与UP标记由调用方保存，模拟器本身不保存任何状态
"""
from config import CHARACTER_EVENT_WISH, STANDARD_WISH
from distribution import odds_table
from monte_carlo_analyzer import MonteCarloAnalyzer


def print_odds_ramp(wish, first: int, last: int):
    """打印软保底区间内每抽的5星概率"""
    table = odds_table(wish.weights, wish.pity, last)
    print("\n5星概率递增:")
    for n in range(first, last + 1):
        print(f"  第{n}抽: {table[n - 1, 0] * 100:.2f}%")


def main():
    """主函数"""
    wish = CHARACTER_EVENT_WISH
    base = wish.base
    
    print("=" * 60)
    print("祈愿抽卡模拟器")
    print("=" * 60)
    print("\n当前规则:")
    print(f"  • 5星基础概率: {base.weights.base_top_tier_chance * 100}%")
    print(f"  • 4星基础概率: {base.weights.base_second_tier_chance * 100}%")
    print(f"  • 5星软保底: {base.pity.top_tier_soft_start}抽后递增")
    print(f"  • 5星硬保底: {base.pity.top_tier_hard_cap}抽必出")
    print(f"  • 4星保底: 第{base.pity.second_tier_guarantee_at}抽起递增")
    print(f"  • UP概率: {wish.featured_chance * 100}%（歪了下次必出UP）")
    
    print_odds_ramp(base, base.pity.top_tier_soft_start, base.pity.top_tier_hard_cap)
    
    # 长期出率
    print("\n" + "=" * 60)
    print("综合出率")
    print("=" * 60)
    for name, pool in (("常驻卡池", STANDARD_WISH), ("UP卡池", CHARACTER_EVENT_WISH)):
        analyzer = MonteCarloAnalyzer(pool, iterations=1, verbose=False)
        rates = analyzer.simulate_rolls(1_000_000)
        print(f"\n【{name}】")
        print(f"  5星综合出率: {rates['top_tier_rate'] * 100:.3f}%")
        print(f"  4星综合出率: {rates['second_tier_rate'] * 100:.3f}%")
        print(f"  3星综合出率: {rates['third_tier_rate'] * 100:.3f}%")
    
    # 抽到UP 5星所需抽数
    print("\n" + "=" * 60)
    print("抽到UP 5星所需抽数")
    print("=" * 60)
    analyzer = MonteCarloAnalyzer(wish, iterations=10000)
    results = analyzer.simulate_pool()
    analyzer.print_results(results)
    
    print("✓ 模拟完成")


if __name__ == "__main__":
    main()
