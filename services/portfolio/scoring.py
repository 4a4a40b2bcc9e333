"""
评分引擎 — 组合统计 → 单账户评分 → 象限分类

纯数学，无 DB / UI 依赖，不修改入参。
每个账户的评分只依赖「自身 + 当前集合的统计快照」，与集合内顺序无关。
"""
from __future__ import annotations

from typing import Iterable, List, Sequence

from config import Category
from config.constants import (
    ENGAGEMENT_WEIGHT,
    EXPANSION_WEIGHT,
    POTENTIAL_THRESHOLD,
    STAKEHOLDER_WEIGHT,
    VOLUME_SCALE,
    VOLUME_THRESHOLD,
)

from .models import Account, CalculatedAccount, PortfolioStats


def calculate_portfolio_stats(accounts: Iterable[Account]) -> PortfolioStats:
    """
    组合级最大值

    空集合合法，返回 {0, 0}。
    """
    arr_max = 0
    engagement_max = 0
    for account in accounts:
        arr_max = max(arr_max, account.arr)
        engagement_max = max(engagement_max, account.engagement)
    return PortfolioStats(arr_max=arr_max, engagement_max=engagement_max)


def classify(volume_score: float, potential_score: float) -> Category:
    """
    50/50 象限划分，边界值（恰好 50）归入「高」一侧

    | volume >= 50 | potential >= 50 | 分类          |
    |--------------|-----------------|---------------|
    | True         | True            | GROW_SCALE    |
    | True         | False           | PROTECT       |
    | False        | True            | INCUBATE      |
    | False        | False           | MAINTAIN_EXIT |
    """
    high_potential = potential_score >= POTENTIAL_THRESHOLD
    if volume_score >= VOLUME_THRESHOLD:
        return Category.GROW_SCALE if high_potential else Category.PROTECT
    return Category.INCUBATE if high_potential else Category.MAINTAIN_EXIT


def calculate_account_scores(
    account: Account,
    stats: PortfolioStats,
) -> CalculatedAccount:
    """
    单账户评分

    - engagement_score  = engagement / engagement_max × 30（max 为 0 时记 0）
    - expansion_score   = expansion_probability × 40 / 100
    - stakeholder_score = stakeholder_probability × 30 / 100
    - potential_score   = 三项之和（权重合计 100）
    - volume_score      = arr / arr_max × 100（max 为 0 时记 0）

    输入假定已在边界校验过（见 transfer.py），此处不做校验。
    """
    engagement = account.engagement

    engagement_score = (
        (engagement / stats.engagement_max) * ENGAGEMENT_WEIGHT
        if stats.engagement_max > 0 else 0
    )
    expansion_score = (account.expansion_probability * EXPANSION_WEIGHT) / 100
    stakeholder_score = (account.stakeholder_probability * STAKEHOLDER_WEIGHT) / 100

    volume_score = (
        (account.arr / stats.arr_max) * VOLUME_SCALE
        if stats.arr_max > 0 else 0
    )
    potential_score = engagement_score + expansion_score + stakeholder_score

    return CalculatedAccount(
        account=account,
        engagement=engagement,
        engagement_score=engagement_score,
        expansion_score=expansion_score,
        stakeholder_score=stakeholder_score,
        volume_score=volume_score,
        potential_score=potential_score,
        category=classify(volume_score, potential_score),
    )


def calculate_portfolio(accounts: Sequence[Account]) -> List[CalculatedAccount]:
    """整体重算派生集合（保持原顺序）"""
    stats = calculate_portfolio_stats(accounts)
    return [calculate_account_scores(acc, stats) for acc in accounts]
