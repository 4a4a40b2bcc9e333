"""
组合服务 — 页面调用的唯一入口

数据来源：db.accounts（整个集合存为一个 JSON 数组）
职责：
- 从 DB 装载 Store，并挂上自动持久化订阅
- 汇总指标 / 明细表 / 矩阵几何（点位、标签、详情框）

页面只拿裸数据（dict / DataFrame），图表在页面层组装。
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

import db
from config import CATEGORY_ORDER, Category, parse_category
from config.theme import CATEGORY_COLORS

from .layout import (
    DEFAULT_LAYOUT,
    LabelPlacement,
    MatrixLayout,
    place_label,
    place_tooltip,
    point_position,
    quadrant_guides,
)
from .models import Account, CalculatedAccount
from .store import AccountStore
from .transfer import accounts_from_json_data

logger = logging.getLogger(__name__)


def category_color(category: Category) -> str:
    """象限分类 → 颜色"""
    if not isinstance(category, Category):
        category = parse_category(category)
    return CATEGORY_COLORS[category]


def _label_dict(placement: LabelPlacement) -> Dict[str, Any]:
    return {"left": placement.left, "top": placement.top, "anchor": placement.anchor.value}


class PortfolioService:
    """
    组合服务

    所有方法为 @staticmethod；Store 实例由页面放在 session_state 中持有。
    """

    # ── 持久化 ──

    @staticmethod
    def load_store() -> AccountStore:
        """从 DB 装载账户集合，之后每次变更自动写回"""
        accounts = accounts_from_json_data(db.accounts.load_all())
        store = AccountStore(accounts)
        store.subscribe(PortfolioService.persist)
        logger.info("Loaded store with %d accounts", len(accounts))
        return store

    @staticmethod
    def persist(accounts: Sequence[Account]) -> None:
        db.accounts.save_all([acc.to_dict() for acc in accounts])

    # ── 汇总 ──

    @staticmethod
    def summary(accounts: Sequence[Account]) -> Dict[str, Any]:
        """
        组合概览

        Returns:
            {count, total_arr}
        """
        return {
            "count": len(accounts),
            "total_arr": sum(acc.arr for acc in accounts),
        }

    @staticmethod
    def category_breakdown(calculated: Sequence[CalculatedAccount]) -> Dict[Category, int]:
        """各象限账户数（四个象限都有键）"""
        counts = {cat: 0 for cat in CATEGORY_ORDER}
        for acc in calculated:
            counts[acc.category] += 1
        return counts

    @staticmethod
    def inventory_frame(calculated: Sequence[CalculatedAccount]) -> pd.DataFrame:
        """
        账户明细表（保持集合顺序）

        Returns:
            DataFrame(id, name, arr, volume_score, potential_score, category)
        """
        columns = ["id", "name", "arr", "volume_score", "potential_score", "category"]
        if not calculated:
            return pd.DataFrame(columns=columns)
        df = pd.DataFrame([{
            "id": acc.id,
            "name": acc.name,
            "arr": acc.arr,
            "volume_score": acc.volume_score,
            "potential_score": acc.potential_score,
            "category": acc.category.value,
        } for acc in calculated])
        df["volume_score"] = df["volume_score"].round(1)
        df["potential_score"] = df["potential_score"].round(1)
        return df[columns]

    # ── 矩阵几何 ──

    @staticmethod
    def matrix_geometry(
        calculated: Sequence[CalculatedAccount],
        selected_id: Optional[str] = None,
        layout: MatrixLayout = DEFAULT_LAYOUT,
    ) -> Dict[str, Any]:
        """
        矩阵渲染所需的全部像素几何

        Returns:
            {points: [{id, name, color, cx, cy, selected,
                      label: {left, top, anchor}}],
             tooltip: {id, name, arr, volume_score, potential_score,
                       category, color, left, top, width, height} | None,
             guides: quadrant_guides(layout),
             size}
        """
        points: List[Dict[str, Any]] = []
        tooltip = None
        for acc in calculated:
            cx, cy = point_position(acc, layout)
            selected = acc.id == selected_id
            points.append({
                "id": acc.id,
                "name": acc.name,
                "color": category_color(acc.category),
                "cx": cx,
                "cy": cy,
                "selected": selected,
                "label": _label_dict(place_label(cx, cy, layout)),
            })
            if selected:
                box = place_tooltip(cx, cy, layout)
                tooltip = {
                    "id": acc.id,
                    "name": acc.name,
                    "arr": acc.arr,
                    "volume_score": acc.volume_score,
                    "potential_score": acc.potential_score,
                    "category": acc.category.value,
                    "color": category_color(acc.category),
                    "left": box.left,
                    "top": box.top,
                    "width": box.width,
                    "height": box.height,
                }
        return {
            "points": points,
            "tooltip": tooltip,
            "guides": quadrant_guides(layout),
            "size": layout.size,
        }
