"""
矩阵布局 — 分数 → 像素 + 标签/详情框防溢出定位

纯几何计算，无 Streamlit / Plotly 依赖。
坐标系：原点在平面左上角，x 向右、y 向下（与屏幕一致）。

平面结构：
    0 ── P ──────────── P+C ── S
         |  可绘制区域  |
    点只落在 [P, P+C]；详情框可伸入留白带，但不越过 [M, S-M]。
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from config import Category
from config.constants import (
    LABEL_GAP,
    LABEL_HALF_WIDTH,
    LABEL_HEIGHT,
    LABEL_OFFSET_ABOVE,
    LABEL_OFFSET_BELOW,
    MATRIX_PADDING,
    MATRIX_SIZE,
    TOOLTIP_GAP,
    TOOLTIP_HEIGHT,
    TOOLTIP_MARGIN,
    TOOLTIP_WIDTH,
)

from .models import CalculatedAccount


class Anchor(str, Enum):
    """标签水平锚点：left 坐标对应标签的哪一侧"""
    CENTER = "center"
    LEFT = "left"      # 标签左边缘对齐 left（标签在点右侧）
    RIGHT = "right"    # 标签右边缘对齐 left（标签在点左侧）


@dataclass(frozen=True)
class MatrixLayout:
    """
    矩阵布局常量

    构造时显式校验几何前提，不满足直接抛 ValueError：
    - 标签尺寸小于可绘制区域
    - 详情框宽高小于 S - 2M（否则上下夹紧可能互相覆盖）
    """
    size: int = MATRIX_SIZE
    padding: int = MATRIX_PADDING
    tooltip_width: int = TOOLTIP_WIDTH
    tooltip_height: int = TOOLTIP_HEIGHT
    tooltip_margin: int = TOOLTIP_MARGIN
    tooltip_gap: int = TOOLTIP_GAP
    label_half_width: int = LABEL_HALF_WIDTH
    label_height: int = LABEL_HEIGHT
    label_offset_below: int = LABEL_OFFSET_BELOW
    label_offset_above: int = LABEL_OFFSET_ABOVE
    label_gap: int = LABEL_GAP

    def __post_init__(self):
        if self.chart_size <= 0:
            raise ValueError(
                f"padding 过大: size={self.size}, padding={self.padding}")
        if self.label_half_width * 2 >= self.chart_size:
            raise ValueError(
                f"标签宽度 {self.label_half_width * 2} 必须小于可绘制区域 {self.chart_size}")
        if self.label_height >= self.chart_size:
            raise ValueError(
                f"标签高度 {self.label_height} 必须小于可绘制区域 {self.chart_size}")
        inner = self.size - 2 * self.tooltip_margin
        if self.tooltip_width >= inner or self.tooltip_height >= inner:
            raise ValueError(
                f"详情框 {self.tooltip_width}x{self.tooltip_height} "
                f"必须小于 S-2M = {inner}")

    @property
    def chart_size(self) -> int:
        """可绘制区域边长 C = S - 2P"""
        return self.size - 2 * self.padding

    @property
    def min_bound(self) -> int:
        return self.padding

    @property
    def max_bound(self) -> int:
        return self.padding + self.chart_size


DEFAULT_LAYOUT = MatrixLayout()


@dataclass(frozen=True)
class LabelPlacement:
    left: float
    top: float
    anchor: Anchor


@dataclass(frozen=True)
class TooltipPlacement:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


# ═══════════════════════════════════════════════════════
#  坐标映射
# ═══════════════════════════════════════════════════════

def map_coordinate(score: float, layout: MatrixLayout = DEFAULT_LAYOUT) -> float:
    """分数 [0, 100] → 像素：0 → P，100 → P + C"""
    return layout.padding + (score / 100) * layout.chart_size


def point_position(
    account: CalculatedAccount,
    layout: MatrixLayout = DEFAULT_LAYOUT,
) -> Tuple[float, float]:
    """
    账户点位 (cx, cy)

    y 轴翻转：潜力越高越靠上，因此用 100 - potential_score 计算。
    """
    cx = map_coordinate(account.volume_score, layout)
    cy = map_coordinate(100 - account.potential_score, layout)
    return cx, cy


# ═══════════════════════════════════════════════════════
#  标签定位
# ═══════════════════════════════════════════════════════

def place_label(
    cx: float,
    cy: float,
    layout: MatrixLayout = DEFAULT_LAYOUT,
) -> LabelPlacement:
    """
    名称标签定位（垂直/水平独立判断）

    垂直：默认在点下方；底边越过 max_bound 则翻到点上方。
    水平：默认居中；左边缘越过 min_bound → 左对齐放点右侧；
          否则右边缘越过 max_bound → 右对齐放点左侧。
    """
    top = cy + layout.label_offset_below
    if top + layout.label_height > layout.max_bound:
        top = cy - layout.label_offset_above

    left = cx
    anchor = Anchor.CENTER
    if cx - layout.label_half_width < layout.min_bound:
        left = cx + layout.label_gap
        anchor = Anchor.LEFT
    elif cx + layout.label_half_width > layout.max_bound:
        left = cx - layout.label_gap
        anchor = Anchor.RIGHT

    return LabelPlacement(left=left, top=top, anchor=anchor)


def label_box(
    placement: LabelPlacement,
    layout: MatrixLayout = DEFAULT_LAYOUT,
) -> Tuple[float, float, float, float]:
    """标签包围盒 (left, top, right, bottom)，宽度按最大宽度计"""
    width = layout.label_half_width * 2
    if placement.anchor is Anchor.CENTER:
        x0 = placement.left - width / 2
    elif placement.anchor is Anchor.RIGHT:
        x0 = placement.left - width
    else:
        x0 = placement.left
    return x0, placement.top, x0 + width, placement.top + layout.label_height


# ═══════════════════════════════════════════════════════
#  详情框定位
# ═══════════════════════════════════════════════════════

def place_tooltip(
    cx: float,
    cy: float,
    layout: MatrixLayout = DEFAULT_LAYOUT,
) -> TooltipPlacement:
    """
    详情框左上角定位

    水平：默认放点右侧；右边缘越过 S - M 则翻到点左侧。
    垂直：默认以点为中心，再夹紧到 [M, S - M - TH]。
    前提 TH < S - 2M 已由 MatrixLayout 保证，上下夹紧互斥。
    """
    width = layout.tooltip_width
    height = layout.tooltip_height
    outer = layout.size - layout.tooltip_margin

    left = cx + layout.tooltip_gap
    if left + width > outer:
        left = cx - width - layout.tooltip_gap

    top = cy - height / 2
    if top < layout.tooltip_margin:
        top = layout.tooltip_margin
    elif top + height > outer:
        top = layout.size - height - layout.tooltip_margin

    return TooltipPlacement(left=left, top=top, width=width, height=height)


# ═══════════════════════════════════════════════════════
#  象限参考线
# ═══════════════════════════════════════════════════════

def quadrant_guides(layout: MatrixLayout = DEFAULT_LAYOUT) -> Dict[str, Any]:
    """
    象限分隔线 + 象限标题锚点

    Returns:
        {mid, min, max, captions: [{category, label, x, y}]}
    """
    c = layout.chart_size
    p = layout.padding
    near, far = p + c * 0.25, p + c * 0.75
    return {
        "mid": p + c / 2,
        "min": layout.min_bound,
        "max": layout.max_bound,
        "captions": [
            {"category": cat, "label": cat.value, "x": x, "y": y}
            for cat, x, y in (
                (Category.GROW_SCALE, far, near),
                (Category.INCUBATE, near, near),
                (Category.PROTECT, far, far),
                (Category.MAINTAIN_EXIT, near, far),
            )
        ],
    }
