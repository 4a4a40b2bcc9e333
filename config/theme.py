"""
主题配置 — 颜色、CSS、Plotly 布局

所有视觉风格的唯一定义处。UI 组件只引用此文件。
"""
from typing import Dict, Any

from config.constants import Category

# ═══════════════════════════════════════════════════════
#  颜色定义
# ═══════════════════════════════════════════════════════

COLORS: Dict[str, str] = {
    # 品牌色
    "primary":     "#1E293B",
    "brand":       "#FFEC57",

    # 背景
    "bg_main":     "#F8FAFC",
    "bg_chart":    "#FCFDFE",
    "bg_tooltip":  "#0F172A",

    # 边框
    "border":      "#E2E8F0",
    "grid":        "#CBD5E1",

    # 文字
    "text":        "#334155",
    "text_muted":  "#94A3B8",
    "text_light":  "#FFFFFF",
    "arr":         "#93C5FD",
}

# 象限分类配色
CATEGORY_COLORS: Dict[Category, str] = {
    Category.GROW_SCALE:    "#22c55e",   # 绿
    Category.INCUBATE:      "#3b82f6",   # 蓝
    Category.PROTECT:       "#ef4444",   # 红
    Category.MAINTAIN_EXIT: "#94a3b8",   # 灰
}


# ═══════════════════════════════════════════════════════
#  全局 CSS
# ═══════════════════════════════════════════════════════

GLOBAL_CSS: str = """
<style>
    header[data-testid="stHeader"] { background-color: #FFEC57; }
    div[data-testid="stMetric"] {
        background-color: #FFFFFF;
        border: 1px solid #E2E8F0;
        border-radius: 8px;
        padding: 12px;
    }
</style>
"""


# ═══════════════════════════════════════════════════════
#  metric_cards 样式参数（streamlit-extras）
# ═══════════════════════════════════════════════════════

METRIC_CARD_STYLE: Dict[str, str] = {
    "background_color": "#FFFFFF",
    "border_color": "#E2E8F0",
    "border_left_color": "#1E293B",
    "box_shadow": "0 0 4px rgba(0, 0, 0, 0.08)",
}


# ═══════════════════════════════════════════════════════
#  Plotly 布局默认配置 — 像素坐标矩阵
# ═══════════════════════════════════════════════════════

PLOTLY_LAYOUT_DEFAULTS: Dict[str, Any] = dict(
    template="plotly_white",
    paper_bgcolor="#FFFFFF",
    plot_bgcolor="#FFFFFF",
    margin=dict(l=0, r=0, t=0, b=0),
    font=dict(
        family="Inter, 'Helvetica Neue', Arial, sans-serif",
        size=11,
        color="#334155",
    ),
    xaxis=dict(
        visible=False,
        showgrid=False,
        zeroline=False,
        fixedrange=True,
    ),
    yaxis=dict(
        visible=False,
        showgrid=False,
        zeroline=False,
        fixedrange=True,
    ),
    hoverlabel=dict(
        bgcolor="#0F172A",
        bordercolor="#334155",
        font=dict(size=11, color="#FFFFFF"),
    ),
    showlegend=False,
)
