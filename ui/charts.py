"""
Plotly 图表工具 — 统一布局 + 渲染封装 + 组合矩阵

所有 Plotly 图表使用此模块的 plotly_layout() 获取布局参数。
矩阵图直接在像素坐标系中绘制（原点左上角，y 向下），
几何由 services 计算好后以 dict 传入，本模块只负责画。

依赖方向：ui/ → config/（主题）+ plotly + streamlit
"""
from __future__ import annotations

from typing import Any, Dict

import plotly.graph_objects as go
import streamlit as st

from config.constants import POINT_SIZE
from config.theme import COLORS, PLOTLY_LAYOUT_DEFAULTS

from .components import _esc


def plotly_layout(**overrides: Any) -> Dict[str, Any]:
    """
    构建统一 Plotly 布局参数

    用法::
        fig.update_layout(**plotly_layout(height=350))

    基于 config/theme.py 的 PLOTLY_LAYOUT_DEFAULTS，
    支持任意 override 覆盖。
    """
    layout = dict(PLOTLY_LAYOUT_DEFAULTS)
    layout.update(overrides)
    return layout


def render_chart(fig: go.Figure, *, fixed_size: bool = False, **kwargs: Any):
    """
    渲染 Plotly 图表（统一配置）

    默认 use_container_width=True；fixed_size=True 时按 figure 自身宽高绘制
    （矩阵图必须固定尺寸，否则像素几何失效）。

    用法::
        render_chart(fig)
        event = render_chart(fig, fixed_size=True, key="matrix", on_select="rerun")
    """
    return st.plotly_chart(
        fig,
        use_container_width=not fixed_size,
        config={"displayModeBar": False},
        **kwargs,
    )


def _caption_font(size: int = 10, color: str = COLORS["text_muted"]) -> Dict[str, Any]:
    return dict(size=size, color=color)


def matrix_figure(geometry: Dict[str, Any], *, show_labels: bool = True) -> go.Figure:
    """
    组合矩阵图

    Args:
        geometry:    PortfolioService.matrix_geometry() 的返回值
        show_labels: 是否显示账户名称标签

    Trace 0 为账户点，point_index 与 geometry["points"] 一一对应。
    """
    size = geometry["size"]
    guides = geometry["guides"]
    lo, hi, mid = guides["min"], guides["max"], guides["mid"]
    points = geometry["points"]

    fig = go.Figure()

    # 1. 绘图区背景 + 象限分隔线
    fig.add_shape(type="rect", x0=lo, y0=lo, x1=hi, y1=hi, layer="below",
                  fillcolor=COLORS["bg_chart"], line=dict(color=COLORS["border"], width=1))
    for x0, y0, x1, y1 in ((mid, lo, mid, hi), (lo, mid, hi, mid)):
        fig.add_shape(type="line", x0=x0, y0=y0, x1=x1, y1=y1, layer="below",
                      line=dict(color=COLORS["grid"], width=1, dash="dash"))

    # 2. 象限标题 + 坐标轴标题
    for cap in guides["captions"]:
        fig.add_annotation(x=cap["x"], y=cap["y"], text=cap["label"].upper(),
                           showarrow=False, opacity=0.4, font=_caption_font())
    fig.add_annotation(x=mid, y=size - 15, text="VOLUME SCORE",
                       showarrow=False, font=_caption_font())
    fig.add_annotation(x=20, y=mid, text="POTENTIAL SCORE", textangle=-90,
                       showarrow=False, font=_caption_font())

    # 3. 账户点
    fig.add_trace(go.Scatter(
        x=[p["cx"] for p in points],
        y=[p["cy"] for p in points],
        mode="markers",
        customdata=[p["id"] for p in points],
        text=[_esc(p["name"]) for p in points],
        marker=dict(
            size=POINT_SIZE,
            color=[p["color"] for p in points],
            line=dict(
                color=[COLORS["primary"] if p["selected"] else "#FFFFFF" for p in points],
                width=2,
            ),
        ),
        hovertemplate="%{text}<extra></extra>",
    ))

    # 4. 名称标签（位置/锚点由布局策略给出）
    if show_labels:
        for p in points:
            label = p["label"]
            fig.add_annotation(
                x=label["left"], y=label["top"], text=_esc(p["name"]),
                xanchor=label["anchor"], yanchor="top", showarrow=False,
                bgcolor="rgba(255,255,255,0.7)", font=_caption_font(9, COLORS["text"]),
            )

    # 5. 详情框
    tip = geometry["tooltip"]
    if tip:
        fig.add_shape(
            type="rect", x0=tip["left"], y0=tip["top"],
            x1=tip["left"] + tip["width"], y1=tip["top"] + tip["height"],
            fillcolor=COLORS["bg_tooltip"], line=dict(color=COLORS["text"], width=1),
        )
        lines = [
            f"<span style='font-size:9px;color:{COLORS['text_muted']}'>ACCOUNT</span>",
            f"<b>{_esc(tip['name'])}</b>",
            f"ARR  <span style='color:{COLORS['arr']}'>€{tip['arr']:,.0f}</span>",
            f"Volume  <b>{tip['volume_score']:.1f}</b>",
            f"Potential  <b>{tip['potential_score']:.1f}</b>",
            f"<span style='color:{tip['color']}'>●</span> {_esc(tip['category'])}",
        ]
        fig.add_annotation(
            x=tip["left"] + 14, y=tip["top"] + 14, text="<br>".join(lines),
            xanchor="left", yanchor="top", align="left", showarrow=False,
            font=_caption_font(11, COLORS["text_light"]),
        )

    fig.update_layout(**plotly_layout(width=size, height=size, dragmode=False))
    fig.update_xaxes(range=[0, size])
    fig.update_yaxes(range=[size, 0])
    return fig
