"""
UI 原子组件库 — 纯渲染，无业务逻辑

所有方法只做 HTML/Streamlit 渲染，不做任何业务计算。
依赖方向：ui/ → config/（主题）+ streamlit

设计原则：
- 用户文本经 html.escape() 防御处理
- 不引用 services/ / pages/
"""
from __future__ import annotations

import html as _html
import re
from contextlib import contextmanager
from typing import Any, Optional, Sequence, Tuple, Union

import pandas as pd
import streamlit as st
from streamlit_extras.metric_cards import style_metric_cards
from streamlit_extras.stylable_container import stylable_container

from config.theme import COLORS, GLOBAL_CSS, METRIC_CARD_STYLE


def _esc(text: Any) -> str:
    """防御性 HTML 转义"""
    return _html.escape(str(text)) if text is not None else ""


def _strip_html(text: Any) -> str:
    """去除标题中的 HTML 标签，仅保留纯文本"""
    return re.sub(r"<[^>]+>", "", str(text)) if text is not None else ""


def format_currency(value: float, currency: str = "€") -> str:
    """金额格式化：€1,234,567"""
    return f"{currency}{value:,.0f}" if float(value).is_integer() else f"{currency}{value:,.2f}"


class UI:
    """
    原子级 UI 组件库

    使用示例::
        from ui import UI
        UI.inject_css()
        UI.header("Portfolio Matrix")
        UI.metric_row([("Total Accounts", "12"), ("Total ARR", "€1,234,567")])
    """

    # ── 全局样式注入 ──

    @staticmethod
    def inject_css():
        """注入全局 CSS（每页调用一次）"""
        if GLOBAL_CSS:
            st.markdown(GLOBAL_CSS, unsafe_allow_html=True)
        style_metric_cards(**METRIC_CARD_STYLE)

    # ── 卡片 ──

    @staticmethod
    def card(
        label: str,
        value: Union[float, str],
        *,
        subtext: str = "",
        currency: str = "€",
    ):
        """
        指标卡片

        Args:
            label:    标题
            value:    数值（float 自动格式化，str 原样显示）
            subtext:  附注
            currency: 货币符号
        """
        if isinstance(value, (int, float)):
            val_display = format_currency(value, currency)
        else:
            val_display = str(value)

        st.metric(label=label, value=val_display)
        if subtext:
            st.caption(subtext)

    # ── 指标行 ──

    @staticmethod
    def metric_row(items: Sequence[Tuple[str, str]]):
        """水平排列的指标行: [(label, value), ...]"""
        cols = st.columns(len(items))
        for col, (label, value) in zip(cols, items):
            col.metric(label=label, value=value)

    # ── 标题 ──

    @staticmethod
    def header(title: str, subtitle: str = ""):
        """章节大标题"""
        st.subheader(title)
        if subtitle:
            st.caption(subtitle)

    @staticmethod
    def sub_heading(title: str):
        """次级标题"""
        st.markdown(f"### {title}")

    # ── Expander ──

    @staticmethod
    @contextmanager
    def expander(title: str, *, expanded: bool = False, key: Optional[str] = None):
        """带边框的折叠面板（使用容器包裹，避免污染内部结构）"""
        clean_title = _strip_html(title)
        safe_key = key or f"expander_{abs(hash(clean_title))}"
        with stylable_container(
            key=safe_key,
            css_styles=(
                "{"
                f"border: 1px solid {COLORS['border']};"
                "border-radius: 8px;"
                "background: #FFFFFF;"
                "padding: 6px 8px;"
                "}"
            ),
        ):
            with st.expander(clean_title, expanded=expanded):
                yield

    # ── 分类徽章 ──

    @staticmethod
    def badge(text: str, color: str):
        """象限分类徽章（白字彩底）"""
        st.markdown(
            f'<span style="display:inline-block;padding:2px 8px;border-radius:4px;'
            f'font-size:10px;font-weight:700;letter-spacing:0.08em;'
            f'text-transform:uppercase;color:{COLORS["text_light"]};'
            f'background:{_esc(color)}">{_esc(text)}</span>',
            unsafe_allow_html=True,
        )

    # ── 明细行 ──

    @staticmethod
    def detail_rows(items: Sequence[Tuple[str, str]]):
        """两列键值明细: [(label, value), ...]"""
        rows = "".join(
            f'<div style="display:flex;justify-content:space-between;font-size:13px;'
            f'padding:3px 0;border-bottom:1px solid {COLORS["border"]}">'
            f'<span style="color:{COLORS["text_muted"]}">{_esc(lbl)}</span>'
            f'<b style="color:{COLORS["text"]}">{_esc(val)}</b></div>'
            for lbl, val in items
        )
        st.markdown(f"<div>{rows}</div>", unsafe_allow_html=True)

    # ── 数据表 ──

    @staticmethod
    def table(df: pd.DataFrame, title: str = "", max_height: int = 400, **kwargs: Any):
        """数据表格（带边框）"""
        if title:
            st.markdown(
                f'<div style="font-weight:600;font-size:16px;margin-bottom:10px;'
                f'color:{COLORS["text"]}">{_esc(title)}</div>',
                unsafe_allow_html=True,
            )
        with stylable_container(
            key=f"table_{kwargs.get('key') or id(df)}",
            css_styles=(
                "{"
                f"border: 1px solid {COLORS['border']};"
                "border-radius: 8px;"
                "background: #FFFFFF;"
                "}"
            ),
        ):
            return st.dataframe(
                df, use_container_width=True, hide_index=True,
                height=min(len(df) * 35 + 38, max_height),
                **kwargs,
            )

    # ── 空状态 ──

    @staticmethod
    def empty(message: str = "暂无数据"):
        st.info(message)
