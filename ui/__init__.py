"""
UI 组件库 — 统一导出

依赖方向：ui/ → config/ + streamlit + plotly
不引用 services/ / pages/
"""
from .components import UI, format_currency
from .charts import plotly_layout, render_chart, matrix_figure

__all__ = [
    "UI",
    "format_currency",
    "plotly_layout",
    "render_chart",
    "matrix_figure",
]
