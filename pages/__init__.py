"""
pages 包 — 视图层

每个页面只做：路由 → 读 session_state → 调 Service → 调 UI 渲染
不直接碰 DB / 评分引擎内部。
"""
from .matrix import render as page_matrix
from .settings import render as page_settings

__all__ = [
    "page_matrix",
    "page_settings",
]
