"""
业务逻辑层 — 按业务域隔离

目录结构：
- services/portfolio/     账户组合矩阵（评分 / 分类 / 布局 / 导入导出）

架构规则：
- services/ → db/ + config/（可以调用）
- 绝对禁止：services/ → ui/、services/ → pages/
"""
from services.portfolio import PortfolioService

__all__ = [
    "PortfolioService",
]
