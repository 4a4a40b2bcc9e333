"""
账户组合矩阵 — 评分引擎 + 布局几何

- scoring.py    组合统计 / 单账户评分 / 象限分类（纯函数）
- layout.py     分数 → 像素、标签与详情框防溢出定位（纯函数）
- models.py     Account / PortfolioStats / CalculatedAccount
- store.py      账户集合 Store + 派生视图
- selection.py  选中 / 编辑 / 标签开关状态转换
- transfer.py   JSON 导入导出 + 表单解析（输入边界）
- service.py    页面入口
"""
from .layout import (
    DEFAULT_LAYOUT,
    Anchor,
    LabelPlacement,
    MatrixLayout,
    TooltipPlacement,
    label_box,
    map_coordinate,
    place_label,
    place_tooltip,
    point_position,
    quadrant_guides,
)
from .models import Account, CalculatedAccount, PortfolioStats, new_account
from .scoring import (
    calculate_account_scores,
    calculate_portfolio,
    calculate_portfolio_stats,
    classify,
)
from .selection import SelectionState
from .service import PortfolioService, category_color
from .store import AccountStore, PortfolioView
from .transfer import (
    ImportFormatError,
    export_json,
    import_json,
    parse_form,
    resolve_probability,
    slider_seed,
)

__all__ = [
    "DEFAULT_LAYOUT",
    "Account",
    "AccountStore",
    "Anchor",
    "CalculatedAccount",
    "ImportFormatError",
    "LabelPlacement",
    "MatrixLayout",
    "PortfolioService",
    "PortfolioStats",
    "PortfolioView",
    "SelectionState",
    "TooltipPlacement",
    "calculate_account_scores",
    "calculate_portfolio",
    "calculate_portfolio_stats",
    "category_color",
    "classify",
    "export_json",
    "import_json",
    "label_box",
    "map_coordinate",
    "new_account",
    "parse_form",
    "place_label",
    "place_tooltip",
    "point_position",
    "quadrant_guides",
    "resolve_probability",
    "slider_seed",
]
