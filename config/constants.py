"""
账户矩阵常量 — Single Source of Truth

本文件是整个系统中关于「评分权重」「象限阈值」「矩阵布局」的唯一定义处。
任何新增/修改分类或布局尺寸都只改这一个文件。
"""
from enum import Enum
from typing import Dict, List

# ═══════════════════════════════════════════════════════
#  Streamlit 页面配置
# ═══════════════════════════════════════════════════════

PAGE_CONFIG: Dict = dict(
    page_title="Account Management",
    page_icon="🧭",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ═══════════════════════════════════════════════════════
#  象限分类 — 一级枚举（互斥，不可交叉）
# ═══════════════════════════════════════════════════════

class Category(str, Enum):
    """
    账户的象限分类（互斥，不可交叉）

    - GROW_SCALE:    高体量 + 高潜力
    - INCUBATE:      低体量 + 高潜力
    - PROTECT:       高体量 + 低潜力
    - MAINTAIN_EXIT: 低体量 + 低潜力
    """
    GROW_SCALE    = "Grow & Scale"
    INCUBATE      = "Incubate"
    PROTECT       = "Protect"
    MAINTAIN_EXIT = "Maintain / Exit"


# 展示顺序（图例 / 表格筛选用）
CATEGORY_ORDER: List[Category] = [
    Category.GROW_SCALE,
    Category.INCUBATE,
    Category.PROTECT,
    Category.MAINTAIN_EXIT,
]


def parse_category(value: str) -> Category:
    """
    显示值或成员名 → Category

    Raises:
        ValueError: 当 value 既不是显示值也不是成员名时抛出
    """
    for cat in Category:
        if value in (cat.value, cat.name):
            return cat
    raise ValueError(f"未知分类: {value}，合法值: {[c.value for c in Category]}")


# ═══════════════════════════════════════════════════════
#  评分权重（三项之和 = 100）
# ═══════════════════════════════════════════════════════

ENGAGEMENT_WEIGHT: float = 30
EXPANSION_WEIGHT: float = 40
STAKEHOLDER_WEIGHT: float = 30

# 体量分满分
VOLUME_SCALE: float = 100

# 象限阈值：>= 阈值归入「高」一侧
VOLUME_THRESHOLD: float = 50
POTENTIAL_THRESHOLD: float = 50

# 概率字段合法区间
PROBABILITY_MIN: float = 0
PROBABILITY_MAX: float = 100

# 表单滑块默认值
DEFAULT_PROBABILITY: int = 50


# ═══════════════════════════════════════════════════════
#  矩阵布局（像素）
# ═══════════════════════════════════════════════════════

MATRIX_SIZE: int = 600                        # 整个平面边长 S
MATRIX_PADDING: int = 60                      # 四周留白 P

TOOLTIP_WIDTH: int = 220
TOOLTIP_HEIGHT: int = 180
TOOLTIP_MARGIN: int = 10                      # 距平面外边缘的内缩 M
TOOLTIP_GAP: int = 15                         # 与点的水平间距

LABEL_HALF_WIDTH: int = 45                    # 标签最大宽度 90
LABEL_HEIGHT: int = 16
LABEL_OFFSET_BELOW: int = 10
LABEL_OFFSET_ABOVE: int = 24
LABEL_GAP: int = 4

POINT_SIZE: int = 18


# ═══════════════════════════════════════════════════════
#  持久化 / 导入导出
# ═══════════════════════════════════════════════════════

STORAGE_KEY: str = "workpath_portfolio_data"
EXPORT_FILE_NAME: str = "workpath-portfolio-export.json"

# JSON 字段顺序（导出时保持与导入一致）
ACCOUNT_FIELDS: List[str] = [
    "id", "name", "arr", "loginsPerMonth", "sessionDuration", "notes",
    "expansionProbability", "stakeholderProbability", "createdAt",
]
