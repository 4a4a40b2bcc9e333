"""
配置包 — 统一导出

使用方式：
    from config import Category, MATRIX_SIZE
    from config.theme import CATEGORY_COLORS
"""
from config.constants import (
    ACCOUNT_FIELDS,
    CATEGORY_ORDER,
    DEFAULT_PROBABILITY,
    EXPORT_FILE_NAME,
    MATRIX_PADDING,
    MATRIX_SIZE,
    PAGE_CONFIG,
    POINT_SIZE,
    STORAGE_KEY,
    Category,
    parse_category,
)

__all__ = [
    "ACCOUNT_FIELDS",
    "CATEGORY_ORDER",
    "DEFAULT_PROBABILITY",
    "EXPORT_FILE_NAME",
    "MATRIX_PADDING",
    "MATRIX_SIZE",
    "PAGE_CONFIG",
    "POINT_SIZE",
    "STORAGE_KEY",
    "Category",
    "parse_category",
]
