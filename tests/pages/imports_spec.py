"""页面模块导入与 render 存在性检查。"""
from __future__ import annotations

import importlib


def _assert_render(module_path: str) -> None:
    mod = importlib.import_module(module_path)
    assert hasattr(mod, "render")
    assert callable(getattr(mod, "render"))


def test_pages_matrix_imports():
    """组合矩阵页面可导入。"""
    _assert_render("pages.matrix")


def test_pages_settings_imports():
    """数据页面可导入。"""
    _assert_render("pages.settings")


def test_pages_package_exports():
    pages = importlib.import_module("pages")
    assert callable(pages.page_matrix)
    assert callable(pages.page_settings)
