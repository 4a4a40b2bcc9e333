"""
矩阵页面 UI 状态 — 选中 / 编辑 / 标签开关

状态归展示层所有（存在 st.session_state），这里只提供纯状态转换，
每个转换返回新实例，不修改原对象。
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class SelectionState:
    selected_id: Optional[str] = None
    editing_id: Optional[str] = None
    show_labels: bool = True

    def select_point(self, account_id: str) -> "SelectionState":
        """点击点：再次点击已选中的点则取消选中"""
        if self.selected_id == account_id:
            return replace(self, selected_id=None)
        return replace(self, selected_id=account_id)

    def select(self, account_id: str) -> "SelectionState":
        """明细表点击行：直接选中（不切换）"""
        return replace(self, selected_id=account_id)

    def clear_selection(self) -> "SelectionState":
        """点击背景"""
        return replace(self, selected_id=None)

    def start_edit(self, account_id: str) -> "SelectionState":
        return replace(self, editing_id=account_id)

    def cancel_edit(self) -> "SelectionState":
        return replace(self, editing_id=None)

    def toggle_labels(self) -> "SelectionState":
        return replace(self, show_labels=not self.show_labels)

    def after_delete(self, account_id: str) -> "SelectionState":
        """删除账户后，清掉指向它的选中 / 编辑状态"""
        return replace(
            self,
            selected_id=None if self.selected_id == account_id else self.selected_id,
            editing_id=None if self.editing_id == account_id else self.editing_id,
        )

    def after_import(self) -> "SelectionState":
        """导入会替换整个集合，选中与编辑全部失效"""
        return replace(self, selected_id=None, editing_id=None)
