"""
账户集合 Store + 派生视图

Store 是账户集合的唯一持有者：
- get()       读取当前集合（不可变 tuple）
- mutate(fn)  fn(旧集合) → 新集合，完成后同步通知所有订阅者
- subscribe() 注册变更回调，返回取消订阅函数

PortfolioView 订阅 Store，每次变更从零重算派生集合（不做增量更新）。
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Tuple

from .models import Account, CalculatedAccount
from .scoring import calculate_portfolio

logger = logging.getLogger(__name__)

Accounts = Tuple[Account, ...]
Listener = Callable[[Accounts], None]


class AccountStore:
    """账户集合的单一写入者"""

    def __init__(self, accounts: Iterable[Account] = ()):
        self._accounts: Accounts = tuple(accounts)
        self._listeners: List[Listener] = []

    def get(self) -> Accounts:
        return self._accounts

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """注册变更回调；返回取消订阅函数"""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def mutate(self, fn: Callable[[Accounts], Iterable[Account]]) -> Accounts:
        """应用变更并通知订阅者"""
        self._accounts = tuple(fn(self._accounts))
        for listener in list(self._listeners):
            listener(self._accounts)
        return self._accounts

    # ── 便捷操作 ──

    def add(self, account: Account) -> Accounts:
        logger.info("Adding account %s (%s)", account.id, account.name)
        return self.mutate(lambda accs: accs + (account,))

    def update(self, account_id: str, **changes) -> Accounts:
        """
        编辑账户（id / created_at 保持不变）

        Raises:
            KeyError: account_id 不存在
        """
        if self.find(account_id) is None:
            raise KeyError(f"账户不存在: {account_id}")
        logger.info("Updating account %s", account_id)
        return self.mutate(lambda accs: [
            acc.with_changes(**changes) if acc.id == account_id else acc
            for acc in accs
        ])

    def upsert(self, account: Account) -> Accounts:
        """存在则按 id 替换，否则追加（表单保存用）"""
        if self.find(account.id) is None:
            return self.add(account)
        logger.info("Updating account %s", account.id)
        return self.mutate(lambda accs: [
            account if acc.id == account.id else acc for acc in accs
        ])

    def delete(self, account_id: str) -> Accounts:
        """删除账户；id 不存在时不变（仍会通知）"""
        logger.info("Deleting account %s", account_id)
        return self.mutate(lambda accs: [acc for acc in accs if acc.id != account_id])

    def replace(self, accounts: Iterable[Account]) -> Accounts:
        """整体替换（导入用，不合并）"""
        accounts = tuple(accounts)
        logger.info("Replacing collection with %d accounts", len(accounts))
        return self.mutate(lambda _accs: accounts)

    def find(self, account_id: Optional[str]) -> Optional[Account]:
        return next((acc for acc in self._accounts if acc.id == account_id), None)


class PortfolioView:
    """派生视图：Store 每次变更后整体重算"""

    def __init__(self, store: AccountStore):
        self._calculated: List[CalculatedAccount] = calculate_portfolio(store.get())
        self._unsubscribe = store.subscribe(self._recompute)

    def _recompute(self, accounts: Accounts) -> None:
        self._calculated = calculate_portfolio(accounts)

    @property
    def calculated(self) -> List[CalculatedAccount]:
        return list(self._calculated)

    def find(self, account_id: Optional[str]) -> Optional[CalculatedAccount]:
        return next((acc for acc in self._calculated if acc.id == account_id), None)

    def close(self) -> None:
        """停止订阅"""
        self._unsubscribe()
