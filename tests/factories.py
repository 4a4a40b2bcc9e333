"""测试数据构造。"""
from __future__ import annotations

from typing import List

from services.portfolio import Account


def make_account(
    account_id: str,
    name: str = "",
    arr: float = 0,
    logins: int = 0,
    duration: float = 0,
    expansion: float = 0,
    stakeholder: float = 0,
    notes: str = "",
    created_at: int = 1700000000000,
) -> Account:
    """构造测试账户"""
    return Account(
        id=account_id,
        name=name or account_id,
        arr=arr,
        logins_per_month=logins,
        session_duration=duration,
        notes=notes,
        expansion_probability=expansion,
        stakeholder_probability=stakeholder,
        created_at=created_at,
    )


def scenario_accounts() -> List[Account]:
    """
    示例场景：
      A(arr=100, logins=10, duration=2, expansion=80, stakeholder=60)
      B(arr=50,  logins=5,  duration=1, expansion=20, stakeholder=10)
    """
    return [
        make_account("a", "Acme", arr=100, logins=10, duration=2, expansion=80, stakeholder=60),
        make_account("b", "Beta", arr=50, logins=5, duration=1, expansion=20, stakeholder=10),
    ]
