"""
账户数据模型

Account 是唯一持久化的实体；PortfolioStats / CalculatedAccount 均为派生值，
随账户集合变化整体重算，从不单独存储。

字段约定：
- Python 属性 snake_case，JSON 字段 camelCase（见 config.ACCOUNT_FIELDS）
- 数值保留载入时的类型（int / float），保证导出与导入逐字一致
- created_at 为 epoch 毫秒
"""
from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, replace
from typing import Any, Dict

from config import Category

# JSON 字段 ↔ 属性名
_JSON_TO_ATTR: Dict[str, str] = {
    "id": "id",
    "name": "name",
    "arr": "arr",
    "loginsPerMonth": "logins_per_month",
    "sessionDuration": "session_duration",
    "notes": "notes",
    "expansionProbability": "expansion_probability",
    "stakeholderProbability": "stakeholder_probability",
    "createdAt": "created_at",
}


@dataclass(frozen=True)
class Account:
    """
    业务账户（创建后不可变，编辑即生成新实例）

    - arr:                     年度经常性收入，>= 0
    - logins_per_month:        月登录次数，>= 0
    - session_duration:        平均会话时长（小时），>= 0
    - expansion_probability:   扩张概率 0-100
    - stakeholder_probability: 关键干系人概率 0-100
    """
    id: str
    name: str
    arr: float
    logins_per_month: int
    session_duration: float
    notes: str
    expansion_probability: float
    stakeholder_probability: float
    created_at: int

    @property
    def engagement(self) -> float:
        """活跃度 = 月登录次数 × 会话时长"""
        return self.logins_per_month * self.session_duration

    def to_dict(self) -> Dict[str, Any]:
        """导出为 camelCase JSON 对象（字段顺序固定）"""
        return {key: getattr(self, attr) for key, attr in _JSON_TO_ATTR.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Account":
        """从 camelCase JSON 对象构建；缺字段抛 KeyError，多余字段忽略"""
        return cls(**{attr: data[key] for key, attr in _JSON_TO_ATTR.items()})

    def with_changes(self, **changes: Any) -> "Account":
        """编辑：返回新实例，id 与 created_at 不可改"""
        if "id" in changes or "created_at" in changes:
            raise ValueError("id / created_at 不可编辑")
        return replace(self, **changes)


def new_account(
    name: str,
    arr: float,
    logins_per_month: int,
    session_duration: float,
    *,
    notes: str = "",
    expansion_probability: float = 50,
    stakeholder_probability: float = 50,
) -> Account:
    """新建账户：自动分配 UUID 与创建时间"""
    return Account(
        id=str(uuid.uuid4()),
        name=name,
        arr=arr,
        logins_per_month=logins_per_month,
        session_duration=session_duration,
        notes=notes,
        expansion_probability=expansion_probability,
        stakeholder_probability=stakeholder_probability,
        created_at=int(time.time() * 1000),
    )


@dataclass(frozen=True)
class PortfolioStats:
    """组合级最大值，用于归一化"""
    arr_max: float = 0
    engagement_max: float = 0


@dataclass(frozen=True)
class CalculatedAccount:
    """账户 + 派生评分（纯派生，不落库）"""
    account: Account
    engagement: float
    engagement_score: float
    expansion_score: float
    stakeholder_score: float
    volume_score: float
    potential_score: float
    category: Category

    @property
    def id(self) -> str:
        return self.account.id

    @property
    def name(self) -> str:
        return self.account.name

    @property
    def arr(self) -> float:
        return self.account.arr

    def to_dict(self) -> Dict[str, Any]:
        """账户字段 + 派生字段（category 取显示值）"""
        data = self.account.to_dict()
        data.update({
            "engagement": self.engagement,
            "engagementScore": self.engagement_score,
            "expansionScore": self.expansion_score,
            "stakeholderScore": self.stakeholder_score,
            "volumeScore": self.volume_score,
            "potentialScore": self.potential_score,
            "category": self.category.value,
        })
        return data
