"""
导入导出 + 表单解析 — 评分引擎的输入边界

评分引擎本身不做任何校验；所有外部输入（JSON 文件、表单字符串）
必须先经过本模块，不合法直接拒绝，不进入评分计算。
"""
from __future__ import annotations

import json
import logging
import math
import numbers
from typing import Any, Iterable, List, Optional

from config import ACCOUNT_FIELDS
from config.constants import PROBABILITY_MAX, PROBABILITY_MIN

from .models import Account, new_account

logger = logging.getLogger(__name__)

_NON_NEGATIVE_FIELDS = ("arr", "loginsPerMonth", "sessionDuration")
_PROBABILITY_FIELDS = ("expansionProbability", "stakeholderProbability")
_STRING_FIELDS = ("id", "name", "notes")


class ImportFormatError(ValueError):
    """导入文件格式不合法（整体拒绝，不做部分导入）"""


def _is_number(value: Any) -> bool:
    # bool 是 int 的子类，需要排除；NaN / Infinity 不算数值
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return isinstance(value, numbers.Integral) or math.isfinite(value)


def validate_account_dict(item: Any, index: int = 0) -> None:
    """
    校验单个账户 JSON 对象

    Raises:
        ImportFormatError: 非对象 / 缺字段 / 类型错误 / 数值越界
    """
    if not isinstance(item, dict):
        raise ImportFormatError(f"第 {index} 项不是对象: {item!r}")

    missing = [key for key in ACCOUNT_FIELDS if key not in item]
    if missing:
        raise ImportFormatError(f"第 {index} 项缺少字段: {', '.join(missing)}")

    for key in _STRING_FIELDS:
        if not isinstance(item[key], str):
            raise ImportFormatError(f"第 {index} 项字段 {key} 必须是字符串")

    for key in _NON_NEGATIVE_FIELDS + _PROBABILITY_FIELDS + ("createdAt",):
        if not _is_number(item[key]):
            raise ImportFormatError(f"第 {index} 项字段 {key} 必须是数值")

    if not isinstance(item["loginsPerMonth"], numbers.Integral):
        raise ImportFormatError(f"第 {index} 项字段 loginsPerMonth 必须是整数: {item['loginsPerMonth']}")

    for key in _NON_NEGATIVE_FIELDS:
        if item[key] < 0:
            raise ImportFormatError(f"第 {index} 项字段 {key} 不能为负: {item[key]}")

    for key in _PROBABILITY_FIELDS:
        if not PROBABILITY_MIN <= item[key] <= PROBABILITY_MAX:
            raise ImportFormatError(
                f"第 {index} 项字段 {key} 超出 [{PROBABILITY_MIN}, {PROBABILITY_MAX}]: {item[key]}")


def accounts_from_json_data(data: Any) -> List[Account]:
    """已解析的 JSON 值 → Account 列表（顶层必须是数组）"""
    if not isinstance(data, list):
        raise ImportFormatError("格式错误：顶层必须是账户数组")
    for index, item in enumerate(data):
        validate_account_dict(item, index)
    return [Account.from_dict(item) for item in data]


def import_json(text: str) -> List[Account]:
    """
    解析导入文件

    Returns:
        账户列表（保持文件顺序）；调用方用它整体替换当前集合

    Raises:
        ImportFormatError: JSON 无法解析或结构不合法
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ImportFormatError(f"JSON 解析失败: {exc}") from exc
    accounts = accounts_from_json_data(data)
    logger.info("Imported %d accounts", len(accounts))
    return accounts


def export_json(accounts: Iterable[Account]) -> str:
    """导出为 2 空格缩进的 JSON 数组，格式与导入一致"""
    payload = [acc.to_dict() for acc in accounts]
    logger.info("Exported %d accounts", len(payload))
    return json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False)


# ═══════════════════════════════════════════════════════
#  表单解析
# ═══════════════════════════════════════════════════════

def parse_form(
    name: str,
    arr: str,
    logins: str,
    duration: str,
    notes: str = "",
    expansion: float = 50,
    stakeholder: float = 50,
    *,
    editing: Optional[Account] = None,
) -> Account:
    """
    表单原始字符串 → Account

    - name / arr / logins / duration 必填
    - arr、duration 按浮点解析，logins 按整数解析
    - editing 不为空时保留其 id 与 created_at

    Raises:
        ValueError: 必填项为空、无法解析或数值越界
    """
    if not name.strip() or not arr.strip() or not logins.strip() or not duration.strip():
        raise ValueError("名称 / ARR / 月登录 / 会话时长均为必填")

    try:
        arr_value = float(arr)
        logins_value = int(logins)
        duration_value = float(duration)
    except ValueError as exc:
        raise ValueError(f"数值格式错误: {exc}") from exc

    if not math.isfinite(arr_value) or not math.isfinite(duration_value):
        raise ValueError("ARR / 会话时长必须是有限数值")

    if arr_value < 0 or logins_value < 0 or duration_value < 0:
        raise ValueError("ARR / 月登录 / 会话时长不能为负")
    for value in (expansion, stakeholder):
        if not PROBABILITY_MIN <= value <= PROBABILITY_MAX:
            raise ValueError(f"概率必须在 [{PROBABILITY_MIN}, {PROBABILITY_MAX}] 之间: {value}")

    fields = dict(
        name=name,
        arr=arr_value,
        logins_per_month=logins_value,
        session_duration=duration_value,
        notes=notes,
        expansion_probability=expansion,
        stakeholder_probability=stakeholder,
    )
    if editing is not None:
        return editing.with_changes(**fields)
    return new_account(**fields)


def slider_seed(probability: float) -> int:
    """概率 → 整数滑块初始值"""
    return int(round(probability))


def resolve_probability(submitted: float, original: Optional[float] = None) -> float:
    """
    整数滑块回填

    编辑时滑块未被拖动（仍等于 slider_seed(original)），保留原始概率，
    避免导入的小数概率（如 55.5）被静默截断。
    """
    if original is not None and submitted == slider_seed(original):
        return original
    return submitted
