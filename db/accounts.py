"""
账户集合读写

整个账户集合以 JSON 数组形式存放在固定 key 下（无版本字段）。
纯数据访问，不含业务逻辑，不做 schema 校验。
"""
import json
import logging
from typing import Any, Dict, List

from config import STORAGE_KEY
from db.connection import get_connection

logger = logging.getLogger(__name__)


def load_all(key: str = STORAGE_KEY) -> List[Dict[str, Any]]:
    """读取账户 JSON 数组；key 不存在时返回空列表"""
    conn = get_connection()
    row = conn.execute(
        "SELECT value FROM kv_store WHERE key = ?", (key,)
    ).fetchone()
    conn.close()
    if not row:
        return []
    data = json.loads(row["value"])
    logger.debug("Loaded %d accounts from %s", len(data), key)
    return data


def save_all(accounts: List[Dict[str, Any]], key: str = STORAGE_KEY) -> None:
    """整体覆盖写入账户 JSON 数组"""
    payload = json.dumps(accounts, ensure_ascii=False, allow_nan=False)
    conn = get_connection()
    conn.execute(
        "INSERT INTO kv_store (key, value, updated_at) "
        "VALUES (?, ?, CURRENT_TIMESTAMP) "
        "ON CONFLICT(key) DO UPDATE SET "
        "value = excluded.value, updated_at = CURRENT_TIMESTAMP",
        (key, payload),
    )
    conn.commit()
    conn.close()
    logger.info("Persisted %d accounts under %s", len(accounts), key)


def clear(key: str = STORAGE_KEY) -> bool:
    """删除存储的账户集合"""
    conn = get_connection()
    cursor = conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
    conn.commit()
    deleted = cursor.rowcount > 0
    conn.close()
    return deleted
