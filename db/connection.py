"""
数据库连接管理 + Schema 初始化

唯一的数据库连接入口。启用 WAL 模式支持多标签页并发访问。
"""
import logging
import os
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

# 数据库路径（默认 prod + shadow）
DEFAULT_DB_PATH = Path(__file__).parent.parent / "data" / "portfolio.db"
SHADOW_DB_PATH = Path(__file__).parent.parent / "data" / "portfolio_test.db"


def get_db_path() -> Path:
    """获取数据库路径（支持 prod/shadow 与自定义路径）。"""
    env_path = os.getenv("PORTFOLIO_DB_PATH")
    if env_path:
        return Path(env_path)
    role = os.getenv("PORTFOLIO_DB_ROLE", "prod").lower()
    return SHADOW_DB_PATH if role == "shadow" else DEFAULT_DB_PATH


# ═══════════════════════════════════════════════════════
#  Schema — 键值表：一个固定 key 存整个账户 JSON 数组
# ═══════════════════════════════════════════════════════

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key         TEXT PRIMARY KEY,
    value       TEXT NOT NULL,
    updated_at  TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


def get_connection() -> sqlite3.Connection:
    """
    获取数据库连接（单次使用）

    启用：
    - WAL 模式：支持并发读 + 单写
    - Row factory：查询结果可按列名访问

    注意：此函数返回的连接不缓存，每次调用创建新连接。
    """
    db_path = get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def init_database():
    """
    初始化数据库 Schema

    幂等操作：所有 CREATE 语句带 IF NOT EXISTS，重复调用安全。
    应在 app.py 启动时调用一次。
    """
    conn = get_connection()
    conn.executescript(_SCHEMA)
    conn.close()
    logger.info("Database initialized at %s", get_db_path())
