"""
数据库访问层 — 统一导出

使用方式：
    from db import connection, accounts

    # 或者
    import db
    db.accounts.load_all()
"""
from db import connection
from db import accounts

__all__ = [
    "connection",
    "accounts",
]
