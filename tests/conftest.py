"""测试夹具：临时数据库 + 示例账户。"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import os
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# 测试环境固定使用 shadow DB（具体用例再指向临时文件）
os.environ.setdefault("PORTFOLIO_DB_ROLE", "shadow")

import db
from db.connection import init_database
from services.portfolio import Account
from tests.factories import scenario_accounts


@pytest.fixture
def accounts() -> List[Account]:
    return scenario_accounts()


@pytest.fixture(scope="function")
def empty_db(tmp_path, monkeypatch) -> Iterable[Path]:
    """临时空库。"""
    db_path = tmp_path / "portfolio.db"
    monkeypatch.setenv("PORTFOLIO_DB_PATH", str(db_path))
    init_database()
    yield db_path


@pytest.fixture(scope="function")
def seeded_db(empty_db) -> Iterable[Path]:
    """临时库 + 示例场景两个账户。"""
    db.accounts.save_all([acc.to_dict() for acc in scenario_accounts()])
    yield empty_db
