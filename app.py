#!/usr/bin/env python3
"""
Account Management - Streamlit Dashboard

启动：streamlit run app.py
"""
import logging

import streamlit as st

from config import PAGE_CONFIG
from db.connection import init_database
from pages import page_matrix, page_settings
from services import PortfolioService
from services.portfolio import PortfolioView, SelectionState

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

# 页面配置
st.set_page_config(**PAGE_CONFIG)

# 初始化数据库
init_database()


def _init_session():
    """每个会话装载一次 Store + 派生视图 + UI 状态"""
    if "store" not in st.session_state:
        store = PortfolioService.load_store()
        st.session_state.store = store
        st.session_state.view = PortfolioView(store)
        st.session_state.ui_state = SelectionState()
        logger.info("Session initialized")


def main():
    """主应用"""
    _init_session()

    st.sidebar.title("🧭 Account Management")

    # st.navigation 接管路由，pages/ 目录不再被自动识别为多页
    nav = st.navigation([
        st.Page(page_matrix, title="Portfolio Matrix", icon="📊", url_path="matrix", default=True),
        st.Page(page_settings, title="数据管理", icon="⚙️", url_path="data"),
    ])
    nav.run()


if __name__ == "__main__":
    main()
