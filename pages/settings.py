"""数据页面 — JSON 导入导出与数据库信息"""
import streamlit as st

from config import EXPORT_FILE_NAME, STORAGE_KEY
from db.connection import get_db_path
from services import PortfolioService
from services.portfolio import ImportFormatError, export_json, import_json
from ui import UI


def render():
    UI.inject_css()
    UI.header("数据管理", "Import / Export")

    store = st.session_state.store

    summary = PortfolioService.summary(store.get())
    c1, c2 = st.columns(2)
    with c1:
        UI.card("Accounts", str(summary["count"]))
    with c2:
        UI.card("Total ARR", summary["total_arr"])

    UI.sub_heading("导出")
    st.download_button(
        "Export JSON",
        data=export_json(store.get()),
        file_name=EXPORT_FILE_NAME,
        mime="application/json",
        use_container_width=True,
    )

    UI.sub_heading("导入")
    st.caption("导入会整体替换当前账户集合，不做合并。")
    uploaded = st.file_uploader("Import JSON", type=["json"], key="import_file")
    if uploaded is not None and st.button("确认导入", key="btn_import"):
        try:
            accounts = import_json(uploaded.getvalue().decode("utf-8"))
        except (ImportFormatError, UnicodeDecodeError) as exc:
            st.error(f"导入失败: {exc}")
        else:
            store.replace(accounts)
            st.session_state.ui_state = st.session_state.ui_state.after_import()
            st.success(f"已导入 {len(accounts)} 个账户")

    with UI.expander("数据库信息", key="db_info"):
        db_path = get_db_path()
        if db_path.exists():
            size_kb = db_path.stat().st_size / 1024
            st.info(f"数据库路径: `{db_path}`\n\n存储键: `{STORAGE_KEY}`\n\n大小: {size_kb:.1f} KB")
        else:
            st.warning("数据库文件不存在")
