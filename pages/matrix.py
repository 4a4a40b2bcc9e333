"""组合矩阵页面 — 表单 / 矩阵 / 详情 / 明细表"""
import streamlit as st

from config import DEFAULT_PROBABILITY
from services import PortfolioService
from services.portfolio import category_color, parse_form, resolve_probability, slider_seed
from ui import UI, format_currency, matrix_figure, render_chart


def render():
    UI.inject_css()
    UI.header("COMPANY INC. Account Management", "Volume × Potential Portfolio Matrix")

    store = st.session_state.store
    view = st.session_state.view

    col_form, col_matrix, col_detail = st.columns([3, 6, 3])

    # 1. 左栏：表单 + 概览
    with col_form:
        _account_form(store)
        summary = PortfolioService.summary(store.get())
        UI.metric_row([
            ("Total Accounts", str(summary["count"])),
            ("Total ARR", format_currency(summary["total_arr"])),
        ])
        breakdown = PortfolioService.category_breakdown(view.calculated)
        UI.detail_rows([(cat.value, str(count)) for cat, count in breakdown.items()])

    # 2. 中栏：矩阵
    with col_matrix:
        state = st.session_state.ui_state
        if st.toggle("Labels", value=state.show_labels, key="labels_toggle") != state.show_labels:
            st.session_state.ui_state = state.toggle_labels()
        _matrix(view)

    # 3. 右栏：选中账户详情
    with col_detail:
        _account_details(store, view)

    # 4. 明细表
    UI.sub_heading("Inventory")
    df = PortfolioService.inventory_frame(view.calculated)
    if df.empty:
        UI.empty("No accounts in portfolio. Use the form to add your first account.")
    else:
        display = df.drop(columns=["id"]).rename(columns={
            "name": "Name", "arr": "ARR", "volume_score": "Volume Score",
            "potential_score": "Potential Score", "category": "Category",
        })
        display["ARR"] = display["ARR"].map(format_currency)
        event = UI.table(display, max_height=500, key="inventory",
                         on_select="rerun", selection_mode="single-row")
        rows = list(event.selection.rows) if event else []
        if rows and rows != st.session_state.get("inventory_last_rows"):
            st.session_state.inventory_last_rows = rows
            st.session_state.ui_state = st.session_state.ui_state.select(df.iloc[rows[0]]["id"])
            st.rerun()


def _account_form(store):
    """新建 / 编辑账户表单"""
    state = st.session_state.ui_state
    editing = store.find(state.editing_id)
    title = "Edit Account" if editing else "New Account"
    suffix = editing.id if editing else "new"

    with st.form(f"account_form_{suffix}", clear_on_submit=editing is None):
        st.markdown(f"**{title}**")
        name = st.text_input("Account Name", value=editing.name if editing else "")
        c1, c2 = st.columns(2)
        arr = c1.text_input("ARR (€)", value=str(editing.arr) if editing else "")
        logins = c2.text_input(
            "Logins / Month", value=str(editing.logins_per_month) if editing else "")
        duration = st.text_input(
            "Session Duration (h)", value=str(editing.session_duration) if editing else "")
        expansion = st.slider(
            "Expansion Probability", 0, 100,
            value=slider_seed(editing.expansion_probability) if editing else DEFAULT_PROBABILITY)
        stakeholder = st.slider(
            "Stakeholder Probability", 0, 100,
            value=slider_seed(editing.stakeholder_probability) if editing else DEFAULT_PROBABILITY)
        notes = st.text_area("Notes", value=editing.notes if editing else "")
        submitted = st.form_submit_button(
            "Update Account" if editing else "Add Account", use_container_width=True)

    if editing and st.button("Cancel", key="cancel_edit"):
        st.session_state.ui_state = state.cancel_edit()
        st.rerun()

    if submitted:
        if editing:
            expansion = resolve_probability(expansion, editing.expansion_probability)
            stakeholder = resolve_probability(stakeholder, editing.stakeholder_probability)
        try:
            account = parse_form(name, arr, logins, duration, notes,
                                 expansion, stakeholder, editing=editing)
        except ValueError as exc:
            st.warning(str(exc))
            return
        store.upsert(account)
        if editing:
            st.session_state.ui_state = state.cancel_edit()
        st.rerun()


def _matrix(view):
    """矩阵图：点击点切换选中，点击空白取消选中"""
    state = st.session_state.ui_state
    points_before = st.session_state.get("matrix_last_points", [])
    geometry = PortfolioService.matrix_geometry(view.calculated, state.selected_id)
    fig = matrix_figure(geometry, show_labels=state.show_labels)
    event = render_chart(fig, fixed_size=True, key="matrix",
                         on_select="rerun", selection_mode="points")

    clicked = [p["point_index"] for p in event.selection.points] if event else []
    if clicked == points_before:
        return
    st.session_state.matrix_last_points = clicked
    if clicked:
        account_id = geometry["points"][clicked[0]]["id"]
        st.session_state.ui_state = state.select_point(account_id)
    else:
        st.session_state.ui_state = state.clear_selection()
    st.rerun()


def _account_details(store, view):
    """选中账户详情 + 编辑 / 删除"""
    state = st.session_state.ui_state
    acc = view.find(state.selected_id)
    if acc is None:
        UI.empty("Select an account on the matrix to view details")
        return

    st.markdown(f"#### {acc.name}")
    UI.badge(acc.category.value, category_color(acc.category))
    UI.detail_rows([
        ("ARR", format_currency(acc.arr)),
        ("Logins / Month", str(acc.account.logins_per_month)),
        ("Session Duration", f"{acc.account.session_duration:g} h"),
        ("Engagement Score", f"{acc.engagement_score:.1f} / 30"),
        ("Expansion Score", f"{acc.expansion_score:.1f} / 40"),
        ("Stakeholder Score", f"{acc.stakeholder_score:.1f} / 30"),
        ("Volume Score", f"{acc.volume_score:.1f}"),
        ("Potential Score", f"{acc.potential_score:.1f}"),
    ])
    if acc.account.notes:
        st.caption(acc.account.notes)

    c1, c2 = st.columns(2)
    if c1.button("Edit", key=f"edit_{acc.id}", use_container_width=True):
        st.session_state.ui_state = state.start_edit(acc.id)
        st.rerun()
    if c2.button("Delete", key=f"delete_{acc.id}", use_container_width=True):
        store.delete(acc.id)
        st.session_state.ui_state = state.after_delete(acc.id)
        st.rerun()
