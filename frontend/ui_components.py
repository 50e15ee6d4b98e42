import streamlit as st

from frontend.constants import (
    APP_TITLE,
    BRAINROUTE_PLATFORM_URL,
    PREDICTION_STYLE,
    PROPERTY_DISPLAY,
    SEARCH_PLACEHOLDER,
    STRUCTURE_SIZE_LARGE,
    STRUCTURE_SIZE_THUMBNAIL,
    UNKNOWN_PREDICTION_STYLE,
)
from frontend.url_state import (
    URLStateManager,
    VIEW_ABOUT,
    VIEW_CONTACT,
    VIEW_HOME,
    VIEW_MOLECULE,
    VIEW_SEARCH,
)
from frontend.utils import format_property, format_timestamp, smiles_to_image


def _go_to_search():
    URLStateManager.navigate(VIEW_SEARCH, query=st.session_state.get('search_query', ''))


def _on_search_input_change():
    # 输入框的 widget 状态在切换视图时会被 streamlit 清理，查询另存一份
    st.session_state.search_query = st.session_state.search_input
    _go_to_search()


def render_navigation(current_view):
    cols = st.columns([3, 1, 1, 1, 1])
    with cols[0]:
        st.markdown(f"#### 🧠 {APP_TITLE}")
    nav_items = [
        (cols[1], "🏠 Home", VIEW_HOME),
        (cols[2], "🔍 Search", VIEW_SEARCH),
        (cols[3], "ℹ️ About", VIEW_ABOUT),
        (cols[4], "✉️ Contact", VIEW_CONTACT),
    ]
    for col, label, view in nav_items:
        with col:
            st.button(
                label,
                key=f"nav_{view}",
                type="primary" if current_view == view else "secondary",
                use_container_width=True,
                on_click=URLStateManager.navigate,
                args=(view,),
                kwargs={'query': st.session_state.get('search_query', '')} if view == VIEW_SEARCH else {},
            )


def render_search_box(key_prefix: str):
    """Search input bound to the session query; submitting navigates to the results view."""
    if 'search_input' not in st.session_state:
        st.session_state.search_input = st.session_state.get('search_query', '')

    col_input, col_button = st.columns([5, 1])
    with col_input:
        st.text_input(
            "Search",
            key='search_input',
            placeholder=SEARCH_PLACEHOLDER,
            label_visibility="collapsed",
            on_change=_on_search_input_change,
        )
    with col_button:
        st.button("Search", key=f"{key_prefix}_search_button", type="primary",
                  use_container_width=True, on_click=_on_search_input_change)


def render_export_button(export_url: str, label: str = "📥 Download Full Database (CSV)"):
    st.link_button(label, export_url, use_container_width=True)


def render_data_status(service):
    """一行同步状态：记录数、上次成功同步时间、最近一次错误"""
    store = service.store
    scheduler = service.scheduler
    col_status, col_button = st.columns([5, 1])
    with col_status:
        status = f"🗄️ {len(store)} molecules · last sync: {format_timestamp(scheduler.last_success_at)}"
        if scheduler.in_flight:
            status += " · 🔄 syncing..."
        st.caption(status)
        if scheduler.last_error is not None:
            st.caption(f"⚠️ Refresh at {format_timestamp(scheduler.last_attempt_at)} failed, "
                       f"showing previous data: {scheduler.last_error}")
    with col_button:
        st.button("🔄 Refresh", key="refresh_data", use_container_width=True,
                  disabled=scheduler.in_flight, on_click=scheduler.refresh)


def render_prediction_badge(record, with_confidence: bool = False):
    prediction = record.prediction
    style = PREDICTION_STYLE.get(prediction, UNKNOWN_PREDICTION_STYLE) if isinstance(prediction, str) else UNKNOWN_PREDICTION_STYLE
    label = str(prediction) if prediction is not None else 'Unknown'
    if with_confidence:
        label = f"{label} • {format_property(record.confidence, digits=1)}% confidence"
    st.markdown(
        f"<span style='background-color:{style['background']};color:{style['color']};"
        f"padding:0.25rem 0.75rem;border-radius:999px;font-weight:600;'>"
        f"{style['icon']} {label}</span>",
        unsafe_allow_html=True,
    )


def render_structure(smiles: str, large: bool = True):
    size = STRUCTURE_SIZE_LARGE if large else STRUCTURE_SIZE_THUMBNAIL
    img = smiles_to_image(smiles, size=size)
    if img is None:
        st.error("❌ Structure Invalid")
        if large:
            st.caption("RDKit could not parse this SMILES string.")
        return
    st.image(img, use_container_width=not large)


def render_molecule_card(record, query: str = ''):
    with st.container(border=True):
        col_img, col_info, col_pred = st.columns([1, 3, 1])
        with col_img:
            render_structure(record.smiles, large=False)
        with col_info:
            st.markdown(f"**{record.name or 'Unnamed molecule'}**")
            st.caption(record.id)
            st.markdown(
                f"Formula: `{record.formula or '-'}` &nbsp;·&nbsp; "
                f"Weight: {format_property(record.weight, 'g/mol', 3)}"
            )
        with col_pred:
            render_prediction_badge(record)
            st.button(
                "View details",
                key=f"view_{record.id}",
                use_container_width=True,
                on_click=URLStateManager.navigate,
                args=(VIEW_MOLECULE,),
                kwargs={'query': query, 'molecule_id': record.id},
            )


def render_property_table(record):
    for attribute, label, unit, digits in PROPERTY_DISPLAY:
        col_label, col_value = st.columns([2, 1])
        with col_label:
            st.markdown(label)
        with col_value:
            st.markdown(f"**{format_property(getattr(record, attribute), unit, digits)}**")


def render_footer():
    st.divider()
    st.caption(
        f"© 2025 {APP_TITLE} | by BrainRoute team. All rights reserved. · "
        f"Integrated with [BrainRoute Platform]({BRAINROUTE_PLATFORM_URL})"
    )
