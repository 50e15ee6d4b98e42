import streamlit as st

from frontend.constants import APP_SUBTITLE, APP_TITLE
from frontend.ui_components import render_export_button, render_search_box


def render_home_page(service):
    st.markdown(f"## 🧠 {APP_TITLE} Database")
    st.markdown(f"### {APP_SUBTITLE}")
    st.markdown(
        "Explore BBB-permeable molecules with AI-powered predictions and "
        "comprehensive molecular data."
    )

    if service.awaiting_first_sync:
        st.info("🔄 Loading molecules from the database...")

    render_search_box("home")
    render_export_button(service.client.export_url)

    st.divider()
    col1, col2, col3 = st.columns(3)
    with col1:
        st.markdown("#### 🗄️ Comprehensive Database")
        st.caption("Access detailed molecular information and therapeutic properties.")
    with col2:
        st.markdown("#### 🔍 Advanced Search")
        st.caption("Search by molecule name, SMILES notation, formula or unique identifiers.")
    with col3:
        st.markdown("#### ⚛️ Structure Visualization")
        st.caption("Molecular structures with detailed property analysis.")
