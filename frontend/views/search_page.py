import streamlit as st

from frontend.constants import SYNC_INTERVAL_SECONDS
from frontend.search import count_permeable, filter_molecules
from frontend.ui_components import render_export_button, render_molecule_card, render_search_box
from frontend.utils import records_to_dataframe


def render_search_page(service):
    render_search_box("search")

    # 只在片段内部重跑：后台同步替换了数据集后结果会刷新，但不会打断输入
    @st.fragment(run_every=max(int(SYNC_INTERVAL_SECONDS), 10))
    def _render_results():
        query = st.session_state.get('search_query', '')
        results = filter_molecules(query, service.store.current())

        col_title, col_export = st.columns([3, 1])
        with col_title:
            st.markdown("### Search Results")
            st.caption(f"{len(results)} molecules found · {count_permeable(results)} predicted BBB+")
        with col_export:
            render_export_button(service.client.export_url, label="📥 Export CSV")

        if not results:
            st.warning("No molecules found")
            st.caption("Try a different search term or browse all molecules.")
            return

        as_table = st.toggle("Table view", key="search_table_view")
        if as_table:
            st.dataframe(records_to_dataframe(results), use_container_width=True, hide_index=True)
            return

        for record in results:
            render_molecule_card(record, query=query)

    _render_results()
