import streamlit as st

from frontend.constants import SYNC_REQUEST_TIMEOUT
from frontend.search import resolve_molecule
from frontend.ui_components import render_prediction_badge, render_property_table, render_structure
from frontend.url_state import URLStateManager, VIEW_SEARCH


def render_molecule_page(service, route):
    molecule = resolve_molecule(route.molecule_id, service.store.current())

    if molecule is None and service.awaiting_first_sync:
        # 深链接可能早于首次同步打开：等同步结束再判断是否存在
        with st.spinner("🔄 Loading molecules from the database..."):
            service.scheduler.wait(SYNC_REQUEST_TIMEOUT)
        st.rerun()

    if molecule is None:
        # 过期的书签或数据集已被同步替换，属于正常情况
        st.warning(f"Molecule not found: `{route.molecule_id}`")
        st.caption("The link may be outdated, or the dataset was refreshed since it was shared.")
        st.button("← Go back to search", key="not_found_back", on_click=URLStateManager.navigate,
                  args=(VIEW_SEARCH,), kwargs={'query': route.query})
        return

    st.button("← Back to results", key="detail_back", on_click=URLStateManager.navigate,
              args=(VIEW_SEARCH,), kwargs={'query': route.query})

    st.markdown(f"## {molecule.name or 'Unnamed molecule'}")
    st.caption(molecule.id)
    render_prediction_badge(molecule, with_confidence=True)

    st.divider()
    col_structure, col_properties = st.columns([1, 1])
    with col_structure:
        st.markdown("### 2D Structure")
        render_structure(molecule.smiles, large=True)
        st.markdown("**SMILES Notation**")
        st.code(molecule.smiles or '-', language=None)
        if molecule.formula:
            st.markdown(f"**Formula:** `{molecule.formula}`")
    with col_properties:
        st.markdown("### Molecular Properties")
        render_property_table(molecule)
