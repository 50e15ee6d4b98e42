import streamlit as st
import sys
import os
import logging

# Add the project root to the Python path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

# config 负责加载 .env 文件
import config

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

from frontend.state import get_molecule_service, initialize_session_state
from frontend.ui_components import render_data_status, render_footer, render_navigation
from frontend.url_state import URLStateManager, VIEW_ABOUT, VIEW_CONTACT, VIEW_MOLECULE, VIEW_SEARCH
from frontend.views.about_page import render_about_page, render_contact_page
from frontend.views.home_page import render_home_page
from frontend.views.molecule_page import render_molecule_page
from frontend.views.search_page import render_search_page

st.set_page_config(layout="wide", page_title="BrainRoute-DB", page_icon="🧠")

initialize_session_state()

st.markdown("""
<style>
    .stApp {
        background-color: #FFFFFF;
        font-family: 'Segoe UI', 'Roboto', sans-serif;
    }
    div.block-container {
        padding-top: 2rem;
        padding-bottom: 2rem;
        max-width: 1200px;
    }
    h2, h3, h4 {
        color: #333333;
    }
    .stButton>button {
        border-radius: 8px;
        font-weight: 500;
    }
    .stButton>button[kind="primary"] {
        background-color: #2563eb;
        color: white;
        border: none;
    }
    .stButton>button[kind="primary"]:hover {
        background-color: #1d4ed8;
    }
    .stAlert {
        border-radius: 8px;
    }
</style>
""", unsafe_allow_html=True)

service = get_molecule_service()
route = URLStateManager.current_route()

render_navigation(route.view)
render_data_status(service)
st.divider()

if route.view == VIEW_SEARCH:
    render_search_page(service)
elif route.view == VIEW_MOLECULE:
    render_molecule_page(service, route)
elif route.view == VIEW_ABOUT:
    render_about_page()
elif route.view == VIEW_CONTACT:
    render_contact_page()
else:
    render_home_page(service)

render_footer()
