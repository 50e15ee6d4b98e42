import atexit
import logging
from dataclasses import dataclass

import streamlit as st

from frontend.constants import API_URL, DEMO_MOLECULES, SYNC_INTERVAL_SECONDS, USE_DEMO_DATA
from frontend.molecule_client import MoleculeApiClient
from frontend.normalizer import normalize_batch
from frontend.store import MoleculeStore
from frontend.sync_scheduler import SyncScheduler

logger = logging.getLogger(__name__)


@dataclass
class MoleculeService:
    client: MoleculeApiClient
    store: MoleculeStore
    scheduler: SyncScheduler

    @property
    def awaiting_first_sync(self) -> bool:
        """首次同步尚未完成且没有可显示的数据"""
        return self.scheduler.in_flight and len(self.store) == 0


def create_molecule_service(base_url: str = API_URL, interval_seconds: float = SYNC_INTERVAL_SECONDS,
                            use_demo_data: bool = USE_DEMO_DATA) -> MoleculeService:
    """Wire client, store and scheduler together and start syncing."""
    client = MoleculeApiClient(base_url)
    initial = normalize_batch(DEMO_MOLECULES) if use_demo_data else ()
    store = MoleculeStore(initial)
    scheduler = SyncScheduler(client, store, interval_seconds=interval_seconds)
    dispose = scheduler.start()
    atexit.register(dispose)
    return MoleculeService(client=client, store=store, scheduler=scheduler)


@st.cache_resource(show_spinner=False)
def get_molecule_service() -> MoleculeService:
    """One store and one scheduler per server process, shared by every session."""
    logger.info("Creating molecule service against %s", API_URL)
    return create_molecule_service()


def initialize_session_state():
    """Initializes all the necessary session state variables."""
    # 搜索框内容只属于当前会话，后台同步永远不会改写它
    if 'search_query' not in st.session_state: st.session_state.search_query = ''

    # URL state management
    if 'url_state_initialized' not in st.session_state: st.session_state.url_state_initialized = False

    # 从URL参数恢复状态（只在首次初始化时执行）
    if not st.session_state.url_state_initialized:
        try:
            from frontend.url_state import URLStateManager
            URLStateManager.restore_state_from_url()
        except Exception as e:
            st.error(f"Failed to restore state from URL: {e}")
        st.session_state.url_state_initialized = True
