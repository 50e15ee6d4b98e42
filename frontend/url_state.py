import streamlit as st
from dataclasses import dataclass
from typing import Dict, Optional, Any

VIEW_HOME = 'home'
VIEW_SEARCH = 'search'
VIEW_MOLECULE = 'molecule'
VIEW_ABOUT = 'about'
VIEW_CONTACT = 'contact'
KNOWN_VIEWS = (VIEW_HOME, VIEW_SEARCH, VIEW_MOLECULE, VIEW_ABOUT, VIEW_CONTACT)


@dataclass(frozen=True)
class Route:
    view: str = VIEW_HOME
    query: str = ''
    molecule_id: Optional[str] = None


def _first(value: Any) -> Optional[str]:
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    return str(value)


class URLStateManager:
    """
    URL状态管理器 - 把当前视图保存在查询参数中，支持刷新和分享链接
    home: ``?``, search: ``?view=search&q=...``, detail: ``?view=molecule&id=...``
    """

    @staticmethod
    def get_query_params() -> Dict[str, Any]:
        """获取当前URL中的查询参数"""
        query_params = st.query_params
        return dict(query_params)

    @staticmethod
    def set_query_params(**params):
        """设置URL查询参数"""
        for key, value in params.items():
            if value is not None and value != '':
                st.query_params[key] = str(value)
            elif key in st.query_params:
                del st.query_params[key]

    @staticmethod
    def clear_url_params():
        """清除所有URL参数"""
        for key in list(st.query_params.keys()):
            del st.query_params[key]

    @staticmethod
    def parse_route(params: Dict[str, Any]) -> Route:
        """Turn query parameters into a :class:`Route`. Unknown views fall back to home."""
        view = (_first(params.get('view')) or VIEW_HOME).strip().lower()
        if view not in KNOWN_VIEWS:
            view = VIEW_HOME

        if view == VIEW_MOLECULE:
            molecule_id = _first(params.get('id'))
            if not molecule_id:
                return Route(view=VIEW_SEARCH, query=_first(params.get('q')) or '')
            return Route(view=VIEW_MOLECULE, query=_first(params.get('q')) or '', molecule_id=molecule_id)

        if view == VIEW_SEARCH:
            return Route(view=VIEW_SEARCH, query=_first(params.get('q')) or '')

        return Route(view=view)

    @staticmethod
    def route_to_params(route: Route) -> Dict[str, str]:
        if route.view == VIEW_HOME:
            return {}
        params = {'view': route.view}
        if route.view in (VIEW_SEARCH, VIEW_MOLECULE) and route.query:
            params['q'] = route.query
        if route.view == VIEW_MOLECULE and route.molecule_id:
            params['id'] = route.molecule_id
        return params

    @staticmethod
    def current_route() -> Route:
        return URLStateManager.parse_route(URLStateManager.get_query_params())

    @staticmethod
    def navigate(view: str, query: str = '', molecule_id: Optional[str] = None):
        """跳转到指定视图（可作为按钮的 on_click 回调）"""
        route = Route(view=view, query=query or '', molecule_id=molecule_id)
        URLStateManager.clear_url_params()
        URLStateManager.set_query_params(**URLStateManager.route_to_params(route))

    @staticmethod
    def restore_state_from_url():
        """从URL参数恢复搜索框内容（只在会话中还没有查询时执行）"""
        route = URLStateManager.current_route()
        if route.query and not st.session_state.get('search_query'):
            st.session_state.search_query = route.query
            return True
        return False

