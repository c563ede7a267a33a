import streamlit as st
from src.catalog import CatalogStore, build_default_catalog
from src.util.config import CatalogSettings


def init_session_state():
    """Initialize essential session variables."""
    if "selected_code" not in st.session_state:
        st.session_state.selected_code = None


@st.cache_resource
def get_settings() -> CatalogSettings:
    return CatalogSettings.from_env()


@st.cache_resource
def get_catalog() -> CatalogStore:
    # Built once per process and shared by every session
    return build_default_catalog(get_settings())


def select_feature(code: str):
    st.session_state.selected_code = code
