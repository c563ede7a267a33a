import streamlit as st
from src.catalog import FEATURE_GROUPS, FEATURE_ORDER, grouped_view, ordered_features
from src.ui.components import render_feature_detail, render_grouped_catalog
from src.ui.sidebar import render_sidebar
from src.ui.state import get_catalog, init_session_state

st.set_page_config(layout="wide", page_title="OpenType Features")

init_session_state()
store = get_catalog()
app_mode = render_sidebar()

if app_mode == "📚 All Groups":
    render_grouped_catalog(grouped_view(FEATURE_GROUPS, ordered_features(store, FEATURE_ORDER)))
else:
    selected = store.get(st.session_state.selected_code)
    if selected is None:
        # Land on the first feature in display order
        first = ordered_features(store, FEATURE_ORDER)
        selected = first[0] if first else None
    if selected is None:
        st.info("The catalog is empty.")
    else:
        render_feature_detail(store, selected)
