import streamlit as st
from typing import List
from src.common.types import Feature, FeatureType
from src.catalog import by_type, ordered_features, FEATURE_ORDER
from src.ui.state import get_catalog, get_settings, select_feature

SECTIONS = [
    ("Digits & Numbers", FeatureType.DIGIT),
    ("Letters & Ligatures", FeatureType.LETTER),
]


def render_feature_list(features: List[Feature], key_prefix: str):
    """One button per feature; clicking selects it for the detail view."""
    for feature in features:
        is_selected = st.session_state.get("selected_code") == feature.code
        st.sidebar.button(
            f"{feature.name}  ·  {feature.code}",
            key=f"{key_prefix}_{feature.code}",
            type="primary" if is_selected else "secondary",
            on_click=select_feature,
            args=(feature.code,),
            use_container_width=True
        )


def render_sidebar():
    """Renders the side panel and returns the selected App Mode."""
    settings = get_settings()
    store = get_catalog()

    # 1. Header
    st.sidebar.markdown("## OpenType Features")
    st.sidebar.markdown(f"[edit & contribute]({settings.contribute_url})")

    # 2. Navigation
    app_mode = st.sidebar.radio(
        "Navigate",
        ["🔤 Feature", "📚 All Groups"]
    )
    st.sidebar.divider()

    # 3. Feature sections
    features = ordered_features(store, FEATURE_ORDER)
    for title, feature_type in SECTIONS:
        st.sidebar.markdown(f"### {title}")
        render_feature_list(by_type(features, feature_type), key_prefix=feature_type.value)

    return app_mode
