import html
import streamlit as st
from typing import List, Tuple
from src.common.types import Feature, FeatureGroup
from src.catalog import CatalogStore, resolve_family, resolve_related
from src.ui.state import select_feature


def preview_html(feature: Feature, text: str, font: str, enabled: bool = True) -> str:
    """
    Inline HTML rendering `text` in `font` with the feature switched on or off.
    Both the style attribute and the sample text are HTML-escaped.
    """
    style = (
        f"font-family: '{font}'; "
        f"font-feature-settings: {feature.css_feature_settings(enabled)}; "
        "font-size: 2rem;"
    )
    return f'<span style="{html.escape(style)}">{html.escape(text)}</span>'


def render_feature_detail(store: CatalogStore, feature: Feature):
    """
    Render a full feature page.

    Args:
        store: Catalog used to follow related and family references
        feature: The feature to display
    """
    if not feature:
        st.error("Feature not found")
        return

    # 1. Title
    st.title(feature.name)
    st.caption(f"`{feature.code}`" + ("  ·  on by default" if feature.default else ""))

    family = resolve_family(store, feature)
    if family:
        st.button(
            f"Part of {feature.family_name or family.name}",
            key=f"family_{feature.code}",
            on_click=select_feature,
            args=(family.code,)
        )
    elif feature.family_name:
        st.caption(f"Part of {feature.family_name}")

    if feature.required:
        st.info(f"Requires {feature.required}")

    # 2. Description
    # Descriptions continue the feature name ("Tabular Figures displays ...")
    for idx, paragraph in enumerate(feature.paragraphs()):
        st.write(f"**{feature.name}** {paragraph}" if idx == 0 else paragraph)

    # 3. Previews
    st.subheader("Preview")
    for font in feature.fonts:
        st.caption(font)
        col_off, col_on = st.columns(2)
        for text in feature.texts:
            with col_off:
                st.markdown(preview_html(feature, text, font, enabled=False), unsafe_allow_html=True)
            with col_on:
                st.markdown(preview_html(feature, text, font, enabled=True), unsafe_allow_html=True)

    # 4. See also
    related = resolve_related(store, feature)
    if related:
        st.subheader("See also")
        cols = st.columns(len(related))
        for idx, other in enumerate(related):
            with cols[idx]:
                st.button(
                    other.name,
                    key=f"related_{feature.code}_{other.code}",
                    on_click=select_feature,
                    args=(other.code,),
                    use_container_width=True
                )

    # 5. References
    if feature.references:
        st.subheader("References")
        st.markdown("\n".join(f"- {url}" for url in feature.references))


def render_grouped_catalog(grouped: List[Tuple[FeatureGroup, List[Feature]]]):
    """Render every group with its features; empty groups are skipped."""
    for group, features in grouped:
        if not features:
            continue
        st.header(group.label)
        for feature in features:
            st.button(
                f"{feature.name}  ·  {feature.code}",
                key=f"group_{group.type.value}_{feature.code}",
                on_click=select_feature,
                args=(feature.code,)
            )
