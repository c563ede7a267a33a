"""
Tests for src/catalog/data.py and build_default_catalog()

Tests cover:
- Shape of the shipped dataset
- Grouped view of the full catalog
- Startup checks: audit logging and strict mode
"""

import pytest
from unittest.mock import patch

from src.catalog import (
    FEATURE_GROUPS,
    FEATURE_ORDER,
    FEATURE_RECORDS,
    CatalogStore,
    DanglingReferenceError,
    GroupConfigurationError,
    build_default_catalog,
    by_type,
    find_dangling_references,
    grouped_view,
    ordered_features,
    resolve_related,
)
from src.common.types import Feature, FeatureType
from src.util.config import CatalogSettings


@pytest.fixture
def store():
    return build_default_catalog(CatalogSettings())


# ============================================
# Dataset Tests
# ============================================

class TestDataset:
    """Tests for the shipped records"""

    def test_records_are_features(self):
        for record in FEATURE_RECORDS:
            assert isinstance(record, Feature), f"{record!r} is not a Feature"
            assert isinstance(record.type, FeatureType), f"{record.code} has invalid type"

    def test_codes_unique(self):
        codes = [r.code for r in FEATURE_RECORDS]
        assert len(codes) == len(set(codes))

    def test_order_has_no_repeats(self):
        assert len(FEATURE_ORDER) == len(set(FEATURE_ORDER))

    def test_every_record_is_ordered(self):
        """Test that no authored feature is hidden from the display order"""
        for record in FEATURE_RECORDS:
            assert record.code in FEATURE_ORDER, f"{record.code} missing from FEATURE_ORDER"

    def test_expected_records(self, store):
        expected = ["tnum", "pnum", "onum", "lnum", "ordn", "frac", "zero",
                    "liga", "calt", "hlig", "dlig", "hist", "salt"]
        assert sorted(store.codes()) == sorted(expected)

    def test_defaults(self, store):
        defaults = sorted(f.code for f in store if f.default)
        assert defaults == ["calt", "liga"]

    def test_hlig_required_is_free_text(self, store):
        assert store.get("hlig").required == '"hist"'

    def test_every_feature_has_samples(self, store):
        for feature in store:
            assert feature.texts, f"{feature.code} has no sample texts"
            assert feature.fonts, f"{feature.code} has no fonts"

    def test_references_are_urls(self, store):
        for feature in store:
            for url in feature.references:
                assert url.startswith("https://"), f"{feature.code}: {url}"

    def test_descriptions_have_paragraphs(self, store):
        assert len(store.get("tnum").paragraphs()) == 2
        assert len(store.get("zero").paragraphs()) == 1


# ============================================
# Full Catalog Views
# ============================================

class TestCatalogViews:
    """Tests for views over the shipped catalog"""

    def test_display_order(self, store):
        codes = [f.code for f in ordered_features(store, FEATURE_ORDER)]
        assert codes == ["liga", "hlig", "dlig", "calt",
                         "onum", "lnum", "tnum", "pnum", "ordn", "frac", "zero",
                         "hist", "salt"]

    def test_grouped_view(self, store):
        result = grouped_view(FEATURE_GROUPS, ordered_features(store, FEATURE_ORDER))
        by_label = {group.label: [f.code for f in features] for group, features in result}
        assert by_label == {
            "Numbers": ["onum", "lnum", "tnum", "pnum", "ordn", "frac", "zero"],
            "Letters": ["hist", "salt"],
            "Ligatures": ["liga", "hlig", "dlig", "calt"],
            "Position": [],
        }

    def test_side_panel_sections(self, store):
        features = ordered_features(store, FEATURE_ORDER)
        assert [f.code for f in by_type(features, "letter")] == ["hist", "salt"]
        assert len(by_type(features, "digit")) == 7

    def test_onum_related(self, store):
        assert [f.code for f in resolve_related(store, store.get("onum"))] == ["lnum", "tnum", "pnum"]

    def test_salt_related_drops_unwritten(self, store):
        assert [f.code for f in resolve_related(store, store.get("salt"))] == ["hist"]

    def test_known_dangling_references(self, store):
        targets = {ref.target for ref in find_dangling_references(store, FEATURE_ORDER)}
        assert targets == {"subs", "sups", "cwsh", "swsh", "smcp", "cswh", "rand", "kern"}


# ============================================
# build_default_catalog Tests
# ============================================

class TestBuildDefaultCatalog:
    """Tests for startup checks"""

    def test_returns_store(self, store):
        assert isinstance(store, CatalogStore)
        assert len(store) == len(FEATURE_RECORDS)

    def test_dangling_logged_as_warning(self):
        with patch("src.catalog.logger") as mock_logger:
            build_default_catalog(CatalogSettings())
        assert mock_logger.warning.called
        assert not mock_logger.debug.called

    def test_quiet_audit_logs_debug(self):
        with patch("src.catalog.logger") as mock_logger:
            build_default_catalog(CatalogSettings(quiet_audit=True))
        assert mock_logger.debug.called
        assert not mock_logger.warning.called

    def test_strict_mode_raises(self):
        with pytest.raises(DanglingReferenceError) as exc_info:
            build_default_catalog(CatalogSettings(strict=True))
        assert len(exc_info.value.references) == 13

    def test_bad_groups_rejected(self):
        with pytest.raises(GroupConfigurationError):
            build_default_catalog(CatalogSettings(), groups=FEATURE_GROUPS[:2])

    def test_settings_from_env_by_default(self, monkeypatch):
        monkeypatch.setenv("CATALOG_STRICT", "1")
        with pytest.raises(DanglingReferenceError):
            build_default_catalog()
