"""
Typographic feature catalog.

Key components:
- CatalogStore: immutable registry of Feature records, validated at construction
- Views: ordered_features(), by_type(), grouped_view(), resolve_related(), resolve_family()
- Groups: default_groups(), validate_groups()
- Audit: find_dangling_references()
- build_default_catalog(): builds the shipped dataset once at startup
"""

from typing import Optional, Sequence

from src.common.types import FeatureGroup
from src.util.config import CatalogSettings
from src.util.logger import logger

from .audit import DanglingReference, find_dangling_references
from .data import FEATURE_GROUPS, FEATURE_ORDER, FEATURE_RECORDS
from .errors import (
    CatalogIntegrityError,
    DanglingReferenceError,
    DuplicateFeatureCodeError,
    GroupConfigurationError,
    InvalidFeatureCodeError,
    InvalidFeatureTypeError,
)
from .groups import default_groups, validate_groups
from .store import CatalogStore
from .views import by_type, grouped_view, ordered_features, resolve_family, resolve_related


def build_default_catalog(
        settings: Optional[CatalogSettings] = None,
        groups: Sequence[FeatureGroup] = FEATURE_GROUPS,
) -> CatalogStore:
    """
    Build the store from the shipped dataset and run startup checks.

    Integrity defects (duplicate codes, bad types, group mismatch) always
    raise. Dangling references are logged, and raise only in strict mode.
    """
    if settings is None:
        settings = CatalogSettings.from_env()

    store = CatalogStore.initialize(FEATURE_RECORDS)
    validate_groups(groups)

    dangling = find_dangling_references(store, FEATURE_ORDER)
    for ref in dangling:
        if settings.quiet_audit:
            logger.debug(f"Dangling reference: {ref}")
        else:
            logger.warning(f"Dangling reference: {ref}")

    if dangling and settings.strict:
        raise DanglingReferenceError(dangling)
    return store


__all__ = [
    # Core classes
    "CatalogStore",
    "DanglingReference",

    # Dataset
    "FEATURE_RECORDS",
    "FEATURE_ORDER",
    "FEATURE_GROUPS",

    # Errors
    "CatalogIntegrityError",
    "DuplicateFeatureCodeError",
    "InvalidFeatureCodeError",
    "InvalidFeatureTypeError",
    "GroupConfigurationError",
    "DanglingReferenceError",

    # Functions
    "build_default_catalog",
    "by_type",
    "default_groups",
    "find_dangling_references",
    "grouped_view",
    "ordered_features",
    "resolve_family",
    "resolve_related",
    "validate_groups",
]
