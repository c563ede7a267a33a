"""
Pure derivations over a CatalogStore.

None of these functions mutate the store or raise for unresolved codes:
anything that cannot be resolved is left out of the result.
"""

from typing import Iterable, List, Optional, Sequence, Tuple, Union

from src.common.types import Feature, FeatureGroup, FeatureType
from .store import CatalogStore

GroupedView = List[Tuple[FeatureGroup, List[Feature]]]


def ordered_features(store: CatalogStore, order: Iterable[str]) -> List[Feature]:
    """
    Resolve codes against the store, keeping the given order.

    Unknown codes are skipped, so the result may be shorter than `order`.

    Example:
        ordered_features(store, ["liga", "ghost", "hist"])
        # Returns: [liga, hist]
    """
    resolved = []
    for code in order:
        feature = store.get(code)
        if feature is not None:
            resolved.append(feature)
    return resolved


def by_type(features: Iterable[Feature], feature_type: Union[FeatureType, str]) -> List[Feature]:
    """Features of one type, in input order. Empty list if none match."""
    if not isinstance(feature_type, FeatureType):
        try:
            feature_type = FeatureType(feature_type)
        except ValueError:
            return []
    return [f for f in features if f.type == feature_type]


def grouped_view(groups: Sequence[FeatureGroup], features: Sequence[Feature]) -> GroupedView:
    """
    Attach matching features to each group.

    Every group appears once, in input order, even when nothing matches;
    callers decide whether to render empty groups.
    """
    features = list(features)
    return [(group, by_type(features, group.type)) for group in groups]


def resolve_related(store: CatalogStore, feature: Feature) -> List[Feature]:
    """Related features in listed order, dropping unresolved codes"""
    return ordered_features(store, feature.related)


def resolve_family(store: CatalogStore, feature: Feature) -> Optional[Feature]:
    """Family record for a feature, None when absent or unresolved"""
    return store.get(feature.family_code)
