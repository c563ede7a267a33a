from typing import Dict, List, Sequence

from src.common.types import FeatureGroup, FeatureType
from src.util.logger import logger
from .errors import GroupConfigurationError

# Display labels, keyed by the enumeration so the two cannot drift apart
GROUP_LABELS: Dict[FeatureType, str] = {
    FeatureType.DIGIT: "Numbers",
    FeatureType.LETTER: "Letters",
    FeatureType.LIGATURE: "Ligatures",
    FeatureType.POSITION: "Position",
}


def default_groups() -> List[FeatureGroup]:
    """One group per FeatureType, in enumeration order"""
    return [
        FeatureGroup(label=GROUP_LABELS.get(t, t.value.title()), type=t)
        for t in FeatureType
    ]


def validate_groups(groups: Sequence[FeatureGroup]) -> None:
    """
    Check that a group list covers the FeatureType enumeration exactly.

    Raises:
        GroupConfigurationError: a group selects a type outside the
            enumeration, or an enumeration member has no group.
    """
    unknown = [g.type for g in groups if not isinstance(g.type, FeatureType)]
    covered = {g.type for g in groups if isinstance(g.type, FeatureType)}
    missing = [t for t in FeatureType if t not in covered]

    if unknown or missing:
        logger.error(f"Group configuration mismatch: unknown={unknown}, missing={missing}")
        raise GroupConfigurationError(unknown=unknown, missing=missing)
