from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from src.common.types import Feature, FeatureType
from src.util.logger import logger
from .errors import DuplicateFeatureCodeError, InvalidFeatureCodeError, InvalidFeatureTypeError


class CatalogStore:
    """
    Immutable registry of Feature records keyed by code.

    The store is built once from a fixed list of records and validated at
    construction: blank or duplicate codes and unknown types raise a
    CatalogIntegrityError. After that it is read-only, so a single instance
    can be shared between any number of readers.

    Lookups never raise. Unknown codes are expected because related/family
    references are hand-authored and may point at features not yet written.
    """

    def __init__(self, records: Iterable[Feature]):
        records = list(records)

        for record in records:
            if not isinstance(record.code, str) or not record.code.strip():
                logger.error(f"Refusing to build catalog, invalid code {record.code!r}")
                raise InvalidFeatureCodeError(record.code)
            if not isinstance(record.type, FeatureType):
                logger.error(f"Feature '{record.code}' has invalid type {record.type!r}")
                raise InvalidFeatureTypeError(record.code, record.type)

        counts = Counter(record.code for record in records)
        duplicates = [code for code, n in counts.items() if n > 1]
        if duplicates:
            logger.error(f"Refusing to build catalog, duplicate codes: {sorted(duplicates, key=str)}")
            raise DuplicateFeatureCodeError(duplicates)

        by_code: Dict[str, Feature] = {record.code: record for record in records}
        self._records: Mapping[str, Feature] = MappingProxyType(by_code)
        self._codes: Tuple[str, ...] = tuple(record.code for record in records)

        logger.info(f"Catalog initialized with {len(self._codes)} features")

    @classmethod
    def initialize(cls, records: Iterable[Feature]) -> "CatalogStore":
        """Build and validate a store from an ordered sequence of records."""
        return cls(records)

    def get(self, code: Optional[str]) -> Optional[Feature]:
        """Get feature by code, None if absent"""
        if not code:
            return None
        return self._records.get(code)

    def codes(self) -> Tuple[str, ...]:
        """Codes in construction order"""
        return self._codes

    def features(self) -> Tuple[Feature, ...]:
        """Records in construction order"""
        return tuple(self._records[code] for code in self._codes)

    @property
    def records(self) -> Mapping[str, Feature]:
        """Read-only view of the code -> Feature mapping"""
        return self._records

    def __contains__(self, code) -> bool:
        return code in self._records

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features())

    def __repr__(self) -> str:
        return f"CatalogStore({len(self)} features)"
