from dataclasses import dataclass
from typing import Iterable, List, Optional

from .store import CatalogStore


@dataclass(frozen=True)
class DanglingReference:
    """
    A soft reference that does not resolve to any record.

    Attributes:
        source: Code of the record holding the reference (None for the display order)
        field: "related", "family_code" or "order"
        target: The unresolved code
    """
    source: Optional[str]
    field: str
    target: str

    def __str__(self) -> str:
        where = self.source if self.source is not None else "<display order>"
        return f"{where}.{self.field} -> '{self.target}'"


def find_dangling_references(store: CatalogStore, order: Iterable[str] = ()) -> List[DanglingReference]:
    """
    Collect every unresolved soft reference.

    Checks related codes and family codes of each record, then the codes of
    the display order. Never raises; an empty list means the catalog is
    referentially complete.
    """
    found = []
    for feature in store:
        for code in feature.related:
            if code not in store:
                found.append(DanglingReference(feature.code, "related", code))
        if feature.family_code and feature.family_code not in store:
            found.append(DanglingReference(feature.code, "family_code", feature.family_code))

    for code in order:
        if code not in store:
            found.append(DanglingReference(None, "order", code))
    return found
