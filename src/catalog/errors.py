"""
Integrity errors raised while building the catalog.

All of them are fatal at startup: the catalog refuses to load rather than
serve inconsistent data. Dangling soft references are not errors unless
strict mode is enabled.
"""

from typing import Iterable, List


class CatalogIntegrityError(ValueError):
    """Base class for data-authoring defects found at construction time"""


class DuplicateFeatureCodeError(CatalogIntegrityError):
    def __init__(self, codes: Iterable[str]):
        self.codes: List[str] = sorted(set(codes), key=str)
        super().__init__(f"Duplicate feature codes: {', '.join(str(c) for c in self.codes)}")


class InvalidFeatureTypeError(CatalogIntegrityError):
    def __init__(self, code: str, value):
        self.code = code
        self.value = value
        super().__init__(f"Feature '{code}' has invalid type {value!r}")


class GroupConfigurationError(CatalogIntegrityError):
    """Group list and FeatureType enumeration disagree"""

    def __init__(self, unknown: Iterable = (), missing: Iterable = ()):
        self.unknown = list(unknown)
        self.missing = list(missing)
        parts = []
        if self.unknown:
            parts.append(f"unknown group types: {self.unknown}")
        if self.missing:
            parts.append(f"types without a group: {[t.value for t in self.missing]}")
        super().__init__("Invalid feature groups (" + "; ".join(parts) + ")")


class DanglingReferenceError(CatalogIntegrityError):
    """Raised only in strict mode"""

    def __init__(self, references):
        self.references = list(references)
        super().__init__(f"{len(self.references)} dangling reference(s) in catalog")


class InvalidFeatureCodeError(CatalogIntegrityError):
    """Record code is missing, empty or blank"""

    def __init__(self, code):
        self.code = code
        super().__init__(f"Invalid feature code {code!r}")
