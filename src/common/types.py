from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class FeatureType(Enum):
    """Classification of a typographic feature"""
    DIGIT = "digit"  # Numerals, fractions, ordinals
    LETTER = "letter"  # Alternate letterforms
    LIGATURE = "ligature"  # Combined glyphs
    POSITION = "position"  # Superscript, subscript, kerning


@dataclass(frozen=True)
class Feature:
    """
    One OpenType feature a font may implement.

    Attributes:
        code: Unique four-letter tag (e.g., "tnum")
        name: Display name (e.g., "Tabular Figures")
        type: Classification from FeatureType
        description: Free text, paragraphs separated by a blank line
        fonts: Fonts known to support the feature, in display order
        texts: Sample strings used for previews
        related: Codes of conceptually related features (may not resolve)
        references: External citation URLs
        family_code: Code of the broader family this feature belongs to
        family_name: Display name of that family
        default: True if the feature is usually active without opt-in
        required: Free-text note naming a precondition, stored verbatim

    Example:
        Feature(
            code="tnum",
            name="Tabular Figures",
            type=FeatureType.DIGIT,
            fonts=("Inter", "Rasa"),
            related=("pnum", "onum", "lnum"),
        )
    """
    code: str
    name: str
    type: FeatureType
    description: str = ""

    fonts: Tuple[str, ...] = field(default_factory=tuple)
    texts: Tuple[str, ...] = field(default_factory=tuple)
    related: Tuple[str, ...] = field(default_factory=tuple)
    references: Tuple[str, ...] = field(default_factory=tuple)

    # Soft references, resolved through the store
    family_code: Optional[str] = None
    family_name: Optional[str] = None

    default: bool = False
    required: Optional[str] = None

    def __post_init__(self):
        # Literal data may spell the type as its string value
        if not isinstance(self.type, FeatureType):
            try:
                object.__setattr__(self, "type", FeatureType(self.type))
            except ValueError:
                pass  # rejected by CatalogStore with InvalidFeatureTypeError

        # Accept lists from literal data but keep the record immutable
        for name in ("fonts", "texts", "related", "references"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    def paragraphs(self) -> List[str]:
        """Description split on blank lines"""
        return [p.strip() for p in self.description.split("\n\n") if p.strip()]

    def css_feature_settings(self, enabled: bool = True) -> str:
        """
        Value for the CSS font-feature-settings property.

        Example: Feature("tnum", ...).css_feature_settings() -> '"tnum" 1'
        """
        return f'"{self.code}" {1 if enabled else 0}'


@dataclass(frozen=True)
class FeatureGroup:
    """Presentation bucket selecting features of a single type"""
    label: str
    type: FeatureType
