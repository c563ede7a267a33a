"""
The fixed feature dataset.

FEATURE_RECORDS holds every authored feature. FEATURE_ORDER is the
authoritative display order and intentionally lists codes that have not
been written yet (swsh, smcp, ...); those are skipped when resolved.
"""

from typing import List

from src.common.types import Feature, FeatureGroup, FeatureType
from .groups import default_groups

FONTS_COM = "https://www.fonts.com/content/learning/fontology/level-3"

FEATURE_RECORDS: List[Feature] = [

    # ==================== DIGITS ====================

    Feature(
        code="tnum",
        name="Tabular Figures",
        type=FeatureType.DIGIT,
        description=(
            "displays numerical digits (0–9) in the same width, like in monospace typefaces. "
            "For example, the digit 1 would take the same space as 2, 3, 4 or 0, so the number "
            "1111 would take the same space as 2340.\n\n"
            "Tabular figures are useful in aligned columns, like in tables or price lists, "
            "as they allow users to easily compare values vertically."
        ),
        fonts=["Inter", "Rasa"],
        texts=["11,150,110", "11110000"],
        related=["pnum", "onum", "lnum"],
        references=[f"{FONTS_COM}/numbers/proportional-vs-tabular-figures"],
    ),

    Feature(
        code="pnum",
        name="Proportional Figures",
        type=FeatureType.DIGIT,
        description=(
            "displays numerical digits (0–9) in varying widths, similar to letters. "
            "For example, the digit 1 would likely take less space than others, so the number "
            "1111 would take a smaller space than 2340.\n\n"
            "Proportional figures look good in horizontal text, like in an address, as they "
            "maintain the balance and produce a consistent appearance with the rest of the alphabet."
        ),
        fonts=["Lato", "Source Sans Pro", "Roboto", "Open Sans"],
        texts=["11,150,110", "11110000"],
        related=["tnum", "onum", "lnum"],
        references=[f"{FONTS_COM}/numbers/proportional-vs-tabular-figures"],
    ),

    Feature(
        code="onum",
        name="Oldstyle Figures",
        type=FeatureType.DIGIT,
        description=(
            "displays numbers in varying heights and alignments. These numbers blend in with "
            "lowercase leters, as they share the same x-height, and also have ascenders "
            "(usually 6 and 8) and descenders (3, 4, 5, 7 and 9).\n\n"
            "Oldstyle figures are often considered more pleasing and less intrusive than lining "
            "figures. They are preferred in running text and also pair nicely with small caps."
        ),
        fonts=["EB Garamond", "Lato", "Source Sans Pro", "Roboto", "Open Sans"],
        texts=["10Broad36", "123456789"],
        related=["lnum", "tnum", "pnum"],
        references=[
            "https://en.wikipedia.org/wiki/Text_figures",
            f"{FONTS_COM}/numbers/oldstyle-figures",
            "https://practicaltypography.com/alternate-figures.html#oldstyle-figures",
        ],
    ),

    Feature(
        code="lnum",
        name="Lining Figures",
        type=FeatureType.DIGIT,
        description=(
            "displays numbers in a uniform height, which usually aligned with uppercase letters "
            "(baseline and cap height).\n\n"
            "Lining figures is the default style in most fonts. In all-cap settings, they are "
            "almost always preferred over oldstyle ones."
        ),
        fonts=["Merriweather", "Raleway"],
        texts=["10Broad36", "123456789"],
        related=["onum", "tnum", "pnum"],
        references=[f"{FONTS_COM}/numbers/lining-figures"],
    ),

    Feature(
        code="ordn",
        name="Ordinals",
        type=FeatureType.DIGIT,
        description=(
            "set the letters following a number superscripted, to denote that number is an "
            "ordinal one (represent position in a sequential order), like 1st or 2nd."
        ),
        fonts=["Source Sans Pro", "Lato"],
        texts=["1st  2nd  3rd", "1o  1a", "Nº  No"],
        related=["subs", "sups"],
        references=[
            "https://en.wikipedia.org/wiki/Ordinal_indicator",
            "https://practicaltypography.com/ordinals.html",
        ],
    ),

    Feature(
        code="frac",
        name="Fractions",
        type=FeatureType.DIGIT,
        description=(
            "applies the diagonal (slashed) fraction style to numbers separated by a slash, "
            "as in 1/2 or 3/4. These are called fractions and are usually used in dimensions, "
            "recipes and mathematics.\n\n"
            "The diagonal style is not the only way to represent fractions, but usually "
            "considered the most common one. They look natural, use space effectively and are "
            "easier to read."
        ),
        fonts=["Roboto", "Inter", "Rasa", "Source Sans Pro", "Lato"],
        texts=["1/2  1/4  3/4", "123/45678"],
        related=["subs", "sups"],
        references=[f"{FONTS_COM}/numbers/fractions"],
    ),

    Feature(
        code="zero",
        name="Slashed Zero",
        type=FeatureType.DIGIT,
        description=(
            "adds a diagonal slash to the zero digit to make it more distinguishable "
            "from the capital O."
        ),
        fonts=["IBM Plex Sans", "Inter", "Source Sans Pro"],
        texts=["0O", "ZERO0"],
    ),

    # ==================== LIGATURES ====================

    Feature(
        code="liga",
        name="Standard Ligatures",
        type=FeatureType.LIGATURE,
        description=(
            "combines two (or sometimes three) characters into a single character to prevent "
            "character collision, like the one between the hook of “f” and the dot of “i”.\n\n"
            "Standard Ligatures is enabled by default. It usually has ligatures for “f-” pairs, "
            "such as “fi”, “fl”, “ff” or “ffi”. Others ligatures might be found via “dlig”."
        ),
        fonts=["Lato", "EB Garamond", "Roboto"],
        texts=["clifftop", "flying fish"],
        related=["calt", "dlig", "hlig"],
        references=[
            "https://en.wikipedia.org/wiki/Orthographic_ligature",
            f"{FONTS_COM}/signs-and-symbols/ligatures-1",
        ],
        default=True,
    ),

    Feature(
        code="calt",
        name="Contextual Alternates",
        type=FeatureType.LIGATURE,
        description=(
            "uses alternate forms when some specific characters are used together. This usually "
            "improves the spacing and/or connection between these characters.\n\n"
            "Contextual Alternates is enabled by default. It can be disabled if separated, "
            "distinct characters is preferred. In some typefaces designed for code, this is "
            "also referred as \"programming ligatures\"."
        ),
        fonts=["Fira Code", "Inter"],
        texts=["<- -> <->", "1*2  3×4"],
        related=["cwsh", "liga"],
        default=True,
    ),

    Feature(
        code="hlig",
        name="Historical Ligatures",
        type=FeatureType.LIGATURE,
        description=(
            "also combines characters like Standard Ligatures but work on historical ones, "
            "like a pair of 2 long form “s”. It requires Historical Forms to be enabled."
        ),
        fonts=["EB Garamond"],
        texts=["sinfulness", "blissful"],
        related=["liga", "hist"],
        # Free text, not a code reference
        required='"hist"',
    ),

    Feature(
        code="dlig",
        name="Discretionary Ligatures",
        type=FeatureType.LIGATURE,
        description=(
            "– sometimes called Rare Ligatures – also combines characters like Standard "
            "Ligatures but work on not-so-common ones, like “ct”, “st” or “Th”.\n\n"
            "Discretionary Ligatures are usually more decorative in nature than Standard "
            "Ligatures, and should be used at one's discretion, thus the name."
        ),
        fonts=["EB Garamond"],
        texts=["extract", "chest", "Thedore"],
        related=["liga", "hlig"],
        references=[f"{FONTS_COM}/signs-and-symbols/ligatures-2"],
    ),

    # ==================== LETTERS ====================

    Feature(
        code="hist",
        name="Historical Forms",
        type=FeatureType.LETTER,
        description=(
            "replaces some letters with their archaic alternatives, such as the long form “s”. "
            "This is meant to create a historical effect.\n\n"
            "Historical Forms only deals with single characters. For completeness, consider "
            "applying the historical ligatures via “hlig”."
        ),
        fonts=["EB Garamond"],
        texts=["sinfulness", "blissful"],
        related=["hlig"],
        references=["https://en.wikipedia.org/wiki/Long_s"],
    ),

    Feature(
        code="salt",
        name="Stylistic Alternates",
        type=FeatureType.LETTER,
        description=(
            "replaces some characters with their stylistic alternates. For example, the "
            "single-story  “g” and “a” could be replaced with their double-story forms, "
            "and vice versa.\n\n"
            "Stylistic Alternates are used mostly for their aesthetic effect. However, sometimes "
            "they can also help improve readability as in the case of the finial of lowercase "
            "“l” and the serif of uppercase “I”."
        ),
        fonts=["Inter", "Source Sans Pro", "Open Sans"],
        texts=["Illustrating", "Illegal"],
        related=["swsh", "hist"],
        references=[
            "https://en.wikipedia.org/wiki/G#Typographic_variants",
            "https://en.wikipedia.org/wiki/A#Typographic_variants",
            "https://en.wikipedia.org/wiki/A#Typographic_variants",
            "https://en.wikipedia.org/wiki/I#Forms_and_variants",
        ],
    ),
]

# Authoritative display order. Codes without a record are skipped.
FEATURE_ORDER: List[str] = [
    "liga", "hlig", "dlig", "calt",  # ligatures
    "onum", "lnum", "tnum", "pnum", "ordn", "frac", "zero",  # digits
    "hist", "salt", "swsh", "smcp", "cswh", "rand",  # letters
    "kern", "sups", "subs",  # position
]

FEATURE_GROUPS: List[FeatureGroup] = default_groups()
