import argparse
import sys
from typing import List, Optional
from src.catalog import (
    FEATURE_GROUPS,
    FEATURE_ORDER,
    CatalogStore,
    build_default_catalog,
    find_dangling_references,
    grouped_view,
    ordered_features,
    resolve_family,
    resolve_related,
)
from src.util.config import CatalogSettings


def run_list(store: CatalogStore) -> int:
    """Prints the catalog grouped by category, in display order."""
    for group, features in grouped_view(FEATURE_GROUPS, ordered_features(store, FEATURE_ORDER)):
        print(f"{group.label} ({len(features)})")
        for feature in features:
            marker = " *" if feature.default else ""
            print(f"  {feature.code}  {feature.name}{marker}")
    return 0


def run_show(store: CatalogStore, code: str) -> int:
    """Prints one feature with its resolved references."""
    feature = store.get(code)
    if feature is None:
        print(f"Unknown feature: {code}")
        return 1

    print(f"{feature.name} ({feature.code}) [{feature.type.value}]")
    family = resolve_family(store, feature)
    if family:
        print(f"Family: {family.name} ({family.code})")
    if feature.required:
        print(f"Requires: {feature.required}")
    print()
    for paragraph in feature.paragraphs():
        print(paragraph)
        print()
    if feature.fonts:
        print(f"Fonts: {', '.join(feature.fonts)}")
    if feature.texts:
        print(f"Samples: {' | '.join(feature.texts)}")

    related = resolve_related(store, feature)
    if related:
        print(f"See also: {', '.join(f'{r.name} ({r.code})' for r in related)}")
    for url in feature.references:
        print(f"  - {url}")
    return 0


def run_check(store: CatalogStore, strict: bool) -> int:
    """Reports dangling references; non-zero exit only in strict mode."""
    dangling = find_dangling_references(store, FEATURE_ORDER)
    for ref in dangling:
        print(f"⚠️  {ref}")
    print(f"✅ {len(store)} features, {len(dangling)} dangling reference(s)")
    return 1 if (dangling and strict) else 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="OpenType Feature Catalog")
    sub = parser.add_subparsers(dest="mode", required=True)
    sub.add_parser("list", help="List features grouped by category.")
    show = sub.add_parser("show", help="Show a single feature.")
    show.add_argument("code", help="Feature code, e.g. 'tnum'.")
    check = sub.add_parser("check", help="Report unresolved references.")
    check.add_argument("--strict", action="store_true", help="Exit with status 1 if any reference dangles.")

    args = parser.parse_args(argv)

    settings = CatalogSettings.from_env()
    if args.mode == "check":
        # check reports dangling references itself
        settings.strict = False
    store = build_default_catalog(settings)

    if args.mode == "list":
        return run_list(store)
    elif args.mode == "show":
        return run_show(store, args.code)
    return run_check(store, args.strict)


if __name__ == "__main__":
    sys.exit(main())
