from __future__ import annotations

from typing import Iterable, List, Sequence

from .feature_catalog import FEATURE_CATALOG, FeatureDescriptor, feature_lookup

CAROUSEL_FEATURE_KEYS = ("css-carousel", "scroll-snap", "flexbox", "transitions")


def search(
    keywords: Iterable[str],
    catalog: Sequence[FeatureDescriptor] = FEATURE_CATALOG,
) -> List[FeatureDescriptor]:
    """Catalog entries whose name, description or properties contain any keyword."""

    needles = [kw.lower() for kw in keywords if kw]
    if not needles:
        return []
    results = []
    for feature in catalog:
        text = feature.search_text()
        if any(needle in text for needle in needles):
            results.append(feature)
    return results


def search_by_category(
    category: str,
    catalog: Sequence[FeatureDescriptor] = FEATURE_CATALOG,
) -> List[FeatureDescriptor]:
    return [feature for feature in catalog if feature.category == category]


def search_by_categories(
    categories: Iterable[str],
    catalog: Sequence[FeatureDescriptor] = FEATURE_CATALOG,
) -> List[FeatureDescriptor]:
    """Union of category matches, deduplicated and kept in catalog order."""

    wanted = set(categories)
    return [feature for feature in catalog if feature.category in wanted]


def carousel_features() -> List[FeatureDescriptor]:
    lookup = feature_lookup()
    return [lookup[key] for key in CAROUSEL_FEATURE_KEYS if key in lookup]
