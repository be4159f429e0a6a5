"""Tests for catalog search."""

from cssfirst.feature_catalog import FEATURE_CATALOG
from cssfirst.search import (
    CAROUSEL_FEATURE_KEYS,
    carousel_features,
    search,
    search_by_categories,
    search_by_category,
)


def _keys(features):
    return [f.key for f in features]


class TestSearch:
    """Tests for keyword search."""

    def test_matches_properties_and_names(self):
        """Keywords match names, descriptions and property lists."""
        keys = _keys(search(["grid"]))
        assert "grid" in keys
        assert "subgrid" in keys

    def test_case_insensitive(self):
        """Keyword case does not matter."""
        assert _keys(search(["FLEX"])) == _keys(search(["flex"]))
        assert "flexbox" in _keys(search(["FLEX"]))

    def test_keeps_catalog_order(self):
        """Results follow catalog iteration order."""
        catalog_keys = [f.key for f in FEATURE_CATALOG]
        keys = _keys(search(["scroll", "carousel"]))
        assert keys == sorted(keys, key=catalog_keys.index)

    def test_results_are_catalog_subset(self):
        """Search never invents descriptors."""
        for feature in search(["inline", "color", "snap"]):
            assert feature in FEATURE_CATALOG

    def test_no_keywords(self):
        """An empty keyword list finds nothing."""
        assert search([]) == []
        assert search([""]) == []


class TestSearchByCategory:
    """Tests for category filtering."""

    def test_layout_category(self):
        """Exact category match in catalog order."""
        assert _keys(search_by_category("layout")) == [
            "flexbox",
            "grid",
            "subgrid",
            "aspect-ratio",
            "overflow-logical",
        ]

    def test_unknown_category(self):
        """Unknown categories give no candidates."""
        assert search_by_category("sound") == []

    def test_several_categories_are_deduplicated(self):
        """The union keeps catalog order and has no duplicates."""
        keys = _keys(search_by_categories(["layout", "logical", "layout"]))
        assert len(keys) == len(set(keys))
        assert keys[0] == "logical-spacing"
        assert set(keys) == set(_keys(search_by_category("layout"))) | set(_keys(search_by_category("logical")))


class TestCarouselFeatures:
    """Tests for the carousel feature set."""

    def test_order(self):
        """Carousel features come back in their fixed order."""
        assert _keys(carousel_features()) == list(CAROUSEL_FEATURE_KEYS)
