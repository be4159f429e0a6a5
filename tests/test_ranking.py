"""Tests for relevance ranking and the logical-property pass."""

import pytest

from cssfirst.config import RankingWeights
from cssfirst.context import ContextHints
from cssfirst.feature_catalog import FEATURE_CATALOG, feature_lookup
from cssfirst.intent import IntentAnalysis
from cssfirst.ranking import (
    APPROACH_TIERS,
    RankedCandidate,
    filter_by_approach,
    logical_equivalent,
    normalize_approach,
    prefer_logical_properties,
    rank_candidates,
    score_feature,
    score_frame,
)

LOOKUP = feature_lookup()


def _features(*keys):
    return [LOOKUP[k] for k in keys]


class TestScoreFeature:
    """Tests for the additive-then-multiplicative score."""

    def test_intent_and_tier(self):
        """Matching intent plus excellent tier, scaled by confidence."""
        analysis = IntentAnalysis(intents=("layout",), confidence=0.5)
        assert score_feature(LOOKUP["flexbox"], analysis) == pytest.approx(22.5)
        assert score_feature(LOOKUP["subgrid"], analysis) == pytest.approx(19.5)

    def test_spacing_matches_logical_category(self):
        """The spacing intent rewards logical features."""
        analysis = IntentAnalysis(intents=("spacing",))
        assert score_feature(LOOKUP["logical-spacing"], analysis) == pytest.approx(15)
        assert score_feature(LOOKUP["flexbox"], analysis) == pytest.approx(5)

    def test_tiers_without_intent(self):
        """Only excellent and good tiers earn a bonus."""
        analysis = IntentAnalysis()
        assert score_feature(LOOKUP["grid"], analysis) == 5
        assert score_feature(LOOKUP["color-mix"], analysis) == 3
        assert score_feature(LOOKUP["container-queries"], analysis) == 0
        assert score_feature(LOOKUP["light-dark"], analysis) == 0

    def test_framework_affinity(self):
        """React favours flex properties and Tailwind favours grid."""
        react = IntentAnalysis(framework_hints=("react",))
        tailwind = IntentAnalysis(framework_hints=("tailwind",))
        assert score_feature(LOOKUP["flexbox"], react) == 8
        assert score_feature(LOOKUP["grid"], react) == 5
        assert score_feature(LOOKUP["grid"], tailwind) == 8
        assert score_feature(LOOKUP["subgrid"], tailwind) == 3

    def test_context_frameworks_count(self):
        """Frameworks from context hints also earn the affinity bonus."""
        context = ContextHints(framework="react", frameworks=("react",))
        assert score_feature(LOOKUP["flexbox"], IntentAnalysis(), context) == 8

    def test_custom_weights(self):
        """Weights come from configuration."""
        weights = RankingWeights(intent_match=1, tier_excellent=0)
        analysis = IntentAnalysis(intents=("animation",))
        assert score_feature(LOOKUP["transitions"], analysis, weights=weights) == 1


class TestRankCandidates:
    """Tests for sorting and truncation."""

    def test_frame_matches_single_scores(self):
        """The pandas frame agrees with score_feature row by row."""
        analysis = IntentAnalysis(intents=("layout",), confidence=0.25, framework_hints=("react",))
        candidates = list(FEATURE_CATALOG)
        frame = score_frame(candidates, analysis)
        for feature, score in zip(candidates, frame["score"]):
            assert score == pytest.approx(score_feature(feature, analysis))

    def test_descending_order(self):
        """Higher scores come first."""
        analysis = IntentAnalysis(intents=("layout",), confidence=0.1)
        ranked = rank_candidates(_features("subgrid", "transitions", "flexbox"), analysis)
        assert [r.feature.key for r in ranked] == ["flexbox", "subgrid", "transitions"]
        scores = [r.score for r in ranked]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self):
        """Equal scores keep catalog order."""
        candidates = _features("flexbox", "grid", "aspect-ratio", "transitions")
        ranked = rank_candidates(candidates, IntentAnalysis())
        assert [r.feature.key for r in ranked] == ["flexbox", "grid", "aspect-ratio", "transitions"]

    def test_stable_across_runs(self):
        """Re-ranking the same input gives the same order."""
        analysis = IntentAnalysis(intents=("layout", "spacing"), confidence=0.2)
        candidates = list(FEATURE_CATALOG)
        first = rank_candidates(candidates, analysis, max_results=len(candidates))
        second = rank_candidates(candidates, analysis, max_results=len(candidates))
        assert first == second

    def test_truncates(self):
        """At most max_results candidates are kept."""
        ranked = rank_candidates(list(FEATURE_CATALOG), IntentAnalysis(), max_results=5)
        assert len(ranked) == 5

    def test_empty(self):
        """No candidates, no ranking."""
        assert rank_candidates([], IntentAnalysis()) == []


class TestApproachFilter:
    """Tests for approach filtering."""

    def test_compatible_is_excellent_only(self):
        """compatible keeps only excellent features."""
        assert {f.support_tier for f in filter_by_approach(FEATURE_CATALOG, "compatible")} == {"excellent"}

    def test_modern_excludes_moderate_and_limited(self):
        """modern keeps excellent, good and experimental."""
        tiers = {f.support_tier for f in filter_by_approach(FEATURE_CATALOG, "modern")}
        assert tiers == {"excellent", "good", "experimental"}

    def test_subset_chain(self):
        """progressive contains modern, which contains compatible."""
        compatible = set(filter_by_approach(FEATURE_CATALOG, "compatible"))
        modern = set(filter_by_approach(FEATURE_CATALOG, "modern"))
        progressive = set(filter_by_approach(FEATURE_CATALOG, "progressive"))
        assert compatible <= modern <= progressive
        assert progressive == set(FEATURE_CATALOG)

    def test_unknown_approach_means_modern(self):
        """Unknown approaches fall back to modern."""
        assert normalize_approach("bleeding-edge") == "modern"
        assert normalize_approach(None) == "modern"
        assert normalize_approach(" Compatible ") == "compatible"
        assert set(APPROACH_TIERS) == {"compatible", "modern", "progressive"}


class TestLogicalPreference:
    """Tests for the logical-property pass."""

    def test_logical_equivalent(self):
        """Physical properties map to their logical twins."""
        assert logical_equivalent("Width") == "inline-size"
        assert logical_equivalent("left") == "inset-inline-start"
        assert logical_equivalent("overflow-x") == "overflow-inline"
        assert logical_equivalent("inline-size") is None

    def test_equal_scores_swap(self):
        """A logical twin moves ahead of an equally scored physical entry."""
        ranked = [
            RankedCandidate(LOOKUP["box-dimensions"], 5.0),
            RankedCandidate(LOOKUP["logical-sizing"], 5.0),
        ]
        assert [r.feature.key for r in prefer_logical_properties(ranked)] == [
            "logical-sizing",
            "box-dimensions",
        ]

    def test_several_pairs(self):
        """Each physical/logical pair is handled independently."""
        ranked = [
            RankedCandidate(LOOKUP["physical-offsets"], 5.0),
            RankedCandidate(LOOKUP["logical-insets"], 5.0),
            RankedCandidate(LOOKUP["box-dimensions"], 5.0),
            RankedCandidate(LOOKUP["logical-sizing"], 5.0),
        ]
        assert [r.feature.key for r in prefer_logical_properties(ranked)] == [
            "logical-insets",
            "physical-offsets",
            "logical-sizing",
            "box-dimensions",
        ]

    def test_unequal_scores_do_not_swap(self):
        """A higher scored physical entry keeps its place."""
        ranked = [
            RankedCandidate(LOOKUP["box-dimensions"], 8.0),
            RankedCandidate(LOOKUP["logical-sizing"], 5.0),
        ]
        assert prefer_logical_properties(ranked) == ranked

    def test_unrelated_pairs_keep_order(self):
        """Entries that are not twins never move."""
        ranked = [
            RankedCandidate(LOOKUP["flexbox"], 5.0),
            RankedCandidate(LOOKUP["logical-sizing"], 5.0),
            RankedCandidate(LOOKUP["physical-offsets"], 5.0),
            RankedCandidate(LOOKUP["grid"], 5.0),
        ]
        assert prefer_logical_properties(ranked) == ranked

    def test_never_passes_higher_score(self):
        """No candidate moves ahead of a strictly higher scored one."""
        ranked = [
            RankedCandidate(LOOKUP["flexbox"], 10.0),
            RankedCandidate(LOOKUP["box-dimensions"], 5.0),
            RankedCandidate(LOOKUP["logical-sizing"], 5.0),
        ]
        result = prefer_logical_properties(ranked)
        assert result[0].feature.key == "flexbox"
        for earlier, later in zip(result, result[1:]):
            assert earlier.score >= later.score
