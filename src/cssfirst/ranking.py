from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np
import pandas as pd

from .config import MAX_RESULTS, RankingWeights
from .context import ContextHints
from .feature_catalog import FeatureDescriptor
from .intent import IntentAnalysis

LOGGER = logging.getLogger(__name__)

INTENT_CATEGORY_MATCHES: Dict[str, str] = {
    "layout": "layout",
    "animation": "animation",
    "spacing": "logical",
}

FRAMEWORK_PROPERTY_AFFINITY: Dict[str, Tuple[str, ...]] = {
    "react": ("flex",),
    "tailwind": ("grid",),
}

APPROACH_TIERS: Dict[str, Tuple[str, ...]] = {
    "compatible": ("excellent",),
    "modern": ("excellent", "good", "experimental"),
    "progressive": ("excellent", "good", "moderate", "limited", "experimental"),
}
DEFAULT_APPROACH = "modern"

PHYSICAL_TO_LOGICAL: Dict[str, str] = {
    "width": "inline-size",
    "height": "block-size",
    "min-width": "min-inline-size",
    "max-width": "max-inline-size",
    "min-height": "min-block-size",
    "max-height": "max-block-size",
    "left": "inset-inline-start",
    "right": "inset-inline-end",
    "top": "inset-block-start",
    "bottom": "inset-block-end",
    "margin-left": "margin-inline-start",
    "margin-right": "margin-inline-end",
    "margin-top": "margin-block-start",
    "margin-bottom": "margin-block-end",
    "padding-left": "padding-inline-start",
    "padding-right": "padding-inline-end",
    "padding-top": "padding-block-start",
    "padding-bottom": "padding-block-end",
    "border-left": "border-inline-start",
    "border-right": "border-inline-end",
    "border-top": "border-block-start",
    "border-bottom": "border-block-end",
    "overflow-x": "overflow-inline",
    "overflow-y": "overflow-block",
}


@dataclass(frozen=True)
class RankedCandidate:
    feature: FeatureDescriptor
    score: float


def normalize_approach(approach: Optional[str]) -> str:
    key = (approach or DEFAULT_APPROACH).strip().lower()
    if key not in APPROACH_TIERS:
        LOGGER.warning("Unknown approach %r, using %s", approach, DEFAULT_APPROACH)
        return DEFAULT_APPROACH
    return key


def filter_by_approach(candidates: Iterable[FeatureDescriptor], approach: Optional[str]) -> List[FeatureDescriptor]:
    allowed = APPROACH_TIERS[normalize_approach(approach)]
    return [feature for feature in candidates if feature.support_tier in allowed]


def _matched_categories(analysis: IntentAnalysis) -> Set[str]:
    return {INTENT_CATEGORY_MATCHES[i] for i in analysis.intents if i in INTENT_CATEGORY_MATCHES}


def _hints(analysis: IntentAnalysis, context: Optional[ContextHints]) -> List[str]:
    hints = list(analysis.framework_hints)
    if context is not None:
        hints.extend(context.frameworks)
        hints.extend(context.css_frameworks)
    return list(dict.fromkeys(hints))


def _has_affinity(feature: FeatureDescriptor, hints: Sequence[str]) -> bool:
    for hint in hints:
        for prop in FRAMEWORK_PROPERTY_AFFINITY.get(hint, ()):
            if prop in feature.properties:
                return True
    return False


def _tier_bonus(feature: FeatureDescriptor, weights: RankingWeights) -> float:
    if feature.support_tier == "excellent":
        return weights.tier_excellent
    if feature.support_tier == "good":
        return weights.tier_good
    return 0.0


def score_feature(
    feature: FeatureDescriptor,
    analysis: IntentAnalysis,
    context: Optional[ContextHints] = None,
    weights: Optional[RankingWeights] = None,
) -> float:
    weights = weights or RankingWeights()
    score = 0.0
    if feature.category in _matched_categories(analysis):
        score += weights.intent_match
    score += _tier_bonus(feature, weights)
    if _has_affinity(feature, _hints(analysis, context)):
        score += weights.framework_affinity
    return score * (1 + analysis.confidence)


def score_frame(
    candidates: Sequence[FeatureDescriptor],
    analysis: IntentAnalysis,
    context: Optional[ContextHints] = None,
    weights: Optional[RankingWeights] = None,
) -> pd.DataFrame:
    """One row per candidate with its bonus components and final score."""

    weights = weights or RankingWeights()
    hints = _hints(analysis, context)
    frame = pd.DataFrame(
        {
            "position": range(len(candidates)),
            "key": [f.key for f in candidates],
            "category": [f.category for f in candidates],
            "support_tier": [f.support_tier for f in candidates],
        }
    )
    if frame.empty:
        return frame.assign(intent_bonus=[], tier_bonus=[], framework_bonus=[], score=[])

    frame["intent_bonus"] = np.where(
        frame["category"].isin(sorted(_matched_categories(analysis))), weights.intent_match, 0.0
    )
    frame["tier_bonus"] = np.select(
        [frame["support_tier"] == "excellent", frame["support_tier"] == "good"],
        [weights.tier_excellent, weights.tier_good],
        default=0.0,
    )
    frame["framework_bonus"] = [weights.framework_affinity if _has_affinity(f, hints) else 0.0 for f in candidates]
    frame["score"] = (
        frame["intent_bonus"] + frame["tier_bonus"] + frame["framework_bonus"]
    ) * (1 + analysis.confidence)
    return frame


def rank_candidates(
    candidates: Sequence[FeatureDescriptor],
    analysis: IntentAnalysis,
    context: Optional[ContextHints] = None,
    weights: Optional[RankingWeights] = None,
    max_results: int = MAX_RESULTS,
) -> List[RankedCandidate]:
    """Score, sort descending and truncate. Equal scores keep input order."""

    if not candidates:
        return []
    frame = score_frame(candidates, analysis, context, weights)
    frame = frame.sort_values(by=["score", "position"], ascending=[False, True], kind="stable")
    ranked = [
        RankedCandidate(feature=candidates[int(row.position)], score=float(row.score))
        for row in frame.head(max_results).itertuples()
    ]
    LOGGER.debug("Ranked %d candidates: %s", len(ranked), [(r.feature.key, r.score) for r in ranked])
    return ranked


def logical_equivalent(property_name: str) -> Optional[str]:
    return PHYSICAL_TO_LOGICAL.get(property_name.strip().lower())


def _logical_follows_physical(earlier: FeatureDescriptor, later: FeatureDescriptor) -> bool:
    equivalent = logical_equivalent(earlier.primary_property)
    return equivalent is not None and equivalent == later.primary_property


def prefer_logical_properties(ranked: Sequence[RankedCandidate]) -> List[RankedCandidate]:
    """Move a writing-mode aware candidate ahead of its equally scored physical twin.

    Only adjacent equal-score physical/logical pairs are swapped, so no other
    pair changes relative order.
    """

    items = list(ranked)
    changed = True
    while changed:
        changed = False
        for i in range(len(items) - 1):
            earlier, later = items[i], items[i + 1]
            if earlier.score == later.score and _logical_follows_physical(earlier.feature, later.feature):
                items[i], items[i + 1] = later, earlier
                changed = True
    return items
