"""
Recommendation engine.

``suggest`` runs the full flow: context and intent analysis, category search,
approach filtering, ranking, the logical-property pass, and documentation
enrichment. When the category search leaves nothing, the keyword extractor
broadens the search and the first matches are returned in catalog order.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .config import EngineConfig
from .context import ContextHints, analyze_project_context
from .docs import DocumentationCache, DocumentationClient
from .errors import InvalidInput
from .feature_catalog import FEATURE_CATALOG, FeatureDescriptor, feature_syntax, feature_use_cases
from .guidance import (
    alternatives_for,
    browser_support_recommendation,
    consent_message,
    implementation_guidance,
)
from .intent import IntentAnalysis, analyze_task_intent
from .keywords import extract_keywords, normalize_keywords
from .models import (
    ConsentResponse,
    DetailsResponse,
    SuggestResponse,
    Suggestion,
    SupportResponse,
    SupportSummary,
)
from .ranking import (
    APPROACH_TIERS,
    filter_by_approach,
    normalize_approach,
    prefer_logical_properties,
    rank_candidates,
)
from .search import carousel_features, search, search_by_categories

LOGGER = logging.getLogger(__name__)

STRATEGIES = ("semantic", "keywords")

NO_RESULTS_MESSAGE = (
    "No CSS solutions found. Rephrase the request around a UI pattern that CSS can achieve."
)

Scored = Tuple[FeatureDescriptor, Optional[float]]


def _require_property(property_name: Any) -> str:
    if not isinstance(property_name, str) or not property_name.strip():
        raise InvalidInput("A CSS property name is required")
    return property_name.strip()


class RecommendationEngine:
    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        docs: Optional[DocumentationClient] = None,
        catalog: Sequence[FeatureDescriptor] = FEATURE_CATALOG,
        strategy: str = "semantic",
    ):
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy {strategy!r}, expected one of {STRATEGIES}")
        self.config = config or EngineConfig()
        self.docs = docs or DocumentationClient(
            self.config.docs, DocumentationCache(self.config.cache.ttl_seconds)
        )
        self.catalog = tuple(catalog)
        self.strategy = strategy

    # -- analysis ---------------------------------------------------------

    def analyze(self, task_description: Any, project_context: Any = None) -> IntentAnalysis:
        return analyze_task_intent(task_description, context=analyze_project_context(project_context))

    def candidates(self, analysis: IntentAnalysis, approach: str) -> List[FeatureDescriptor]:
        """Category matches allowed by ``approach``, before ranking and truncation.

        These sets nest: progressive contains modern, which contains compatible.
        The truncated top ``max_results`` lists need not, since a wider
        approach can admit higher-scoring features.
        """

        found = search_by_categories(analysis.suggested_categories, self.catalog)
        return filter_by_approach(found, approach)

    def rank(
        self,
        analysis: IntentAnalysis,
        candidates: Sequence[FeatureDescriptor],
        context: Optional[ContextHints] = None,
    ) -> List[Scored]:
        # rank everything, apply the logical pass, then cut
        ranked = rank_candidates(
            candidates,
            analysis,
            context,
            self.config.ranking,
            max_results=len(candidates),
        )
        ranked = prefer_logical_properties(ranked)[: self.config.max_results]
        return [(r.feature, r.score) for r in ranked]

    def keyword_fallback(self, analysis: IntentAnalysis, task_description: Any, approach: str) -> List[Scored]:
        keywords = list(analysis.keywords) or extract_keywords(task_description)
        if not keywords:
            return []
        LOGGER.info("No category candidates, broadening with keywords %s", keywords)
        found = filter_by_approach(search(keywords, self.catalog), approach)
        return [(feature, None) for feature in found[: self.config.max_results]]

    # -- suggestions ------------------------------------------------------

    def _suggestions(self, scored: Sequence[Scored]) -> List[Suggestion]:
        payloads = self.docs.resolve_many([feature.primary_property for feature, _ in scored])
        suggestions = []
        for (feature, score), payload in zip(scored, payloads):
            summary = SupportSummary.from_overall(payload.overall_support)
            suggestions.append(
                Suggestion(
                    property=feature.primary_property,
                    feature=feature.name,
                    description=feature.description,
                    syntax=feature_syntax(feature) if payload.source == "static" else payload.syntax,
                    browser_support=summary,
                    use_cases=feature_use_cases(feature),
                    mdn_url=feature.doc_reference,
                    consent_message=consent_message(feature.primary_property, summary.overall_support),
                    relevance_score=score,
                )
            )
        return suggestions

    def _response(self, scored: Sequence[Scored], analysis: Optional[IntentAnalysis] = None) -> SuggestResponse:
        analysis_data = analysis.to_dict() if analysis is not None else None
        if not scored:
            return SuggestResponse(success=False, message=NO_RESULTS_MESSAGE, analysis=analysis_data)
        suggestions = self._suggestions(scored)
        return SuggestResponse(
            success=True,
            message=f"Found {len(suggestions)} CSS solution(s) using modern CSS features.",
            suggestions=suggestions,
            analysis=analysis_data,
        )

    def suggest(
        self,
        task_description: Any,
        approach: str = "modern",
        project_context: Any = None,
        include_analysis: bool = False,
    ) -> SuggestResponse:
        """Recommend CSS features for a task description.

        Never raises for string input; an empty or unmatched description gives
        ``success=False`` and no suggestions.
        """

        approach = normalize_approach(approach)
        context = analyze_project_context(project_context)
        analysis = analyze_task_intent(task_description, context=context)
        shown = analysis if include_analysis else None

        if self.strategy == "keywords":
            keywords = extract_keywords(task_description)
            return self._response(self._legacy_selection(keywords, approach), shown)

        candidates = self.candidates(analysis, approach)
        if candidates:
            scored = self.rank(analysis, candidates, context)
        else:
            scored = self.keyword_fallback(analysis, task_description, approach)
        return self._response(scored, shown)

    def _legacy_selection(self, keywords: Iterable[str], approach: str) -> List[Scored]:
        keywords = normalize_keywords(keywords)
        if not keywords:
            return []
        allowed = APPROACH_TIERS[normalize_approach(approach)]
        ordered: List[FeatureDescriptor] = []
        if "carousel" in keywords or "slider" in keywords:
            ordered.extend(carousel_features())
        ordered.extend(search(keywords, self.catalog))

        selected: List[Scored] = []
        seen = set()
        for feature in ordered:
            if feature.support_tier not in allowed or feature.primary_property in seen:
                continue
            seen.add(feature.primary_property)
            selected.append((feature, None))
        return selected

    def suggest_from_keywords(self, keywords: Iterable[str], approach: str = "modern") -> SuggestResponse:
        """Older callers pass keywords directly; no classification or scoring."""

        if isinstance(keywords, str):
            keywords = [keywords]
        return self._response(self._legacy_selection(keywords, approach))

    # -- auxiliary entry points -------------------------------------------

    def check_support(self, property_name: str, include_experimental: bool = False) -> SupportResponse:
        name = _require_property(property_name)
        support = self.docs.resolve_support(name, include_experimental)
        return SupportResponse(
            property=name,
            browser_support=support,
            recommendation=browser_support_recommendation(support.overall_support),
            safe_to_use=support.overall_support >= 80,
        )

    def get_details(self, property_name: str, include_examples: bool = True) -> DetailsResponse:
        name = _require_property(property_name)
        return DetailsResponse(
            property=name,
            details=self.docs.resolve_details(name, include_examples),
            mdn_url=f"{self.config.docs.mdn_base_url}/{name}",
        )

    def confirm_usage(self, property_name: str, consented: bool, needs_fallback: bool = False) -> ConsentResponse:
        name = _require_property(property_name)
        if not consented:
            return ConsentResponse(
                property=name,
                approved=False,
                message=f"User declined to use {name}. Here are alternative CSS solutions.",
                alternatives=alternatives_for(name),
            )
        return ConsentResponse(
            property=name,
            approved=True,
            message=f"User confirmed usage of {name}. Here's the implementation guidance:",
            implementation_guidance=implementation_guidance(name, needs_fallback),
        )
