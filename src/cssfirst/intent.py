from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Pattern, Sequence, Tuple

from .context import EMPTY_HINTS, ContextHints, analyze_project_context
from .errors import InvalidInput
from .keywords import extract_keywords

LOGGER = logging.getLogger(__name__)


def _compile(*patterns: str) -> Tuple[Pattern[str], ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


INTENT_PATTERNS: Dict[str, Dict[str, Sequence]] = {
    "layout": {
        "patterns": _compile(
            r"(?:arrange|organize|position|place|layout)",
            r"(?:center|align|justify|distribute)",
            r"(?:column|row|grid|flex)",
            r"(?:beside|above|below|next to|in a row)",
        ),
        "categories": ("layout",),
    },
    "animation": {
        "patterns": _compile(
            r"(?:animate|transition|move|slide|fade|hover)",
            r"(?:smooth|ease|duration|timing)",
            r"(?:transform|translate|rotate|scale)",
        ),
        "categories": ("animation",),
    },
    "spacing": {
        "patterns": _compile(
            r"(?:space|spacing|gap|margin|padding)",
            r"(?:between|around|inside|outside)",
            r"(?:tight|loose|compressed|expanded)",
        ),
        "categories": ("logical",),
    },
    "responsive": {
        "patterns": _compile(
            r"(?:responsive|mobile|tablet|desktop|breakpoint)",
            r"(?:small screen|large screen|different sizes)",
            r"(?:adapt|resize|scale|fit)",
        ),
        "categories": ("responsive",),
    },
    "visual": {
        "patterns": _compile(
            r"(?:color|background|border|shadow|gradient)",
            r"(?:appearance|style|design|look)",
            r"(?:opacity|transparency|blur)",
        ),
        "categories": ("visual",),
    },
    "interaction": {
        "patterns": _compile(
            r"(?:click|hover|focus|active|disabled)",
            r"(?:interactive|button|link|form)",
            r"(?:state|feedback|response)",
        ),
        "categories": ("interaction",),
    },
}

FRAMEWORK_INDICATORS: Dict[str, Sequence[str]] = {
    "react": ["component", "jsx", "react", "usestate", "useeffect"],
    "vue": ["template", "v-if", "v-for", "vue", "composition"],
    "angular": ["angular", "component", "directive", "ngif", "ngfor"],
    "tailwind": ["tailwind", "tw-", "class=", "classname="],
    "bootstrap": ["bootstrap", "btn-", "col-", "row", "container"],
}


@dataclass(frozen=True)
class IntentAnalysis:
    keywords: Tuple[str, ...] = ()
    intents: Tuple[str, ...] = ()
    confidence: float = 0.0
    suggested_categories: Tuple[str, ...] = ()
    framework_hints: Tuple[str, ...] = ()
    context: ContextHints = field(default=EMPTY_HINTS)
    recommendations: Tuple[str, ...] = ()

    def explanation(self) -> str:
        detected = ", ".join(self.intents) if self.intents else "none"
        return (
            f"Analyzed with {round(self.confidence * 100)}% confidence. "
            f"Detected intent: {detected}."
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "keywords": list(self.keywords),
            "intent": list(self.intents),
            "confidence": self.confidence,
            "suggested_categories": list(self.suggested_categories),
            "framework_hints": list(self.framework_hints),
            "context_analysis": self.context.to_dict(),
            "explanation": self.explanation(),
        }
        if self.recommendations:
            data["recommendations"] = list(self.recommendations)
        return data


EMPTY_ANALYSIS = IntentAnalysis()


def _unique(values: Sequence[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def validate_description(description: Any) -> str:
    if not isinstance(description, str):
        raise InvalidInput(f"Task description must be a string, got {type(description).__name__}")
    if not description.strip():
        raise InvalidInput("Task description is empty")
    return description


def detect_framework_hints(description: str) -> List[str]:
    lowered = description.lower()
    hints = []
    for framework, indicators in FRAMEWORK_INDICATORS.items():
        if any(indicator in lowered for indicator in indicators):
            hints.append(framework)
    return hints


def match_intents(description: str) -> Tuple[List[str], List[str], int, int]:
    """Return (intents, categories, matched pattern count, evaluated pattern count)."""

    intents: List[str] = []
    categories: List[str] = []
    total_matches = 0
    total_patterns = 0
    for intent_type, entry in INTENT_PATTERNS.items():
        intent_matches = 0
        for pattern in entry["patterns"]:
            total_patterns += 1
            if pattern.search(description):
                intent_matches += 1
        total_matches += intent_matches
        if intent_matches > 0:
            intents.append(intent_type)
            categories.extend(entry["categories"])
    return intents, categories, total_matches, total_patterns


def analyze_task_intent(
    description: Any,
    project_context: Any = None,
    context: Optional[ContextHints] = None,
) -> IntentAnalysis:
    if context is None:
        context = analyze_project_context(project_context)
    try:
        text = validate_description(description)
    except InvalidInput as exc:
        LOGGER.debug("Degrading to empty analysis: %s", exc)
        return IntentAnalysis(context=context, recommendations=context.recommendations)

    intents, categories, total_matches, total_patterns = match_intents(text)
    confidence = total_matches / total_patterns if total_patterns else 0.0

    hints: List[str] = []
    if context.framework:
        hints.extend(context.frameworks)
    if context.css_framework:
        hints.extend(context.css_frameworks)
    hints.extend(detect_framework_hints(text))

    return IntentAnalysis(
        keywords=tuple(extract_keywords(text)),
        intents=_unique(intents),
        confidence=confidence,
        suggested_categories=_unique(categories),
        framework_hints=_unique(hints),
        context=context,
        recommendations=context.recommendations,
    )
