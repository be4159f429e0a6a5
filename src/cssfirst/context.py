"""
Project-context detection.

The host may hand us anything as context: a sentence, a dict lifted from a
package.json, a list of tags, or nothing at all. Every shape is flattened to
lower-case text and scanned against fixed vocabularies. Unknown shapes give
empty hints.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

LOGGER = logging.getLogger(__name__)

FRAMEWORK_KEYWORDS: Dict[str, Sequence[str]] = {
    "react": ["react", "jsx", "tsx", "next.js", "nextjs"],
    "vue": ["vue", "nuxt"],
    "angular": ["angular"],
    "svelte": ["svelte"],
}

CSS_FRAMEWORK_KEYWORDS: Dict[str, Sequence[str]] = {
    "tailwind": ["tailwind"],
    "bootstrap": ["bootstrap"],
    "bulma": ["bulma"],
    "styled-components": ["styled-components", "styled components"],
    "css-modules": ["css modules", "css-modules", ".module.css"],
    "sass": ["sass", "scss"],
}

BUILD_TOOL_KEYWORDS: Dict[str, Sequence[str]] = {
    "vite": ["vite"],
    "webpack": ["webpack"],
    "parcel": ["parcel"],
    "esbuild": ["esbuild"],
    "rollup": ["rollup"],
    "turbopack": ["turbopack"],
    "postcss": ["postcss"],
}

CONSTRAINT_KEYWORDS: Dict[str, Sequence[str]] = {
    "performance": ["performance", "performant", "fast", "lightweight", "bundle size"],
    "accessibility": ["accessibility", "accessible", "a11y", "wcag", "screen reader"],
    "responsive": ["responsive", "mobile", "tablet"],
    "legacy-browsers": ["ie11", "internet explorer", "legacy browser", "older browsers"],
    "internationalization": ["rtl", "right-to-left", "i18n", "international", "arabic", "hebrew"],
    "no-javascript": ["no javascript", "no js", "css only", "css-only"],
}

FRAMEWORK_RECOMMENDATIONS: Dict[str, List[str]] = {
    "react": [
        "Keep component styles in CSS Modules or plain stylesheets rather than inline style objects",
        "Use CSS custom properties for theme values shared across components",
    ],
    "vue": [
        "Use scoped <style> blocks and CSS custom properties for theming",
        "Prefer :deep() over global overrides when styling child components",
    ],
    "angular": [
        "Rely on the default emulated view encapsulation and :host selectors",
        "Expose theme hooks through CSS custom properties on :host",
    ],
    "svelte": [
        "Component <style> blocks are scoped; use :global() sparingly",
        "Drive state styling with class: directives instead of inline styles",
    ],
}

CSS_FRAMEWORK_RECOMMENDATIONS: Dict[str, List[str]] = {
    "tailwind": [
        "Use logical utilities such as ps-*, pe-*, ms-* and me-* for writing-mode aware spacing",
        "Add @layer components for repeated utility combinations",
    ],
    "bootstrap": [
        "Prefer Bootstrap's CSS variables over Sass overrides for runtime theming",
        "Use the grid and flex utilities before writing custom layout CSS",
    ],
    "bulma": ["Override Bulma CSS variables instead of forking component styles"],
    "styled-components": ["Move static declarations out of interpolations to keep class generation stable"],
    "css-modules": ["Compose shared declarations with composes: rather than duplicating them"],
    "sass": ["Prefer native CSS nesting and custom properties where browser support allows"],
}


@dataclass(frozen=True)
class ContextHints:
    framework: Optional[str] = None
    css_framework: Optional[str] = None
    build_tool: Optional[str] = None
    constraints: Tuple[str, ...] = ()
    frameworks: Tuple[str, ...] = ()
    css_frameworks: Tuple[str, ...] = ()
    build_tools: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = field(default=(), compare=False)

    @property
    def is_empty(self) -> bool:
        return not (self.frameworks or self.css_frameworks or self.build_tools or self.constraints)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, tuple):
                data[key] = list(value)
        return data


EMPTY_HINTS = ContextHints()


def _flatten(value: Any, parts: List[str], depth: int = 0) -> None:
    if depth > 8 or value is None:
        return
    if isinstance(value, str):
        parts.append(value)
    elif isinstance(value, bytes):
        parts.append(value.decode("utf-8", errors="ignore"))
    elif isinstance(value, Mapping):
        for key, item in value.items():
            parts.append(str(key))
            _flatten(item, parts, depth + 1)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _flatten(item, parts, depth + 1)
    elif isinstance(value, bool):
        return
    elif isinstance(value, (int, float)):
        parts.append(str(value))


def context_text(project_context: Any) -> str:
    """Flatten an arbitrary context value into lower-case text."""

    parts: List[str] = []
    _flatten(project_context, parts)
    return " ".join(parts).lower()


def _matches(text: str, vocabulary: Mapping[str, Sequence[str]]) -> Tuple[str, ...]:
    found = []
    for label, keywords in vocabulary.items():
        for kw in keywords:
            if kw in text:
                found.append(label)
                break
    return tuple(found)


def framework_recommendations(framework: str) -> List[str]:
    return list(FRAMEWORK_RECOMMENDATIONS.get(framework, []))


def css_framework_recommendations(css_framework: str) -> List[str]:
    return list(CSS_FRAMEWORK_RECOMMENDATIONS.get(css_framework, []))


def analyze_project_context(project_context: Any = None) -> ContextHints:
    text = context_text(project_context)
    if not text.strip():
        return EMPTY_HINTS

    frameworks = _matches(text, FRAMEWORK_KEYWORDS)
    css_frameworks = _matches(text, CSS_FRAMEWORK_KEYWORDS)
    build_tools = _matches(text, BUILD_TOOL_KEYWORDS)
    constraints = _matches(text, CONSTRAINT_KEYWORDS)

    recommendations: List[str] = []
    for name in frameworks:
        recommendations.extend(framework_recommendations(name))
    for name in css_frameworks:
        recommendations.extend(css_framework_recommendations(name))

    hints = ContextHints(
        framework=frameworks[0] if frameworks else None,
        css_framework=css_frameworks[0] if css_frameworks else None,
        build_tool=build_tools[0] if build_tools else None,
        constraints=constraints,
        frameworks=frameworks,
        css_frameworks=css_frameworks,
        build_tools=build_tools,
        recommendations=tuple(recommendations),
    )
    LOGGER.debug("Context hints: %s", hints)
    return hints
