from __future__ import annotations

from typing import Dict, List

from .models import ImplementationGuidance

GENERIC_ALTERNATIVES: List[str] = ["JavaScript-based solution", "Traditional CSS approach"]

ALTERNATIVES: Dict[str, List[str]] = {
    "scroll-snap-type": ["overflow-x with JavaScript", "transform with JavaScript", "intersection observer"],
    "display: grid": ["display: flex", "float-based layout", "inline-block layout"],
    "grid": ["display: flex", "float-based layout", "inline-block layout"],
    "container-type": ["media queries", "viewport units", "JavaScript resize observer"],
    "css-scroll-snap": ["JavaScript carousel library", "touch event handling", "transform animations"],
    "::scroll-button()": ["scroll-snap-type with custom buttons", "JavaScript carousel library"],
    "anchor-name": ["absolute positioning with a JavaScript positioning library", "position: fixed popovers"],
    "inline-size": ["width", "max-width"],
    "padding-inline": ["padding-left and padding-right", "[dir=rtl] overrides"],
}

_OVERFLOW_X = {
    "basic_usage": ".carousel { overflow-x: scroll; scroll-snap-type: x mandatory; }",
    "best_practices": [
        "Hide scrollbars for better UX: scrollbar-width: none;",
        "Use scroll-behavior: smooth for better UX",
        "Ensure keyboard accessibility",
        "Add touch-action: pan-x for mobile",
    ],
    "fallbacks": [
        "Use JavaScript for browsers without scroll-snap support",
        "Provide navigation arrows for non-touch devices",
        "Add swipe gesture support with touch events",
    ],
    "example_code": """
<div class="carousel">
  <div class="carousel-item">Item 1</div>
  <div class="carousel-item">Item 2</div>
  <div class="carousel-item">Item 3</div>
</div>

<style>
.carousel {
  display: flex;
  overflow-x: scroll;
  scroll-snap-type: x mandatory;
  scroll-behavior: smooth;
  scrollbar-width: none;
}

.carousel-item {
  flex: 0 0 100%;
  scroll-snap-align: start;
  scroll-snap-stop: always;
}
</style>""",
}

_SCROLL_SNAP = {
    "basic_usage": ".container { scroll-snap-type: x mandatory; }",
    "best_practices": [
        'Use "mandatory" for precise control, "proximity" for smoother scrolling',
        "Combine with scroll-snap-align on child elements",
        "Test on different devices and browsers",
        "Consider scroll-snap-stop for better control",
    ],
    "fallbacks": [
        "Polyfill for older browsers",
        "JavaScript-based snapping",
        "Touch event handling for mobile",
    ],
    "example_code": """
.carousel {
  scroll-snap-type: x mandatory;
  overflow-x: scroll;
  display: flex;
}

.carousel-item {
  scroll-snap-align: center;
  scroll-snap-stop: always;
  flex: 0 0 auto;
  inline-size: 100%;
}""",
}

_DISPLAY = {
    "basic_usage": ".container { display: flex; }",
    "best_practices": [
        "Use flex for one-dimensional layouts",
        "Use grid for two-dimensional layouts",
        "Consider browser support for newer display values",
        "Test with different content lengths",
    ],
    "fallbacks": [
        "Use float-based layouts for very old browsers",
        "Provide inline-block fallbacks",
        "Consider CSS Grid fallbacks",
    ],
    "example_code": """
.carousel {
  display: flex;
  align-items: center;
  justify-content: flex-start;
  gap: 1rem;
}

.carousel-item {
  flex: 0 0 auto;
  min-inline-size: 200px;
}""",
}

_PADDING_INLINE = {
    "basic_usage": ".card { padding-inline: 1rem; padding-block: 0.5rem; }",
    "best_practices": [
        "Pair padding-inline with padding-block instead of the padding shorthand",
        "Test with dir=rtl and a vertical writing-mode",
        "Keep physical padding only where the design is tied to the screen edge",
    ],
    "fallbacks": [
        "Declare padding-left and padding-right before the logical property",
        "Wrap logical declarations in @supports (padding-inline: 0)",
    ],
    "example_code": """
.card {
  padding-left: 1rem;
  padding-right: 1rem;
  padding-inline: 1rem;
}""",
}

GUIDANCE: Dict[str, Dict] = {
    "overflow-x": _OVERFLOW_X,
    "scroll-snap-type": _SCROLL_SNAP,
    "display": _DISPLAY,
    "padding-inline": _PADDING_INLINE,
}


def alternatives_for(property_name: str) -> List[str]:
    return list(ALTERNATIVES.get(property_name.strip(), GENERIC_ALTERNATIVES))


def implementation_guidance(property_name: str, needs_fallback: bool = False) -> ImplementationGuidance:
    """Usage notes for an approved property; fallbacks only when asked for."""

    entry = GUIDANCE.get(property_name.strip())
    if entry is None:
        return ImplementationGuidance(
            basic_usage=f"{property_name}: value;",
            best_practices=["Test across browsers", "Consider accessibility", "Optimize for performance"],
            fallbacks=["Provide JavaScript fallback", "Use progressive enhancement"] if needs_fallback else [],
            example_code=f"\n.element {{\n  {property_name}: value;\n}}",
        )
    return ImplementationGuidance(
        basic_usage=entry["basic_usage"],
        best_practices=list(entry["best_practices"]),
        fallbacks=list(entry["fallbacks"]) if needs_fallback else [],
        example_code=entry["example_code"],
    )


def browser_support_recommendation(overall_support: float) -> str:
    if overall_support >= 95:
        return "Excellent browser support. Safe to use in production without fallbacks."
    if overall_support >= 85:
        return "Good browser support. Consider fallbacks for legacy browsers if needed."
    if overall_support >= 70:
        return "Moderate browser support. Provide fallbacks for older browsers."
    return "Limited browser support. Consider alternative approaches or polyfills."


def consent_message(property_name: str, overall_support: float) -> str:
    return (
        f"Would you like to use '{property_name}' "
        f"({overall_support:g}% browser support)? Confirm before it is applied."
    )
