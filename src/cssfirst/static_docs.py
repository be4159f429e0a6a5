"""
Hand-curated documentation for well-known properties.

This is the last resort of the documentation chain and must always answer, so
unknown properties get a templated payload instead of an error.
"""

from __future__ import annotations

from typing import Dict, List

from .models import BrowserVersion, DocumentationPayload

DEFAULT_SUPPORT = 80.0

SUPPORT_PERCENTAGES: Dict[str, float] = {
    "display": 98,
    "flex": 95,
    "grid": 92,
    "scroll-snap-type": 85,
    "scroll-snap-align": 85,
    "overflow-x": 98,
    "transition": 96,
    "transform": 94,
    "container-type": 75,
    "container-name": 75,
    "@container": 75,
    "padding-inline": 94,
    "margin-inline": 94,
    "inline-size": 93,
    "block-size": 93,
    "inset-inline-start": 91,
    "overflow-inline": 72,
    "left": 99,
    "width": 99,
    "aspect-ratio": 92,
    "color-mix": 88,
    "light-dark": 70,
    "anchor-name": 60,
    "animation-timeline": 65,
    "::scroll-button()": 15,
    "::scroll-marker-group": 15,
    "::scroll-marker": 15,
    "::column": 15,
    ":target-current": 20,
}

EXPERIMENTAL_FEATURES: Dict[str, List[str]] = {
    "container-type": ["container-query-length", "container-query-inline-size"],
    "scroll-snap-type": ["scroll-snap-stop"],
    "transform": ["transform-style", "perspective"],
    "display": ["display: contents", "display: grid-lanes"],
    "anchor-name": ["position-try-fallbacks", "anchor-size()"],
}

DESCRIPTIONS: Dict[str, str] = {
    "display": "Sets the display type of an element",
    "overflow-x": "Controls horizontal overflow behavior",
    "scroll-snap-type": "Defines scroll snap behavior",
    "scroll-snap-align": "Specifies snap alignment",
    "flex": "Defines flexible item properties",
    "grid": "Creates a grid container",
    "transition": "Defines property transitions",
    "transform": "Applies 2D/3D transformations",
    "padding-inline": "Sets padding on the inline start and end edges",
    "inline-size": "Sets the size of an element in the inline direction",
    "inset-inline-start": "Offsets a positioned element from its inline start edge",
    "overflow-inline": "Controls overflow in the inline direction",
}

SYNTAX: Dict[str, str] = {
    "display": "none | block | inline | flex | grid | ...",
    "overflow-x": "visible | hidden | scroll | auto",
    "scroll-snap-type": "none | [ x | y | block | inline | both ] [ mandatory | proximity ]",
    "scroll-snap-align": "none | start | end | center",
    "flex": "<flex-grow> <flex-shrink> <flex-basis>",
    "transition": "<property> <duration> <timing-function> <delay>",
    "padding-inline": "<'padding-left'>{1,2}",
    "inline-size": "auto | <length-percentage> | min-content | max-content | fit-content",
}

VALUES: Dict[str, List[str]] = {
    "display": ["none", "block", "inline", "flex", "grid", "inline-block"],
    "overflow-x": ["visible", "hidden", "scroll", "auto"],
    "scroll-snap-type": ["none", "x mandatory", "y mandatory", "both mandatory"],
    "scroll-snap-align": ["none", "start", "end", "center"],
}

EXAMPLES: Dict[str, List[str]] = {
    "display": [".container { display: flex; }", ".grid { display: grid; }"],
    "overflow-x": [".carousel { overflow-x: scroll; }", ".hidden { overflow-x: hidden; }"],
    "scroll-snap-type": [
        ".carousel { scroll-snap-type: x mandatory; }",
        ".gallery { scroll-snap-type: both proximity; }",
    ],
    "scroll-snap-align": [
        ".carousel-item { scroll-snap-align: center; }",
        ".slide { scroll-snap-align: start; }",
    ],
    "padding-inline": [".card { padding-inline: 1rem; }"],
}

RELATED_PROPERTIES: Dict[str, List[str]] = {
    "display": ["position", "float", "clear"],
    "overflow-x": ["overflow-y", "overflow", "scroll-behavior"],
    "scroll-snap-type": ["scroll-snap-align", "scroll-behavior", "overflow"],
    "scroll-snap-align": ["scroll-snap-type", "scroll-margin", "scroll-padding"],
    "flex": ["flex-grow", "flex-shrink", "flex-basis", "display"],
    "grid": ["grid-template-columns", "grid-template-rows", "gap", "display"],
    "padding-inline": ["padding-block", "margin-inline", "padding-left", "padding-right"],
}

GENERIC_VALUES = ["auto", "initial", "inherit"]


def support_percentage(property_name: str) -> float:
    return float(SUPPORT_PERCENTAGES.get(property_name, DEFAULT_SUPPORT))


def static_payload(property_name: str) -> DocumentationPayload:
    return DocumentationPayload(
        property=property_name,
        source="static",
        description=DESCRIPTIONS.get(property_name, f"CSS property: {property_name}"),
        syntax=SYNTAX.get(property_name, f"{property_name}: <value>"),
        values=list(VALUES.get(property_name, GENERIC_VALUES)),
        examples=list(EXAMPLES.get(property_name, [f"{property_name}: example-value;"])),
        related_properties=list(RELATED_PROPERTIES.get(property_name, [])),
        overall_support=support_percentage(property_name),
        browsers={
            "chrome": BrowserVersion(version="90+"),
            "firefox": BrowserVersion(version="88+"),
            "safari": BrowserVersion(version="14+"),
            "edge": BrowserVersion(version="90+"),
        },
        experimental_features=list(EXPERIMENTAL_FEATURES.get(property_name, [])),
    )
