from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

import pandas as pd

from .config import MDN_CSS_BASE_URL

CATEGORIES: Tuple[str, ...] = (
    "layout",
    "animation",
    "visual",
    "responsive",
    "interaction",
    "logical",
    "positioning",
    "display",
)

SUPPORT_TIERS: Tuple[str, ...] = (
    "excellent",
    "good",
    "moderate",
    "limited",
    "experimental",
)


@dataclass(frozen=True)
class FeatureDescriptor:
    key: str
    name: str
    category: str
    properties: Tuple[str, ...]
    description: str
    support_tier: str
    doc_reference: str

    @property
    def primary_property(self) -> str:
        return self.properties[0]

    def search_text(self) -> str:
        return f"{self.name} {self.description} {' '.join(self.properties)}".lower()


def _make_def(
    key: str,
    name: str,
    category: str,
    properties: Sequence[str],
    description: str,
    support_tier: str,
    doc_path: str,
) -> FeatureDescriptor:
    if category not in CATEGORIES:
        raise ValueError(f"Unknown feature category: {category}")
    if support_tier not in SUPPORT_TIERS:
        raise ValueError(f"Unknown support tier: {support_tier}")
    if not properties:
        raise ValueError(f"Feature {key} declares no properties")
    return FeatureDescriptor(
        key=key,
        name=name,
        category=category,
        properties=tuple(properties),
        description=description,
        support_tier=support_tier,
        doc_reference=f"{MDN_CSS_BASE_URL}/{doc_path}",
    )


def _logical_features() -> Iterable[FeatureDescriptor]:
    return (
        _make_def(
            "logical-spacing",
            "Logical Spacing Properties",
            "logical",
            [
                "padding-inline",
                "padding-block",
                "margin-inline",
                "margin-block",
                "padding-inline-start",
                "padding-inline-end",
                "margin-block-start",
                "margin-block-end",
                "scroll-margin-inline",
                "scroll-margin-block",
            ],
            "Writing-mode aware padding and margin using inline and block directions",
            "excellent",
            "CSS_logical_properties_and_values",
        ),
        _make_def(
            "spacing-units",
            "Modern CSS Units",
            "logical",
            ["rem", "em", "ch", "vi", "vb", "lh"],
            "Relative, content-aware and logical viewport units for spacing and sizing",
            "excellent",
            "length",
        ),
        _make_def(
            "cascade-layers",
            "CSS Cascade Layers",
            "logical",
            ["@layer", "revert-layer"],
            "Explicit cascade layers to manage specificity across components",
            "good",
            "@layer",
        ),
        _make_def(
            "nesting",
            "CSS Nesting",
            "logical",
            ["&"],
            "Native nesting of style rules inside their parent selector",
            "good",
            "CSS_nesting",
        ),
        _make_def(
            "math-functions",
            "CSS Enhanced Math Functions",
            "logical",
            ["clamp", "min", "max", "round", "mod", "rem", "sin", "cos"],
            "Fluid sizing and computed values with clamp(), min(), max() and stepped math",
            "good",
            "CSS_Values_and_Units/CSS_Value_Functions",
        ),
    )


def _layout_features() -> Iterable[FeatureDescriptor]:
    return (
        _make_def(
            "flexbox",
            "Flexbox",
            "layout",
            [
                "display",
                "flex-direction",
                "justify-content",
                "align-items",
                "flex-wrap",
                "flex-flow",
                "gap",
                "row-gap",
                "column-gap",
                "flex",
                "flex-grow",
                "flex-shrink",
                "flex-basis",
                "order",
            ],
            "Flexible box layout for one-dimensional layouts",
            "excellent",
            "CSS_flexible_box_layout",
        ),
        _make_def(
            "grid",
            "CSS Grid",
            "layout",
            [
                "display",
                "grid",
                "grid-template-columns",
                "grid-template-rows",
                "gap",
                "grid-column",
                "grid-row",
                "grid-area",
                "grid-template-areas",
                "grid-template",
            ],
            "Two-dimensional grid layout system",
            "excellent",
            "CSS_grid_layout",
        ),
        _make_def(
            "subgrid",
            "CSS Subgrid",
            "layout",
            ["grid-template-columns", "grid-template-rows"],
            "Nested grids that align to the tracks of their parent grid",
            "good",
            "CSS_grid_layout/Subgrid",
        ),
        _make_def(
            "aspect-ratio",
            "CSS aspect-ratio",
            "layout",
            ["aspect-ratio"],
            "Preferred width-to-height ratio for boxes such as media and cards",
            "excellent",
            "aspect-ratio",
        ),
        _make_def(
            "overflow-logical",
            "Logical Overflow Properties",
            "layout",
            [
                "overflow-inline",
                "overflow-block",
                "text-overflow",
                "overflow-wrap",
                "overflow-clip-margin",
            ],
            "Logical overflow properties for directional content handling",
            "good",
            "CSS_overflow",
        ),
    )


def _interaction_features() -> Iterable[FeatureDescriptor]:
    return (
        _make_def(
            "scroll-snap",
            "CSS Scroll Snap",
            "interaction",
            [
                "scroll-snap-type",
                "scroll-snap-align",
                "scroll-snap-stop",
                "scroll-behavior",
                "scroll-padding",
                "scroll-margin",
            ],
            "Control scroll snapping behavior for carousels and scrollable content",
            "good",
            "CSS_scroll_snap",
        ),
        _make_def(
            "css-carousel",
            "Modern CSS Carousel with Pseudo-Elements",
            "interaction",
            [
                "::scroll-button()",
                "::scroll-marker-group",
                "::scroll-marker",
                "::column",
                ":target-current",
            ],
            "Latest CSS carousel with auto-generated buttons and markers using pseudo-elements",
            "limited",
            "CSS_overflow/CSS_carousels",
        ),
        _make_def(
            "has-selector",
            "CSS :has() Pseudo-class",
            "interaction",
            [":has()"],
            "Style a parent or previous sibling based on its descendants or state",
            "good",
            ":has",
        ),
        _make_def(
            "focus-visible",
            "Focus Indicators",
            "interaction",
            [":focus-visible", ":focus-within", "outline-offset"],
            "Keyboard-friendly focus rings that stay hidden for pointer clicks",
            "excellent",
            ":focus-visible",
        ),
    )


def _animation_features() -> Iterable[FeatureDescriptor]:
    return (
        _make_def(
            "transitions",
            "CSS Transitions",
            "animation",
            [
                "transition",
                "transition-property",
                "transition-duration",
                "transition-timing-function",
                "transition-delay",
            ],
            "Smooth animations between property changes",
            "excellent",
            "CSS_transitions",
        ),
        _make_def(
            "animations",
            "CSS Animations",
            "animation",
            [
                "animation",
                "keyframes",
                "animation-name",
                "animation-duration",
                "animation-timing-function",
                "animation-iteration-count",
                "animation-fill-mode",
            ],
            "Complex keyframe-based animations",
            "excellent",
            "CSS_animations",
        ),
        _make_def(
            "scroll-driven-animations",
            "Scroll-driven Animations",
            "animation",
            ["animation-timeline", "scroll-timeline", "view-timeline", "animation-range"],
            "Animations whose progress follows a scroll container or element visibility",
            "experimental",
            "CSS_scroll-driven_animations",
        ),
    )


def _visual_features() -> Iterable[FeatureDescriptor]:
    return (
        _make_def(
            "gradients",
            "CSS Gradients",
            "visual",
            ["background-image", "linear-gradient", "radial-gradient", "conic-gradient"],
            "Smooth color transitions and gradient backgrounds",
            "excellent",
            "gradient",
        ),
        _make_def(
            "transforms",
            "CSS Transforms",
            "visual",
            ["transform", "transform-origin", "scale", "rotate", "translate"],
            "2D and 3D transformations of elements",
            "excellent",
            "CSS_transforms",
        ),
        _make_def(
            "border-logical",
            "Logical Border Properties",
            "visual",
            [
                "border-inline",
                "border-block",
                "border-inline-start",
                "border-inline-end",
                "border-block-start",
                "border-block-end",
            ],
            "Logical border properties that adapt to writing direction",
            "good",
            "CSS_logical_properties_and_values",
        ),
        _make_def(
            "color-mix",
            "CSS color-mix() Function",
            "visual",
            ["color-mix"],
            "Blend two colors in a chosen color space for themes and states",
            "good",
            "color_value/color-mix",
        ),
        _make_def(
            "color-scheme",
            "CSS color-scheme",
            "visual",
            ["color-scheme"],
            "Declare light and dark support so form controls and scrollbars follow the theme",
            "excellent",
            "color-scheme",
        ),
        _make_def(
            "light-dark",
            "CSS light-dark() Function",
            "visual",
            ["light-dark"],
            "Pick a color for light or dark themes without media queries",
            "experimental",
            "color_value/light-dark",
        ),
        _make_def(
            "backdrop-filter",
            "CSS backdrop-filter",
            "visual",
            ["backdrop-filter"],
            "Blur or tint whatever sits behind an element, such as frosted glass panels",
            "good",
            "backdrop-filter",
        ),
    )


def _responsive_features() -> Iterable[FeatureDescriptor]:
    return (
        _make_def(
            "container-queries",
            "Container Queries",
            "responsive",
            ["container-type", "container-name", "container", "@container"],
            "Responsive design based on container size rather than viewport",
            "moderate",
            "CSS_containment/Container_queries",
        ),
        _make_def(
            "media-queries",
            "Media Queries",
            "responsive",
            [
                "@media",
                "min-width",
                "max-width",
                "orientation",
                "prefers-color-scheme",
                "prefers-reduced-motion",
            ],
            "Responsive design based on device characteristics",
            "excellent",
            "CSS_media_queries",
        ),
        _make_def(
            "viewport-units",
            "Dynamic Viewport Units",
            "responsive",
            ["dvh", "dvw", "svh", "lvh", "dvi", "dvb"],
            "Viewport units for full height screens that track mobile browser toolbars",
            "excellent",
            "length",
        ),
        _make_def(
            "container-style-queries",
            "CSS Container Style Queries",
            "responsive",
            ["@container style()"],
            "Style children based on custom property values of their container",
            "experimental",
            "CSS_containment/Container_size_and_style_queries",
        ),
    )


def _positioning_features() -> Iterable[FeatureDescriptor]:
    return (
        _make_def(
            "physical-offsets",
            "Physical Position Offsets",
            "positioning",
            ["left", "right", "top", "bottom"],
            "Offset positioned elements from the physical top, right, bottom and left edges",
            "excellent",
            "left",
        ),
        _make_def(
            "logical-insets",
            "Logical Inset Properties",
            "positioning",
            [
                "inset-inline-start",
                "inset-inline-end",
                "inset-block-start",
                "inset-block-end",
                "inset-inline",
                "inset-block",
            ],
            "Offset positioned elements from writing-mode relative edges",
            "excellent",
            "inset-inline-start",
        ),
        _make_def(
            "sticky-positioning",
            "Sticky Positioning",
            "positioning",
            ["position", "z-index", "isolation"],
            "Sticky headers and stacking control without scroll listeners",
            "excellent",
            "position",
        ),
        _make_def(
            "anchor-positioning",
            "CSS Anchor Positioning",
            "positioning",
            ["anchor-name", "position-anchor", "position-area", "position-try"],
            "Tether tooltips and popovers to an anchor element",
            "limited",
            "CSS_anchor_positioning",
        ),
    )


def _display_features() -> Iterable[FeatureDescriptor]:
    return (
        _make_def(
            "box-dimensions",
            "Box Dimensions",
            "display",
            ["width", "height", "min-width", "max-width", "min-height", "max-height"],
            "Physical width and height sizing of boxes",
            "excellent",
            "width",
        ),
        _make_def(
            "logical-sizing",
            "Logical Sizing Properties",
            "display",
            [
                "inline-size",
                "block-size",
                "min-inline-size",
                "max-inline-size",
                "min-block-size",
                "max-block-size",
            ],
            "Writing-mode aware sizing with inline-size and block-size",
            "excellent",
            "inline-size",
        ),
        _make_def(
            "content-visibility",
            "CSS content-visibility",
            "display",
            ["content-visibility", "contain-intrinsic-size", "contain"],
            "Skip rendering off-screen content to speed up long pages",
            "good",
            "content-visibility",
        ),
    )


def iter_feature_definitions() -> List[FeatureDescriptor]:
    defs: List[FeatureDescriptor] = []
    for builder in (
        _logical_features,
        _layout_features,
        _interaction_features,
        _animation_features,
        _visual_features,
        _responsive_features,
        _positioning_features,
        _display_features,
    ):
        defs.extend(builder())
    return defs


FEATURE_CATALOG: Tuple[FeatureDescriptor, ...] = tuple(iter_feature_definitions())


def feature_lookup() -> Dict[str, FeatureDescriptor]:
    return {d.key: d for d in FEATURE_CATALOG}


def feature_dataframe() -> pd.DataFrame:
    rows = []
    for position, definition in enumerate(FEATURE_CATALOG, start=1):
        rows.append(
            {
                "position": position,
                "key": definition.key,
                "name": definition.name,
                "category": definition.category,
                "primary_property": definition.primary_property,
                "n_properties": len(definition.properties),
                "support_tier": definition.support_tier,
                "doc_reference": definition.doc_reference,
            }
        )
    return pd.DataFrame(rows)


FEATURE_SYNTAX: Dict[str, str] = {
    "Logical Spacing Properties": """
.element {
  padding-inline: 1rem;
  padding-block: 0.5rem;
  margin-inline: auto;
  margin-block: 1rem;
  scroll-margin-inline: 1rem;
}""",
    "Modern CSS Units": """
.container {
  inline-size: min(60ch, 100%);
  padding: 1rem;
  margin-inline: auto;
  font-size: clamp(1rem, 2.5vi, 1.5rem);
}""",
    "Logical Border Properties": """
.sidebar {
  border-inline-end: 1px solid var(--border-color);
  border-block: none;
}""",
    "Logical Overflow Properties": """
.horizontal-scroll {
  overflow-inline: scroll;
  overflow-block: hidden;
  scroll-snap-type: inline mandatory;
}""",
    "Modern CSS Carousel with Pseudo-Elements": """
.carousel {
  overflow-x: scroll;
  scroll-snap-type: x mandatory;
  display: flex;
}
.carousel::scroll-button(inline-start),
.carousel::scroll-button(inline-end) {
  content: '';
}
.carousel::scroll-marker-group {
  display: flex;
  gap: 8px;
}
.carousel::scroll-marker:target-current {
  background: #007bff;
}""",
    "CSS Scroll Snap": """
.container {
  scroll-snap-type: x mandatory;
}
.item {
  scroll-snap-align: center;
}""",
    "Flexbox": """
.container {
  display: flex;
  justify-content: center;
  align-items: center;
  gap: 1rem;
}""",
    "CSS Grid": """
.container {
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
  gap: 1rem;
}""",
    "CSS Transitions": """
.element {
  transition: transform 0.3s ease;
}
.element:hover {
  transform: scale(1.05);
}""",
    "Logical Inset Properties": """
.badge {
  position: absolute;
  inset-block-start: 0;
  inset-inline-end: 0;
}""",
    "Logical Sizing Properties": """
.card {
  inline-size: 100%;
  max-inline-size: 40rem;
  min-block-size: 12rem;
}""",
    "Dynamic Viewport Units": """
.hero {
  min-block-size: 100dvh;
}""",
}

FEATURE_USE_CASES: Dict[str, List[str]] = {
    "Logical Spacing Properties": [
        "International layouts with RTL support",
        "Responsive spacing that adapts to writing direction",
        "Scroll-aware spacing for carousels",
        "Direction-agnostic component design",
    ],
    "Modern CSS Units": [
        "Responsive typography with rem/em",
        "Content-aware sizing with ch units",
        "Logical viewport units for mobile",
    ],
    "Logical Border Properties": [
        "International border styling",
        "Direction-aware component borders",
        "Accessible focus indicators",
    ],
    "Logical Overflow Properties": [
        "Direction-aware scrolling",
        "International text overflow handling",
        "Dynamic content clipping",
    ],
    "Modern CSS Carousel with Pseudo-Elements": [
        "Auto-generated carousel navigation",
        "Accessible carousel indicators",
        "Zero-JavaScript carousels",
    ],
    "CSS Scroll Snap": [
        "Smooth scrolling sections",
        "Paginated content",
        "Mobile carousels",
        "Full-screen slides",
    ],
    "Flexbox": [
        "Component layout",
        "Centering content",
        "Responsive navigation",
        "Card layouts",
    ],
    "CSS Grid": [
        "Page layouts",
        "Complex grids",
        "Responsive designs",
        "Dashboard layouts",
    ],
    "CSS Transitions": [
        "Hover effects",
        "Smooth state changes",
        "Interactive feedback",
    ],
    "Logical Inset Properties": [
        "Badges and overlays in RTL layouts",
        "Direction-agnostic positioning",
    ],
    "Logical Sizing Properties": [
        "Readable line lengths in any writing mode",
        "Vertical text layouts",
    ],
    "Dynamic Viewport Units": [
        "Full height hero sections on mobile",
        "Layouts that survive browser toolbars",
    ],
}

GENERIC_USE_CASES: List[str] = ["General styling", "UI enhancement"]


def feature_syntax(feature: FeatureDescriptor) -> str:
    syntax = FEATURE_SYNTAX.get(feature.name)
    if syntax is None:
        return f"{feature.primary_property}: value;"
    return syntax.strip()


def feature_use_cases(feature: FeatureDescriptor) -> List[str]:
    return list(FEATURE_USE_CASES.get(feature.name, GENERIC_USE_CASES))
