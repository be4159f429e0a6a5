from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple


@dataclass(frozen=True)
class KeywordRule:
    """Fires when any ``any_of`` term and every ``all_of`` term appear."""

    tokens: Tuple[str, ...]
    any_of: Tuple[str, ...] = ()
    all_of: Tuple[str, ...] = ()

    def fires(self, text: str) -> bool:
        if self.any_of and not any(term in text for term in self.any_of):
            return False
        if self.all_of and not all(term in text for term in self.all_of):
            return False
        return bool(self.any_of or self.all_of)


def _rule(tokens: Sequence[str], any_of: Sequence[str] = (), all_of: Sequence[str] = ()) -> KeywordRule:
    return KeywordRule(tokens=tuple(tokens), any_of=tuple(any_of), all_of=tuple(all_of))


KEYWORD_RULES: Tuple[KeywordRule, ...] = (
    _rule(["center", "align", "justify", "logical-spacing"], any_of=["center", "centre", "align"]),
    _rule(["logical-spacing", "spacing-units", "padding", "margin"], any_of=["padding", "margin", "spacing"]),
    _rule(["border-logical", "border"], any_of=["border", "outline"]),
    _rule(["overflow-logical", "overflow"], any_of=["overflow", "scroll", "clip"]),
    _rule(["carousel", "scroll", "snap", "overflow"], any_of=["carousel", "slider", "gallery"]),
    _rule(["animation", "transition", "transform"], any_of=["animate", "transition", "smooth"]),
    _rule(["layout", "grid", "flex"], any_of=["layout", "grid", "flex"]),
    _rule(["responsive", "media", "container"], any_of=["responsive", "mobile", "tablet"]),
    _rule(["viewport", "dvh", "svh", "lvh"], all_of=["full", "height"]),
    _rule(["viewport", "dvh", "svh", "lvh"], any_of=["viewport", "100vh", "screen height"]),
    _rule(["inline", "block", "logical", "writing-mode"], any_of=["rtl", "ltr", "writing mode", "right-to-left"]),
    _rule(["gradient", "color"], any_of=["gradient"]),
    _rule(["color-mix", "color-scheme", "light-dark"], any_of=["dark mode", "theme", "color scheme"]),
    _rule(["position", "sticky", "inset"], any_of=["sticky", "fixed header", "overlay", "badge"]),
    _rule(["anchor", "position-anchor", "popover"], any_of=["tooltip", "popover", "popup", "dropdown"]),
    _rule(["focus", "outline"], any_of=["keyboard", "focus"]),
    _rule(["aspect-ratio"], any_of=["aspect ratio", "square", "16:9", "thumbnail"]),
    _rule(["inline-size", "block-size", "width", "height"], any_of=["width", "height", "size"]),
    _rule(["@layer", "cascade"], any_of=["specificity", "cascade", "layer"]),
)


def extract_keywords(description: str, rules: Iterable[KeywordRule] = KEYWORD_RULES) -> List[str]:
    """Scan a description and return the deduplicated tokens of every firing rule."""

    if not isinstance(description, str):
        return []
    text = description.lower()
    if not text.strip():
        return []
    keywords: List[str] = []
    for rule in rules:
        if rule.fires(text):
            keywords.extend(rule.tokens)
    return list(dict.fromkeys(keywords))


def normalize_keywords(keywords: Iterable[str]) -> List[str]:
    """Clean a caller-supplied keyword list for the legacy search path."""

    cleaned: List[str] = []
    for kw in keywords:
        if not isinstance(kw, str):
            continue
        kw = kw.strip().lower()
        if kw:
            cleaned.append(kw)
    return list(dict.fromkeys(cleaned))
