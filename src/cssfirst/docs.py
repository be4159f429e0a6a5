"""
Documentation lookup for candidate enrichment.

Resolution order for a property:

1. the in-memory cache, while the entry is younger than the TTL;
2. the structured source (raw MDN markdown). If that host cannot be reached
   the curated static payload answers instead;
3. a direct fetch of the rendered MDN page.

Anything that fails the last tier surfaces as ``DocumentationUnavailable`` for
that one property. Successful answers from tiers 2 and 3 are cached.
"""

from __future__ import annotations

import logging
import re
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import requests
from bs4 import BeautifulSoup
from pydantic import ValidationError

from .config import CACHE_TTL_SECONDS, DocsConfig
from .errors import CacheCorruption, DocumentationUnavailable, StructuredSourceError
from .models import BrowserSupport, DocumentationPayload, PropertyDetails
from .static_docs import static_payload

LOGGER = logging.getLogger(__name__)

MAX_EXAMPLES = 3
MAX_RELATED = 8


class DocumentationCache:
    """Property-keyed payload cache with TTL-on-read.

    Entries are immutable ``(json_text, fetched_at)`` tuples swapped in under a
    lock, so a reader sees either the old entry or the new one.
    """

    def __init__(self, ttl_seconds: float = CACHE_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[str, float]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key_for(property_name: str) -> str:
        return f"mdn_{property_name.strip().lower()}"

    def get(self, property_name: str) -> Optional[DocumentationPayload]:
        key = self.key_for(property_name)
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            LOGGER.debug("Cache miss for %s", key)
            return None
        raw, fetched_at = entry
        if self._clock() - fetched_at >= self.ttl_seconds:
            LOGGER.debug("Cache entry %s expired", key)
            return None
        try:
            payload = DocumentationPayload.model_validate_json(raw)
        except ValidationError as exc:
            raise CacheCorruption(key) from exc
        LOGGER.debug("Cache hit for %s", key)
        return payload

    def set(self, property_name: str, payload: DocumentationPayload) -> None:
        entry = (payload.model_dump_json(), self._clock())
        with self._lock:
            self._entries[self.key_for(property_name)] = entry

    def invalidate(self, property_name: str) -> None:
        with self._lock:
            self._entries.pop(self.key_for(property_name), None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# ---------------------------------------------------------------------------
# Heuristic parsing
# ---------------------------------------------------------------------------

_HEADING = re.compile(r"^(#{1,6})\s+(.*?)\s*#*\s*$")
_FENCE = re.compile(r"^\s*(```|~~~)")
_HTML_HINT = re.compile(r"<\s*(html|body|main|article|h1|h2)\b", re.IGNORECASE)
_MACRO_WITH_ARG = re.compile(r"\{\{\s*[\w-]+\(\s*\"([^\"]+)\"[^}]*\}\}")
_MACRO = re.compile(r"\{\{[^}]*\}\}")
_LINK = re.compile(r"\[([^\]]+)\]\([^)]*\)")
_LIST_ITEM = re.compile(r"^\s*[-*]\s+(.*)$")


@dataclass(frozen=True)
class PartialPayload:
    """Whatever could be lifted out of a documentation page."""

    description: Optional[str] = None
    syntax: Optional[str] = None
    values: Tuple[str, ...] = ()
    examples: Tuple[str, ...] = ()
    related_properties: Tuple[str, ...] = ()
    has_compatibility: bool = False

    @property
    def is_empty(self) -> bool:
        return not (self.description or self.syntax or self.examples)

    def to_payload(self, property_name: str, source: str, defaults: DocumentationPayload) -> DocumentationPayload:
        return defaults.model_copy(
            update={
                "property": property_name,
                "source": source,
                "description": self.description or defaults.description,
                "syntax": self.syntax or defaults.syntax,
                "values": list(self.values) or list(defaults.values),
                "examples": list(self.examples) or list(defaults.examples),
                "related_properties": list(self.related_properties) or list(defaults.related_properties),
            }
        )


def _clean_inline(text: str) -> str:
    text = _MACRO_WITH_ARG.sub(r"\1", text)
    text = _MACRO.sub("", text)
    text = _LINK.sub(r"\1", text)
    text = text.replace("**", "").replace("`", "")
    return " ".join(text.split())


def html_to_markdown(html: str) -> str:
    """Flatten a rendered page into the markdown-ish shape the parser reads."""

    soup = BeautifulSoup(html, "html.parser")
    root = soup.find("main") or soup.body or soup
    lines: List[str] = []
    for node in root.find_all(["h1", "h2", "h3", "h4", "p", "pre", "li", "dt"]):
        if node.name == "pre":
            lines.extend(["```", node.get_text().strip("\n"), "```", ""])
        elif node.name in ("li", "dt"):
            if node.find_parent("pre") is None:
                lines.append(f"- {node.get_text(' ', strip=True)}")
        elif node.name == "p":
            if node.find_parent(["li", "dd"]) is None:
                lines.extend([node.get_text(" ", strip=True), ""])
        else:
            level = int(node.name[1])
            lines.extend(["", f"{'#' * level} {node.get_text(' ', strip=True)}", ""])
    return "\n".join(lines)


def _strip_front_matter(text: str) -> str:
    if text.startswith("---"):
        end = text.find("\n---", 3)
        if end != -1:
            return text[end + 4:]
    return text


def _split_sections(text: str) -> Tuple[List[str], List[Tuple[str, List[str]]]]:
    preamble: List[str] = []
    sections: List[Tuple[str, List[str]]] = []
    current = preamble
    in_fence = False
    for line in text.splitlines():
        if _FENCE.match(line):
            in_fence = not in_fence
            current.append(line)
            continue
        heading = None if in_fence else _HEADING.match(line)
        if heading:
            current = []
            sections.append((_clean_inline(heading.group(2)).lower(), current))
        else:
            current.append(line)
    return preamble, sections


def _section(sections: Sequence[Tuple[str, List[str]]], *titles: str) -> List[str]:
    for title, lines in sections:
        if any(title.startswith(t) for t in titles):
            return lines
    return []


def _fences(lines: Iterable[str]) -> List[str]:
    blocks: List[str] = []
    buffer: List[str] = []
    in_fence = False
    for line in lines:
        if _FENCE.match(line):
            if in_fence:
                block = "\n".join(buffer).strip()
                if block:
                    blocks.append(block)
                buffer = []
            in_fence = not in_fence
        elif in_fence:
            buffer.append(line)
    return blocks


def _first_paragraph(lines: Iterable[str]) -> Optional[str]:
    paragraph: List[str] = []
    in_fence = False
    for line in lines:
        if _FENCE.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        stripped = line.strip()
        if not stripped or _LIST_ITEM.match(line):
            if paragraph:
                break
            continue
        cleaned = _clean_inline(stripped)
        if cleaned:
            paragraph.append(cleaned)
    return " ".join(paragraph) or None


def _list_items(lines: Iterable[str]) -> List[str]:
    items = []
    for line in lines:
        match = _LIST_ITEM.match(line)
        if match and not line.startswith((" ", "\t")):
            items.append(match.group(1))
    return items


def _values(lines: Iterable[str]) -> List[str]:
    values = []
    for item in _list_items(lines):
        if item.startswith(":"):
            continue
        value = _clean_inline(item)
        if value and " " not in value and len(value) <= 40:
            values.append(value)
    return list(dict.fromkeys(values))


def parse_documentation(raw_text: str) -> PartialPayload:
    """Lift description, syntax, values, examples and see-also links from a page.

    Accepts MDN markdown or rendered HTML. Missing sections leave the matching
    field empty; nothing here raises on odd input.
    """

    if not raw_text or not raw_text.strip():
        return PartialPayload()
    text = html_to_markdown(raw_text) if _HTML_HINT.search(raw_text) else raw_text
    preamble, sections = _split_sections(_strip_front_matter(text.lstrip()))

    description = _first_paragraph(preamble)
    if description is None and sections:
        description = _first_paragraph(sections[0][1])

    syntax_lines = _section(sections, "syntax")
    syntax_blocks = _fences(syntax_lines)
    values = _values(_section(sections, "values"))

    example_blocks = _fences(_section(sections, "examples", "example"))
    if not example_blocks:
        example_blocks = _fences(line for _, lines in sections for line in lines)
        example_blocks = [b for b in example_blocks if not syntax_blocks or b != syntax_blocks[0]]

    related = [_clean_inline(item) for item in _list_items(_section(sections, "see also"))]
    related = [r for r in related if r]

    return PartialPayload(
        description=description,
        syntax=syntax_blocks[0] if syntax_blocks else None,
        values=tuple(values),
        examples=tuple(example_blocks[:MAX_EXAMPLES]),
        related_properties=tuple(dict.fromkeys(related[:MAX_RELATED])),
        has_compatibility=any("browser compatibility" in title for title, _ in sections),
    )


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


def _slug(property_name: str) -> str:
    slug = property_name.strip().lower()
    slug = slug.replace("()", "").replace(" ", "_")
    return slug.lstrip(":@") or slug


class StructuredSource:
    """Raw MDN markdown. Unreachable upstream answers with static data."""

    name = "structured"

    def __init__(self, config: DocsConfig):
        self.config = config

    def url_for(self, property_name: str) -> str:
        return f"{self.config.structured_base_url}/{_slug(property_name)}/index.md"

    def fetch(self, property_name: str) -> DocumentationPayload:
        url = self.url_for(property_name)
        try:
            response = requests.get(
                url,
                headers={"User-Agent": self.config.user_agent},
                timeout=self.config.timeout_seconds,
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            LOGGER.warning("Structured source unreachable for %s, using static data: %s", property_name, exc)
            return static_payload(property_name)
        except requests.RequestException as exc:
            raise StructuredSourceError(f"{url}: {exc}") from exc

        if response.status_code != 200:
            raise StructuredSourceError(f"{url} answered HTTP {response.status_code}")
        partial = parse_documentation(response.text)
        if partial.is_empty:
            raise StructuredSourceError(f"{url} had no recognizable sections")
        return partial.to_payload(property_name, self.name, static_payload(property_name))


class DirectSource:
    """Rendered MDN page, parsed from HTML."""

    name = "direct"

    def __init__(self, config: DocsConfig):
        self.config = config

    def url_for(self, property_name: str) -> str:
        return f"{self.config.mdn_base_url}/{property_name.strip()}"

    def fetch(self, property_name: str) -> DocumentationPayload:
        url = self.url_for(property_name)
        try:
            response = requests.get(
                url,
                headers={"User-Agent": self.config.user_agent},
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DocumentationUnavailable(property_name, str(exc)) from exc
        partial = parse_documentation(response.text)
        return partial.to_payload(property_name, self.name, static_payload(property_name))


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class DocumentationClient:
    def __init__(
        self,
        config: Optional[DocsConfig] = None,
        cache: Optional[DocumentationCache] = None,
        structured=None,
        direct=None,
    ):
        self.config = config or DocsConfig()
        self.cache = cache if cache is not None else DocumentationCache()
        self.structured = structured or StructuredSource(self.config)
        self.direct = direct or DirectSource(self.config)

    def _cached(self, property_name: str) -> Optional[DocumentationPayload]:
        try:
            return self.cache.get(property_name)
        except CacheCorruption as exc:
            LOGGER.warning("%s, refetching", exc)
            self.cache.invalidate(property_name)
            return None

    def resolve(self, property_name: str) -> DocumentationPayload:
        name = property_name.strip() if isinstance(property_name, str) else ""
        if not name:
            raise DocumentationUnavailable(str(property_name), "empty property name")

        cached = self._cached(name)
        if cached is not None:
            return cached
        if not self.config.enabled:
            return static_payload(name)

        try:
            payload = self.structured.fetch(name)
        except Exception as exc:
            LOGGER.warning("Structured documentation failed for %s, trying direct fetch: %s", name, exc)
            payload = self._fetch_direct(name)
        self.cache.set(name, payload)
        return payload

    def _fetch_direct(self, name: str) -> DocumentationPayload:
        try:
            return self.direct.fetch(name)
        except DocumentationUnavailable:
            raise
        except Exception as exc:
            raise DocumentationUnavailable(name, str(exc)) from exc

    def resolve_or_static(self, property_name: str) -> DocumentationPayload:
        try:
            return self.resolve(property_name)
        except DocumentationUnavailable as exc:
            LOGGER.warning("%s, using static fallback", exc)
            return static_payload(str(property_name).strip())

    def resolve_many(self, property_names: Sequence[str]) -> List[DocumentationPayload]:
        """Resolve several properties concurrently, keeping input order."""

        if not property_names:
            return []
        workers = max(1, min(self.config.max_workers, len(property_names)))
        if workers == 1:
            return [self.resolve_or_static(name) for name in property_names]
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self.resolve_or_static, property_names))

    def resolve_support(self, property_name: str, include_experimental: bool = False) -> BrowserSupport:
        return self.resolve_or_static(property_name).support(include_experimental)

    def resolve_details(self, property_name: str, include_examples: bool = True) -> PropertyDetails:
        return self.resolve_or_static(property_name).details(include_examples)
