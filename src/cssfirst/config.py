from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)

MDN_CSS_BASE_URL = "https://developer.mozilla.org/en-US/docs/Web/CSS"
MDN_CONTENT_BASE_URL = (
    "https://raw.githubusercontent.com/mdn/content/main/files/en-us/web/css"
)

CACHE_TTL_SECONDS = 60 * 60
MAX_RESULTS = 5


@dataclass
class RankingWeights:
    """Additive bonuses applied before the confidence multiplier."""

    intent_match: float = 10.0
    tier_excellent: float = 5.0
    tier_good: float = 3.0
    framework_affinity: float = 3.0


@dataclass
class CacheConfig:
    ttl_seconds: float = CACHE_TTL_SECONDS


@dataclass
class DocsConfig:
    """Where and how documentation is fetched for candidate enrichment."""

    mdn_base_url: str = MDN_CSS_BASE_URL
    structured_base_url: str = MDN_CONTENT_BASE_URL
    timeout_seconds: float = 10.0
    user_agent: str = "cssfirst/1.0 (+https://developer.mozilla.org)"
    max_workers: int = 4
    enabled: bool = True


@dataclass
class EngineConfig:
    ranking: RankingWeights = field(default_factory=RankingWeights)
    cache: CacheConfig = field(default_factory=CacheConfig)
    docs: DocsConfig = field(default_factory=DocsConfig)
    max_results: int = MAX_RESULTS


def _env_number(name: str, cast, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        LOGGER.warning("Ignoring malformed %s=%r, keeping %r", name, raw, default)
        return default


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_config(dotenv_path: Optional[str] = None) -> EngineConfig:
    """Build an EngineConfig from defaults overridden by CSSFIRST_* variables."""

    load_dotenv(dotenv_path)
    config = EngineConfig()
    config.cache.ttl_seconds = _env_number(
        "CSSFIRST_CACHE_TTL", float, config.cache.ttl_seconds
    )
    config.docs.timeout_seconds = _env_number(
        "CSSFIRST_DOCS_TIMEOUT", float, config.docs.timeout_seconds
    )
    config.docs.mdn_base_url = os.getenv(
        "CSSFIRST_MDN_BASE_URL", config.docs.mdn_base_url
    ).rstrip("/")
    config.docs.structured_base_url = os.getenv(
        "CSSFIRST_STRUCTURED_BASE_URL", config.docs.structured_base_url
    ).rstrip("/")
    config.docs.enabled = not _env_flag("CSSFIRST_OFFLINE", False)
    config.max_results = _env_number("CSSFIRST_MAX_RESULTS", int, config.max_results)
    return config
