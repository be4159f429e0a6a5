"""
CSS-first recommendation engine.

The package provides utilities for:
    * classifying a UI task description into CSS feature categories,
    * detecting framework and build-tool hints in project context,
    * ranking catalog features by intent, support tier and framework fit,
    * resolving MDN documentation through a cached, tiered client.

Everything runs locally; the documentation tiers fall back to curated static
data when MDN cannot be reached.
"""

from __future__ import annotations

from typing import Any

__all__ = ["RecommendationEngine", "suggest"]


def suggest(*args: Any, **kwargs: Any):
    """Lazy wrapper so importing cssfirst doesn't pull pandas immediately."""

    from .engine import RecommendationEngine as _RecommendationEngine

    return _RecommendationEngine().suggest(*args, **kwargs)


def __getattr__(name: str):
    if name == "RecommendationEngine":
        from .engine import RecommendationEngine

        return RecommendationEngine
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
