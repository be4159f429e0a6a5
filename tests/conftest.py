"""Shared fixtures for cssfirst tests."""

import os

import pytest
import requests

from cssfirst.config import DocsConfig, EngineConfig
from cssfirst.docs import DocumentationCache, DocumentationClient
from cssfirst.engine import RecommendationEngine
from cssfirst.static_docs import static_payload


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeTier:
    """Documentation source that records calls and returns static payloads."""

    def __init__(self, name="fake", error=None, overall_support=None, syntax=None):
        self.name = name
        self.error = error
        self.overall_support = overall_support
        self.syntax = syntax
        self.calls = []

    @property
    def call_count(self):
        return len(self.calls)

    def fetch(self, property_name):
        self.calls.append(property_name)
        if self.error is not None:
            raise self.error
        update = {"source": self.name}
        if self.overall_support is not None:
            update["overall_support"] = self.overall_support
        if self.syntax is not None:
            update["syntax"] = self.syntax
        return static_payload(property_name).model_copy(update=update)


@pytest.fixture(autouse=True)
def no_network(monkeypatch):
    """Any real HTTP call looks like an unreachable host."""

    def _blocked(*args, **kwargs):
        raise requests.ConnectionError("network disabled in tests")

    monkeypatch.setattr(requests, "get", _blocked)


@pytest.fixture(autouse=True)
def clean_env():
    """Keep CSSFIRST_* variables from leaking between tests."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("CSSFIRST_")}

    def _scrub():
        for key in list(os.environ):
            if key.startswith("CSSFIRST_"):
                del os.environ[key]

    _scrub()
    yield
    _scrub()
    os.environ.update(saved)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return DocumentationCache(ttl_seconds=3600, clock=clock)


@pytest.fixture
def make_tier():
    return FakeTier


@pytest.fixture
def structured_tier():
    return FakeTier(name="structured")


@pytest.fixture
def direct_tier():
    return FakeTier(name="direct")


@pytest.fixture
def docs_client(cache, structured_tier, direct_tier):
    return DocumentationClient(
        DocsConfig(max_workers=4),
        cache,
        structured=structured_tier,
        direct=direct_tier,
    )


@pytest.fixture
def engine(docs_client):
    return RecommendationEngine(EngineConfig(), docs=docs_client)
