"""
Pydantic shapes returned to the host process.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class BrowserVersion(BaseModel):
    version: str = Field(..., description="Minimum version with support, e.g. '90+'")
    support: str = Field("full", description="full, partial or none")


def _default_browsers() -> Dict[str, BrowserVersion]:
    return {
        "chrome": BrowserVersion(version="90+"),
        "firefox": BrowserVersion(version="88+"),
        "safari": BrowserVersion(version="14+"),
        "edge": BrowserVersion(version="90+"),
    }


class BrowserSupport(BaseModel):
    overall_support: float = Field(..., ge=0, le=100)
    browsers: Dict[str, BrowserVersion] = Field(default_factory=_default_browsers)
    experimental_features: List[str] = Field(default_factory=list)


class PropertyDetails(BaseModel):
    description: str
    syntax: str
    values: List[str] = Field(default_factory=list)
    examples: List[str] = Field(default_factory=list)
    related_properties: List[str] = Field(default_factory=list)


class DocumentationPayload(BaseModel):
    """Unit stored in the documentation cache."""

    property: str
    source: str = Field("static", description="structured, direct or static")
    description: str
    syntax: str
    values: List[str] = Field(default_factory=list)
    examples: List[str] = Field(default_factory=list)
    related_properties: List[str] = Field(default_factory=list)
    overall_support: float = Field(80.0, ge=0, le=100)
    browsers: Dict[str, BrowserVersion] = Field(default_factory=_default_browsers)
    experimental_features: List[str] = Field(default_factory=list)

    def support(self, include_experimental: bool = False) -> BrowserSupport:
        return BrowserSupport(
            overall_support=self.overall_support,
            browsers=dict(self.browsers),
            experimental_features=list(self.experimental_features) if include_experimental else [],
        )

    def details(self, include_examples: bool = True) -> PropertyDetails:
        return PropertyDetails(
            description=self.description,
            syntax=self.syntax,
            values=list(self.values),
            examples=list(self.examples) if include_examples else [],
            related_properties=list(self.related_properties),
        )


class SupportSummary(BaseModel):
    overall_support: float
    modern_browsers: bool
    legacy_support: str

    @classmethod
    def from_overall(cls, overall_support: float) -> "SupportSummary":
        return cls(
            overall_support=overall_support,
            modern_browsers=overall_support >= 85,
            legacy_support="good" if overall_support >= 70 else "limited",
        )


class Suggestion(BaseModel):
    property: str
    feature: str
    description: str
    syntax: str
    browser_support: SupportSummary
    use_cases: List[str] = Field(default_factory=list)
    mdn_url: str
    needs_consent: bool = True
    consent_message: Optional[str] = None
    relevance_score: Optional[float] = Field(None, exclude=True)


class SuggestResponse(BaseModel):
    success: bool
    message: str
    suggestions: List[Suggestion] = Field(default_factory=list)
    analysis: Optional[Dict[str, Any]] = None


class SupportResponse(BaseModel):
    property: str
    browser_support: BrowserSupport
    recommendation: str
    safe_to_use: bool


class DetailsResponse(BaseModel):
    property: str
    details: PropertyDetails
    mdn_url: str


class ImplementationGuidance(BaseModel):
    basic_usage: str
    best_practices: List[str] = Field(default_factory=list)
    fallbacks: List[str] = Field(default_factory=list)
    example_code: str = ""


class ConsentResponse(BaseModel):
    property: str
    approved: bool
    message: str
    alternatives: List[str] = Field(default_factory=list)
    implementation_guidance: Optional[ImplementationGuidance] = None
