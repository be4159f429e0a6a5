"""Tests for the intent classifier."""

import pytest

from cssfirst.errors import InvalidInput
from cssfirst.intent import (
    INTENT_PATTERNS,
    analyze_task_intent,
    detect_framework_hints,
    validate_description,
)

TOTAL_PATTERNS = sum(len(entry["patterns"]) for entry in INTENT_PATTERNS.values())


class TestAnalyzeTaskIntent:
    """Tests for analyze_task_intent."""

    def test_empty_description_is_zero_confidence(self):
        """An empty description gives no intents and confidence 0."""
        analysis = analyze_task_intent("")
        assert analysis.confidence == 0
        assert analysis.intents == ()
        assert analysis.suggested_categories == ()

    def test_non_string_description_degrades(self):
        """Non-string input degrades instead of raising."""
        analysis = analyze_task_intent(None)
        assert analysis.confidence == 0
        assert analysis.intents == ()

    def test_centering_is_layout(self):
        """Centering text maps to the layout intent and category."""
        analysis = analyze_task_intent("center a div horizontally and vertically")
        assert "layout" in analysis.intents
        assert "layout" in analysis.suggested_categories
        assert analysis.confidence == pytest.approx(1 / TOTAL_PATTERNS)

    def test_confidence_is_global_ratio(self):
        """Confidence divides all matches by every pattern evaluated."""
        analysis = analyze_task_intent("animate a button on hover with smooth color transition")
        assert set(analysis.intents) == {"animation", "interaction", "visual"}
        assert analysis.confidence == pytest.approx(5 / TOTAL_PATTERNS)

    def test_spacing_suggests_logical_category(self):
        """The spacing intent points at logical properties."""
        analysis = analyze_task_intent("add padding inside the card")
        assert "spacing" in analysis.intents
        assert "logical" in analysis.suggested_categories

    @pytest.mark.parametrize(
        "description",
        [
            "center it",
            "animate a button on hover with smooth color transition",
            "responsive grid with gaps between columns that adapt on mobile",
        ],
    )
    def test_confidence_in_unit_interval(self, description):
        """Confidence always lies in [0, 1]."""
        assert 0 <= analyze_task_intent(description).confidence <= 1

    def test_framework_hints_merge_context_and_text(self):
        """Hints from context and from the text are unioned without duplicates."""
        analysis = analyze_task_intent("React component with tailwind classes", project_context="react, vue")
        hints = analysis.framework_hints
        assert {"react", "vue", "tailwind"} <= set(hints)
        assert len(hints) == len(set(hints))

    def test_keywords_are_attached(self):
        """Extracted keywords travel with the analysis."""
        analysis = analyze_task_intent("full height hero")
        assert "dvh" in analysis.keywords

    def test_explanation_and_dict(self):
        """The explanation reports confidence and detected intents."""
        analysis = analyze_task_intent("center a div")
        data = analysis.to_dict()
        assert data["explanation"].startswith("Analyzed with 5% confidence.")
        assert "layout" in data["explanation"]
        assert data["intent"] == ["layout"]


class TestHelpers:
    """Tests for validation and indicator scanning."""

    @pytest.mark.parametrize("value", ["", "   ", None, 3])
    def test_validate_description_rejects(self, value):
        """Empty and non-string descriptions are invalid."""
        with pytest.raises(InvalidInput):
            validate_description(value)

    def test_detect_framework_hints(self):
        """Indicator substrings map to ecosystems."""
        assert detect_framework_hints("use v-for in the template") == ["vue"]
        assert detect_framework_hints("plain css") == []

    @pytest.mark.parametrize(
        "description, intent",
        [
            ("highlight the card on hover", "animation"),
            ("scale the logo", "responsive"),
            ("match the house style", "visual"),
        ],
    )
    def test_pattern_vocabulary(self, description, intent):
        """Words shared between intents count for each of them."""
        assert intent in analyze_task_intent(description).intents

    def test_bootstrap_grid_words(self):
        """Bootstrap's row and container classes hint at bootstrap."""
        assert detect_framework_hints("a container holding one row") == ["bootstrap"]
