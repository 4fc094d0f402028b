"""Tests for free-text context, closeness and style normalization."""

import pytest

from affinity.normalization import (
    normalize_context,
    normalize_closeness,
    closeness_multiplier,
    parse_cognitive_style,
)
from affinity.schema import RelationalContext, Closeness, CognitiveStyle


class TestNormalizeContext:
    @pytest.mark.parametrize("raw,expected", [
        ("Liderazgo", RelationalContext.LEADERSHIP),
        ("leadership", RelationalContext.LEADERSHIP),
        ("relaciones", RelationalContext.RELATIONSHIP),
        ("Relationship", RelationalContext.RELATIONSHIP),
        ("  INNOVACIÓN ", RelationalContext.INNOVATION),
        ("innovation", RelationalContext.INNOVATION),
        ("conversación", RelationalContext.CONVERSATION),
        ("conversation", RelationalContext.CONVERSATION),
        ("decisiones", RelationalContext.DECISION),
        ("decision", RelationalContext.DECISION),
        ("ejecución", RelationalContext.EXECUTION),
    ])
    def test_aliases(self, raw, expected):
        assert normalize_context(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "something else", "🙂"])
    def test_unmapped_defaults_to_execution(self, raw):
        assert normalize_context(raw) == RelationalContext.EXECUTION

    def test_accepts_enum_member(self):
        assert normalize_context(RelationalContext.DECISION) == RelationalContext.DECISION


class TestNormalizeCloseness:
    @pytest.mark.parametrize("raw,expected", [
        ("cercano", Closeness.CLOSE),
        ("Close", Closeness.CLOSE),
        ("vicino", Closeness.CLOSE),
        ("lejano", Closeness.FAR),
        ("far", Closeness.FAR),
        ("neutral", Closeness.NEUTRAL),
    ])
    def test_aliases(self, raw, expected):
        assert normalize_closeness(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "best friends"])
    def test_unmapped_defaults_to_neutral(self, raw):
        assert normalize_closeness(raw) == Closeness.NEUTRAL

    def test_multipliers(self):
        assert closeness_multiplier("close") == 1.0
        assert closeness_multiplier(None) == 0.9
        assert closeness_multiplier("distante") == 0.75


class TestParseCognitiveStyle:
    def test_case_insensitive(self):
        assert parse_cognitive_style("strategist") == CognitiveStyle.STRATEGIST
        assert parse_cognitive_style("VISIONARY") == CognitiveStyle.VISIONARY

    def test_unknown_is_none(self):
        assert parse_cognitive_style("Wizard") is None
        assert parse_cognitive_style(None) is None
