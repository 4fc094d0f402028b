"""Tests for profile and result data structures."""

import pytest

from affinity.schema import (
    AffinityResult,
    CognitiveStyle,
    CompetencyProfile,
    ContactFields,
    PersonProfile,
    SubScores,
    TalentProfile,
)


class TestScoreProfiles:
    def test_values_are_coerced(self):
        profile = CompetencyProfile.from_dict({"EL": "101", "RP": "", "ACT": None, "NE": 99})
        assert profile.get("EL") == 101.0
        assert profile.get("RP") is None
        assert profile.get("ACT") is None
        assert profile.present_values() == [101.0, 99.0]

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="Unknown competency key"):
            CompetencyProfile.from_dict({"XYZ": 100})

    def test_unknown_talent_rejected(self):
        with pytest.raises(ValueError, match="Unknown talent key"):
            TalentProfile.from_dict({"juggling": 120})

    def test_empty(self):
        assert CompetencyProfile().is_empty()
        assert CompetencyProfile.from_dict({"EL": None}).is_empty()


class TestTalentKeys:
    def test_stored_spellings_accepted(self):
        talents = TalentProfile.from_dict({"designing": 120, "brainAgility": 110})
        assert talents.get("design") == 120.0
        assert talents.get("brainAgility") == 110.0
        assert "designing" not in talents.to_dict()

    def test_missing_alias_keeps_present_value(self):
        talents = TalentProfile.from_dict({"design": 115, "designing": None})
        assert talents.get("design") == 115.0

    def test_store_profile_builds(self):
        person = PersonProfile.from_dict({
            "competencies": {"EL": 104},
            "talents": {"designing": 120, "brainAgility": 110, "vision": 101},
        })
        assert person.talents.present_values() == [101.0, 120.0, 110.0]


class TestContactFields:
    def test_unknown_handle_rejected(self):
        with pytest.raises(ValueError, match="Unknown contact keys"):
            PersonProfile(contact={"myspace": "tom"})

    def test_from_dict_none(self):
        assert ContactFields.from_dict(None) == ContactFields()


class TestPersonProfile:
    def test_accepts_dicts_and_style_string(self):
        person = PersonProfile(competencies={"EL": 100}, style="sage")
        assert isinstance(person.competencies, CompetencyProfile)
        assert person.style == CognitiveStyle.SAGE

    def test_unknown_style_becomes_none(self):
        assert PersonProfile(style="Wizard").style is None

    def test_has_assessment_data(self):
        assert not PersonProfile().has_assessment_data
        assert not PersonProfile(talents={"vision": 120}).has_assessment_data
        assert PersonProfile(outcomes={"health": 90}).has_assessment_data
        assert PersonProfile(competencies={"EL": 90}).has_assessment_data

    def test_dict_round_trip(self, strategist):
        restored = PersonProfile.from_dict(strategist.to_dict())
        assert restored == strategist


class TestAffinityResult:
    def test_not_available_has_no_score(self):
        result = AffinityResult.not_available("execution", "subject has no assessment data")
        data = result.to_dict()
        assert data["available"] is False
        assert data["reason"] == "subject has no assessment data"
        assert "composite" not in data
        assert "heat" not in data

    def test_dict_round_trip(self):
        result = AffinityResult(
            context="leadership",
            composite=101.2,
            heat=75,
            level="Functional",
            band="warm",
            parts=SubScores(growth=110.0, collaboration=95.0, understanding=120.0),
            closeness="close",
            adjustments={"bias": 1.0},
            subject_id="a",
            counterpart_id="b"
        )
        assert AffinityResult.from_dict(result.to_dict()) == result
