"""Tests for the growth, understanding and collaboration sub-scores."""

import pytest

from affinity.configs import get_context_profile
from affinity.schema import (
    CognitiveStyle,
    CompetencyProfile,
    OutcomeProfile,
    RelationalContext,
    TalentProfile,
    COMPETENCY_KEYS,
    OUTCOME_KEYS,
)
from affinity.scoring import (
    growth_score,
    understanding_score,
    talent_synergy,
    relational_mean,
    collaboration_score,
    style_compatibility,
    STYLE_COMPATIBILITY,
)

EXECUTION = get_context_profile(RelationalContext.EXECUTION)


def flat_competencies(value):
    return CompetencyProfile.from_dict({k: value for k in COMPETENCY_KEYS})


def flat_outcomes(value):
    return OutcomeProfile.from_dict({k: value for k in OUTCOME_KEYS})


# ── growth ────────────────────────────────────────────────────────

class TestGrowth:
    def test_identical_profiles(self):
        result = growth_score(flat_competencies(100), flat_competencies(100), EXECUTION.competency_weights)
        assert result.similarity == pytest.approx(135.0)
        assert result.level == pytest.approx(100.0)
        assert result.score == pytest.approx(119.25)

    def test_symmetric(self, strategist, scientist):
        forward = growth_score(strategist.competencies, scientist.competencies, EXECUTION.competency_weights)
        backward = growth_score(scientist.competencies, strategist.competencies, EXECUTION.competency_weights)
        assert forward.score == pytest.approx(backward.score)

    def test_deterministic(self, strategist, scientist):
        first = growth_score(strategist.competencies, scientist.competencies, EXECUTION.competency_weights)
        second = growth_score(strategist.competencies, scientist.competencies, EXECUTION.competency_weights)
        assert first == second

    def test_empty_side_uses_neutral_level(self):
        result = growth_score(CompetencyProfile(), flat_competencies(100), EXECUTION.competency_weights)
        assert result.similarity == pytest.approx(135.0)
        assert result.level == pytest.approx(83.75)
        assert result.score == pytest.approx(111.9375)

    def test_larger_gap_lowers_similarity(self):
        close = growth_score(flat_competencies(100), flat_competencies(105), EXECUTION.competency_weights)
        far = growth_score(flat_competencies(100), flat_competencies(130), EXECUTION.competency_weights)
        assert far.similarity < close.similarity

    def test_bounded(self):
        result = growth_score(flat_competencies(0), flat_competencies(135), EXECUTION.competency_weights)
        assert 0 <= result.score <= 135


# ── understanding ─────────────────────────────────────────────────

class TestUnderstanding:
    def test_identical_outcomes(self):
        assert understanding_score(flat_outcomes(100), flat_outcomes(100), EXECUTION.outcome_weights) == pytest.approx(135.0)

    def test_missing_side_substitutes_neutral(self):
        score = understanding_score(OutcomeProfile(), flat_outcomes(100), EXECUTION.outcome_weights)
        assert score == pytest.approx(102.5)

    def test_uniform_gap(self):
        score = understanding_score(flat_outcomes(90), flat_outcomes(110), EXECUTION.outcome_weights)
        assert score == pytest.approx(115.0)


# ── talent synergy ────────────────────────────────────────────────

class TestTalentSynergy:
    def test_no_overlap_is_exactly_neutral(self):
        subject = TalentProfile.from_dict({"prioritizing": 130})
        counterpart = TalentProfile.from_dict({"commitment": 130})
        assert talent_synergy(subject, counterpart, EXECUTION.talent_weights) == 1.0

    def test_no_talents_is_exactly_neutral(self):
        assert talent_synergy(TalentProfile(), TalentProfile(), EXECUTION.talent_weights) == 1.0

    def test_maximum(self):
        both = TalentProfile.from_dict({"prioritizing": 135})
        assert talent_synergy(both, both, EXECUTION.talent_weights) == pytest.approx(1.1)

    def test_minimum(self):
        both = TalentProfile.from_dict({"prioritizing": 0})
        assert talent_synergy(both, both, EXECUTION.talent_weights) == pytest.approx(0.9)

    def test_unweighted_talent_ignored(self):
        both = TalentProfile.from_dict({"imagination": 135})
        assert talent_synergy(both, both, EXECUTION.talent_weights) == 1.0


# ── collaboration ─────────────────────────────────────────────────

class TestCollaboration:
    def test_style_table_symmetric_with_low_diagonal(self):
        for a in CognitiveStyle:
            assert STYLE_COMPATIBILITY[a][a] == 60
            for b in CognitiveStyle:
                assert STYLE_COMPATIBILITY[a][b] == STYLE_COMPATIBILITY[b][a]
                if a != b:
                    assert STYLE_COMPATIBILITY[a][b] > STYLE_COMPATIBILITY[a][a]

    def test_unknown_style_uses_default(self):
        assert style_compatibility(None, CognitiveStyle.SAGE) == 60
        assert style_compatibility(CognitiveStyle.SAGE, None) == 60

    def test_relational_mean_neutral_for_missing_keys(self):
        subject = CompetencyProfile.from_dict({"EMP": 120})
        expected = (110 + 5 * 67.5) / 6
        assert relational_mean(subject, flat_competencies(100)) == pytest.approx(expected)

    def test_unknown_styles(self):
        score = collaboration_score(None, None, flat_competencies(100), flat_competencies(100))
        assert score == pytest.approx(89.55)

    def test_known_styles(self):
        score = collaboration_score(
            CognitiveStyle.STRATEGIST, CognitiveStyle.SCIENTIST,
            flat_competencies(100), flat_competencies(100)
        )
        assert score == pytest.approx(0.55 * 128.25 + 0.45 * 100)

    def test_synergy_scales_and_clamps(self):
        base = collaboration_score(None, None, flat_competencies(100), flat_competencies(100))
        boosted = collaboration_score(None, None, flat_competencies(100), flat_competencies(100), synergy=1.1)
        assert boosted == pytest.approx(base * 1.1)
        capped = collaboration_score(
            CognitiveStyle.STRATEGIST, CognitiveStyle.SCIENTIST,
            flat_competencies(135), flat_competencies(135), synergy=1.1
        )
        assert capped == 135
