"""
Shared fixtures for the affinity engine test suite.

Profiles are built from plain dictionaries the same way the assessment
store hands them over.
"""

import pytest

from affinity.schema import PersonProfile, COMPETENCY_KEYS, OUTCOME_KEYS


def make_person(
    competency=100,
    outcome=100,
    talents=None,
    style=None,
    person_id=None,
    name=None,
    contact=None
):
    """Person with every competency and outcome at a flat value."""
    return PersonProfile(
        competencies={k: competency for k in COMPETENCY_KEYS} if competency is not None else {},
        outcomes={k: outcome for k in OUTCOME_KEYS} if outcome is not None else {},
        talents=talents or {},
        style=style,
        person_id=person_id,
        name=name,
        contact=contact or {}
    )


@pytest.fixture
def flat_person():
    return make_person(person_id="p-flat", name="Flat")


@pytest.fixture
def strategist():
    return PersonProfile(
        competencies={"EL": 110, "RP": 105, "ACT": 98, "NE": 120, "IM": 101, "OP": 112, "EMP": 95, "NG": 115},
        outcomes={
            "influence": 104, "decisionMaking": 110, "network": 99, "community": 102,
            "balance": 90, "health": 97, "achievement": 118, "satisfaction": 108,
        },
        talents={"prioritizing": 120, "commitment": 112, "problemSolving": 104, "imagination": 85},
        style="Strategist",
        person_id="p-ana",
        name="Ana",
        contact={"linkedin": "https://linkedin.com/in/ana"}
    )


@pytest.fixture
def scientist():
    return PersonProfile(
        competencies={"EL": 102, "RP": 99, "ACT": 110, "NE": 104, "IM": 96, "OP": 100, "EMP": 108, "NG": 101},
        outcomes={
            "influence": 100, "decisionMaking": 115, "network": 92, "community": 98,
            "balance": 101, "health": 105, "achievement": 109, "satisfaction": 100,
        },
        talents={"prioritizing": 111, "commitment": 109, "problemSolving": 95, "imagination": 118},
        style="scientist",
        person_id="p-luis",
        name="Luis",
        contact={"twitter": "@luis"}
    )


@pytest.fixture
def empty_person():
    return PersonProfile(person_id="p-empty")
