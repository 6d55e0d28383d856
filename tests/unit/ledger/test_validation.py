"""Tests for the session vocabulary rules."""

import datetime

import pytest

from app.ledger.validation import (
    INTENSITIES,
    PERFORMANCES,
    PRODUCTIVITIES,
    SESSION_TYPES,
    validate_session,
)
from app.schemas.climbing_session import ClimbingSessionCreate, InjuryData


def _payload(**overrides) -> ClimbingSessionCreate:
    data = {
        "date": datetime.date(2026, 1, 26),
        "types": ["boulder"],
        "intensity": "moderate",
        "performance": "normal",
        "productivity": "normal",
    }
    data.update(overrides)
    return ClimbingSessionCreate(**data)


def test_vocabularies():
    assert SESSION_TYPES == {"boulder", "routes", "board", "hangboard", "strength", "prehab"}
    assert INTENSITIES == {"easy", "moderate", "hard"}
    assert PERFORMANCES == {"weak", "normal", "strong"}
    assert PRODUCTIVITIES == {"low", "normal", "high"}


def test_valid_payload_has_no_violations():
    assert validate_session(_payload(types=sorted(SESSION_TYPES))) == []


def test_invalid_type_names_field_and_vocabulary():
    violations = validate_session(_payload(types=["boulder", "swimming"]))
    assert len(violations) == 1
    assert violations[0].field == "types"
    assert "swimming" in violations[0].message
    assert "hangboard" in violations[0].message


@pytest.mark.parametrize(
    "field, value",
    [
        ("intensity", "extreme"),
        ("performance", "amazing"),
        ("productivity", "medium"),
    ],
)
def test_invalid_choice(field, value):
    violations = validate_session(_payload(**{field: value}))
    assert [v.field for v in violations] == [field]
    assert value in violations[0].message


def test_choices_are_case_sensitive():
    assert [v.field for v in validate_session(_payload(intensity="Hard"))] == ["intensity"]


def test_blank_injury_location():
    payload = _payload(injuries=[InjuryData(location="finger"), InjuryData(location="   ")])
    violations = validate_session(payload)
    assert [v.field for v in violations] == ["injuries[1].location"]


def test_reports_every_violation():
    payload = _payload(types=["yoga"], intensity="max", performance="meh", productivity="none")
    assert [v.field for v in validate_session(payload)] == ["types", "intensity", "performance", "productivity"]
