"""
Session vocabulary rules.

The allowed values for session types, intensity, performance and
productivity are fixed. :func:`validate_session` reports every rule a
payload breaks as a :class:`FieldViolation`; it never raises, so the
caller decides how to surface the result.
"""

from dataclasses import dataclass
from typing import Iterable

from app.schemas.climbing_session import ClimbingSessionBase

SESSION_TYPES: frozenset[str] = frozenset({"boulder", "routes", "board", "hangboard", "strength", "prehab"})
INTENSITIES: frozenset[str] = frozenset({"easy", "moderate", "hard"})
PERFORMANCES: frozenset[str] = frozenset({"weak", "normal", "strong"})
PRODUCTIVITIES: frozenset[str] = frozenset({"low", "normal", "high"})


@dataclass(frozen=True)
class FieldViolation:
    """One broken rule: the field path and a readable message."""

    field: str
    message: str


def _allowed(values: Iterable[str]) -> str:
    return ", ".join(sorted(values))


def _check_choice(field: str, value: str, allowed: frozenset[str]) -> list[FieldViolation]:
    if value in allowed:
        return []
    return [FieldViolation(field, f"Invalid {field}: '{value}'. Valid values: {_allowed(allowed)}")]


def validate_session(data: ClimbingSessionBase) -> list[FieldViolation]:
    """Check a session payload against the vocabularies.

    Returns:
        Every violation found, in field order. Empty when the payload is valid.
    """
    violations: list[FieldViolation] = []

    for tag in data.types:
        if tag not in SESSION_TYPES:
            violations.append(FieldViolation("types", f"Invalid session type: '{tag}'. "
                                                      f"Valid types: {_allowed(SESSION_TYPES)}"))
            break

    violations += _check_choice("intensity", data.intensity, INTENSITIES)
    violations += _check_choice("performance", data.performance, PERFORMANCES)
    violations += _check_choice("productivity", data.productivity, PRODUCTIVITIES)

    for index, injury in enumerate(data.injuries):
        if not injury.location or not injury.location.strip():
            violations.append(FieldViolation(f"injuries[{index}].location", "Injury location must not be blank"))

    return violations
