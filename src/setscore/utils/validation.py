"""Validation utilities for SetScore.

This module provides reusable validation functions with consistent error handling.
Each ``validate_*`` function returns a :class:`ValidationResult`; the matching
``require_*`` function raises the corresponding exception instead.
"""

from typing import Any, Iterable, List, Optional

from setscore.constants import MIN_GOAL
from setscore.exceptions import (
    DuplicateTeamException,
    InvalidGoalException,
    InvalidScoreException,
    UnknownTeamException,
    ValidationException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid goal or score
    return isinstance(value, int) and not isinstance(value, bool)


# ========== Goal Validation ==========


def validate_goal(goal: Any) -> ValidationResult:
    """Validate a set goal (number of match wins needed).

    Args:
        goal: Candidate goal

    Returns:
        ValidationResult with validation status

    Example:
        >>> bool(validate_goal(3))
        True
        >>> bool(validate_goal(0))
        False
    """
    if not _is_int(goal):
        return ValidationResult(
            is_valid=False,
            error_message=f"Goal must be an integer, got {goal!r}",
        )
    if goal < MIN_GOAL:
        return ValidationResult(
            is_valid=False,
            error_message=f"Goal must be at least {MIN_GOAL}, got {goal}",
        )
    return ValidationResult(is_valid=True, sanitized_value=goal)


def require_goal(goal: Any) -> int:
    """Return ``goal`` if valid, otherwise raise InvalidGoalException."""
    result = validate_goal(goal)
    if not result:
        raise InvalidGoalException(result.error_message)
    return result.sanitized_value


# ========== Score Validation ==========


def validate_score(score: Any) -> ValidationResult:
    """Validate a single match score (a non-negative integer)."""
    if not _is_int(score):
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be an integer, got {score!r}",
        )
    if score < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must not be negative, got {score}",
        )
    return ValidationResult(is_valid=True, sanitized_value=score)


def require_score(score: Any) -> int:
    """Return ``score`` if valid, otherwise raise InvalidScoreException."""
    result = validate_score(score)
    if not result:
        raise InvalidScoreException(result.error_message)
    return result.sanitized_value


# ========== Team Validation ==========


def validate_team_ids(team_ids: Iterable[str]) -> ValidationResult:
    """Validate a team list: non-empty string ids without duplicates.

    The sanitized value is the team ids as a list, in the given order.
    """
    teams: List[str] = list(team_ids)
    seen = set()
    for team in teams:
        if not isinstance(team, str) or not team:
            return ValidationResult(
                is_valid=False,
                error_message=f"Team id must be a non-empty string, got {team!r}",
            )
        if team in seen:
            return ValidationResult(
                is_valid=False,
                error_message=f"Duplicate team id: {team}",
            )
        seen.add(team)
    return ValidationResult(is_valid=True, sanitized_value=teams)


def require_team_ids(team_ids: Iterable[str]) -> List[str]:
    """Return the team ids as a list, or raise on a malformed list.

    Raises:
        ValidationException: If a team id is not a non-empty string
        DuplicateTeamException: If a team id appears more than once
    """
    teams = list(team_ids)
    result = validate_team_ids(teams)
    if result:
        return result.sanitized_value
    if len(set(teams)) != len(teams):
        raise DuplicateTeamException(result.error_message)
    raise ValidationException(result.error_message)


def require_known_team(team: str, teams: Iterable[str]) -> str:
    """Return ``team`` if it is one of ``teams``, otherwise raise."""
    if team not in teams:
        raise UnknownTeamException(f"Unknown team: {team!r}")
    return team
