"""Exceptions for use in SetScore"""

# SetScore
# Copyright (C) 2025  SetScore developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


# ========== Base Application Exception ==========


class SetScoreException(Exception):
    """Base exception for all SetScore errors.

    All custom exceptions in the library inherit from this class, so callers
    can catch every scoring error with a single except clause.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationException(SetScoreException):
    """Base exception for invalid arguments passed into the scoring core."""

    pass


class InvalidGoalException(ValidationException):
    """Raised when a set goal is not a positive integer."""

    pass


class UnknownTeamException(ValidationException):
    """Raised when a team id is not a participant of the set or match."""

    pass


class DuplicateTeamException(ValidationException):
    """Raised when a team list contains the same team more than once."""

    pass


class InvalidScoreException(ValidationException):
    """Raised when a score is not a non-negative integer."""

    pass


# ========== Match Exceptions ==========


class MatchException(SetScoreException):
    """Base exception for match-related errors."""

    pass


class InvalidMatchException(MatchException):
    """Raised when a match cannot be built from the given data."""

    pass


class MatchStateException(MatchException):
    """Raised when a match is in the wrong state for the requested operation."""

    pass


class DuplicateMatchException(MatchException):
    """Raised when adding a match whose id already exists in the set."""

    pass


class MatchNotFoundException(MatchException):
    """Raised when a requested match does not exist in the set."""

    pass
