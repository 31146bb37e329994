"""Enumerations shared across the SetScore models."""

from enum import Enum


class SetState(Enum):
    """Lifecycle phase of a set, always derived from its matches."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
