"""Set lifecycle derivation.

The state of a set is never stored. It is recomputed from the matches, the
goal and the forfeits each time it is asked for.
"""

from typing import AbstractSet, Iterable

from setscore.controllers.series.scoring import tally_wins
from setscore.models.enums import SetState
from setscore.models.match import Match


def derive_state(
    matches: Iterable[Match], goal: int, forfeits: AbstractSet[str]
) -> SetState:
    """Derive the lifecycle state of a set.

    Rules
    -----
    - COMPLETED: a team has forfeited, or some team's tally reached ``goal``
    - IN_PROGRESS: at least one match has started
    - NOT_STARTED: otherwise, including a set with no matches

    Args:
        matches: Matches of the set
        goal: Match wins needed to take the set
        forfeits: Teams that have forfeited

    Returns:
        The derived SetState
    """
    if forfeits:
        return SetState.COMPLETED

    matches = list(matches)
    tallies = tally_wins((), matches)
    if any(tally >= goal for tally in tallies.values()):
        return SetState.COMPLETED

    if any(match.started for match in matches):
        return SetState.IN_PROGRESS

    return SetState.NOT_STARTED
