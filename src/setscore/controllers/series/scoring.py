"""Score aggregation and ranking for sets.

This module turns the matches of a set into per-team win tallies and ranks
teams from those tallies, breaking ties by seed.
"""

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

from typing import AbstractSet, Iterable, Sequence

from setscore.constants import FORFEIT_SCORE, MATCH_WIN_POINTS, NO_POINTS
from setscore.models.match import Match
from setscore.type_hints import Seeds, Standings, Tallies
from setscore.utils import setup_logger

logger = setup_logger(__name__)


def tally_wins(
    teams: Iterable[str],
    matches: Iterable[Match],
    forfeits: AbstractSet[str] = frozenset(),
) -> Tallies:
    """Count match wins per team.

    Every started match awards one point to its strict leader; a shared top
    score or an unstarted match awards nothing. A match still in progress
    counts for whoever leads it right now. Forfeited teams are then pinned
    to ``FORFEIT_SCORE`` whatever they had won.

    Args:
        teams: All teams of the set, each gets an entry
        matches: Matches in the order they were added to the set
        forfeits: Teams that have forfeited

    Returns:
        Mapping of team id to tally
    """
    tallies: Tallies = {team: NO_POINTS for team in teams}

    for match in matches:
        winner = match.winner
        if winner is None:
            continue
        tallies[winner] = tallies.get(winner, NO_POINTS) + MATCH_WIN_POINTS

    for team in forfeits:
        tallies[team] = FORFEIT_SCORE

    logger.debug("Tallied wins: %s", tallies)
    return tallies


def rank_teams(teams: Sequence[str], tallies: Tallies, seeds: Seeds) -> Standings:
    """Order teams best first by tally, then by seed.

    Unseeded teams rank behind every seeded team with the same tally and keep
    their relative order from ``teams``.
    """
    seed_ranks = {team: rank for rank, team in enumerate(seeds)}
    unseeded = len(seed_ranks)
    return sorted(
        teams,
        key=lambda team: (-tallies[team], seed_ranks.get(team, unseeded)),
    )
