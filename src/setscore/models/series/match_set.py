"""Set model - a best-of-N sequence of matches between teams.

The set owns its matches and forfeits. Scores, standings and state are
computed from them on every read and never stored.
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

import threading
from collections.abc import Mapping
from typing import Any, Dict, FrozenSet, List, Optional, Sequence, Union

from setscore.constants import MIN_TEAMS_PER_MATCH
from setscore.controllers.series import derive_state, rank_teams, tally_wins
from setscore.exceptions import (
    DuplicateMatchException,
    InvalidMatchException,
    MatchNotFoundException,
    UnknownTeamException,
    ValidationException,
)
from setscore.models.enums import SetState
from setscore.models.match import Match
from setscore.models.series.set_config import SetConfig
from setscore.type_hints import Seeds, Standings, Tallies
from setscore.utils import setup_logger
from setscore.utils.validation import require_known_team, require_team_ids

logger = setup_logger(__name__)


class Set:
    """A best-of-N set of matches between two or more teams.

    A set is either new, built from an explicit team list with no matches,
    or rebuilt from existing matches, in which case its teams are the union
    of the match teams in order of first appearance.

    One re-entrant lock guards every mutation and every derivation, so the
    set may be shared between threads.
    """

    def __init__(
        self,
        set_id: str,
        goal: int,
        teams_or_matches: Union[Sequence[str], Mapping],
        seeds: Seeds,
        forfeits: Optional[Sequence[str]] = None,
    ) -> None:
        """Initialize a set.

        Args
        ----
        set_id: Set identifier
        goal: Match wins needed to take the set
        teams_or_matches: Team ids of a new set, or a mapping of match id to
            Match for a set rebuilt from stored matches
        seeds: Tie-break ordering, best seed first
        forfeits: Teams that have already forfeited

        Raises
        ------
        InvalidGoalException: If goal is not a positive integer
        ValidationException: If the teams are given as a bare string, or
            there are fewer than two of them
        DuplicateTeamException: If a team appears twice in the team list or
            in the seeds
        InvalidMatchException: If a match id does not match its key
        UnknownTeamException: If a forfeit names a team outside the set
        """
        self.id = set_id
        self.config = SetConfig(goal=goal, seeds=list(seeds))
        self._lock = threading.RLock()
        self._matches: Dict[str, Match] = {}
        self._forfeits: set = set()

        if isinstance(teams_or_matches, str):
            raise ValidationException(
                f"Set {set_id} expects a team list or a match mapping, "
                f"got the string {teams_or_matches!r}"
            )
        if isinstance(teams_or_matches, Mapping):
            teams: List[str] = []
            for match in teams_or_matches.values():
                teams.extend(team for team in match.teams if team not in teams)
            self._teams = require_team_ids(teams)
            for match_id, match in teams_or_matches.items():
                if match_id != match.id:
                    raise InvalidMatchException(
                        f"Match stored under {match_id!r} has id {match.id!r}"
                    )
                self._matches[match_id] = match
        else:
            self._teams = require_team_ids(teams_or_matches)

        if len(self._teams) < MIN_TEAMS_PER_MATCH:
            raise ValidationException(
                f"Set {set_id} needs at least {MIN_TEAMS_PER_MATCH} teams, "
                f"got {len(self._teams)}"
            )

        for team in forfeits or ():
            self._forfeits.add(require_known_team(team, self._teams))

        logger.debug(
            "Created set %s with %d teams and %d matches",
            self.id,
            len(self._teams),
            len(self._matches),
        )

    def __repr__(self) -> str:
        return (
            f"Set({self.id!r}, goal={self.goal}, teams={self._teams!r}, "
            f"matches={len(self._matches)})"
        )

    # ========== Read-only views ==========

    @property
    def goal(self) -> int:
        return self.config.goal

    @property
    def seeds(self) -> List[str]:
        return list(self.config.seeds)

    @property
    def teams(self) -> List[str]:
        return list(self._teams)

    @property
    def matches(self) -> Dict[str, Match]:
        """Matches keyed by id, in insertion order."""
        with self._lock:
            return dict(self._matches)

    @property
    def forfeits(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._forfeits)

    # ========== Derived values ==========

    @property
    def scores(self) -> Tallies:
        """Match wins per team, with forfeited teams pinned to -1."""
        with self._lock:
            return tally_wins(self._teams, self._matches.values(), self._forfeits)

    @property
    def standings(self) -> Standings:
        """All teams ranked best first by tally, ties broken by seed."""
        with self._lock:
            return rank_teams(self._teams, self.scores, self.config.seeds)

    @property
    def state(self) -> SetState:
        with self._lock:
            return derive_state(self._matches.values(), self.goal, self._forfeits)

    @property
    def winner(self) -> Optional[str]:
        """Top of the standings once the set is completed, otherwise None."""
        with self._lock:
            if self.state is not SetState.COMPLETED:
                return None
            return self.standings[0]

    def snapshot(self) -> Dict[str, Any]:
        """Scores, standings and state computed under one lock acquisition."""
        with self._lock:
            scores = self.scores
            return {
                "id": self.id,
                "scores": scores,
                "standings": rank_teams(self._teams, scores, self.config.seeds),
                "state": self.state.value,
            }

    # ========== Mutators ==========

    def forfeit(self, team: str) -> None:
        """Forfeit ``team``. Forfeiting the same team again has no effect.

        Raises:
            UnknownTeamException: If ``team`` is not part of this set
        """
        with self._lock:
            require_known_team(team, self._teams)
            if team in self._forfeits:
                return
            self._forfeits.add(team)
        logger.info("Set %s: team %s forfeited", self.id, team)

    def set_goal(self, goal: int) -> None:
        """Replace the goal. The state follows on its next read.

        Raises:
            InvalidGoalException: If ``goal`` is not a positive integer
        """
        with self._lock:
            previous = self.config.goal
            self.config = SetConfig(goal=goal, seeds=self.config.seeds)
        logger.info("Set %s: goal changed from %d to %d", self.id, previous, goal)

    def add_match(self, match: Match) -> None:
        """Append a match to the set.

        Raises:
            DuplicateMatchException: If a match with the same id exists
            UnknownTeamException: If the match has a team outside the set
        """
        with self._lock:
            if match.id in self._matches:
                raise DuplicateMatchException(
                    f"Set {self.id} already has a match {match.id!r}"
                )
            outsiders = [team for team in match.teams if team not in self._teams]
            if outsiders:
                raise UnknownTeamException(
                    f"Match {match.id} has teams outside set {self.id}: {outsiders}"
                )
            self._matches[match.id] = match
        logger.info("Set %s: added match %s", self.id, match.id)

    def get_match(self, match_id: str) -> Match:
        with self._lock:
            try:
                return self._matches[match_id]
            except KeyError:
                raise MatchNotFoundException(
                    f"Set {self.id} has no match {match_id!r}"
                ) from None

    def record_score(self, match_id: str, team: str, score: int) -> None:
        """Record a score in one of the set's matches."""
        with self._lock:
            self.get_match(match_id).set_score(team, score)
        logger.debug("Set %s: match %s %s=%d", self.id, match_id, team, score)

    def finish_match(self, match_id: str) -> None:
        """Finish one of the set's matches."""
        with self._lock:
            self.get_match(match_id).finish()
        logger.info("Set %s: match %s finished", self.id, match_id)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize set to dictionary."""
        with self._lock:
            return {
                "id": self.id,
                **self.config.to_dict(),
                "teams": list(self._teams),
                "forfeits": [team for team in self._teams if team in self._forfeits],
                "matches": [match.to_dict() for match in self._matches.values()],
            }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Set":
        """Deserialize set from dictionary.

        The set is built from its stored team list and its matches are then
        added in order, so a match naming an unknown team is rejected.
        """
        config = SetConfig.from_dict(data)
        match_set = cls(
            set_id=data["id"],
            goal=config.goal,
            teams_or_matches=data["teams"],
            seeds=config.seeds,
            forfeits=data.get("forfeits", []),
        )
        for match_data in data.get("matches", []):
            match_set.add_match(Match.from_dict(match_data))
        return match_set
