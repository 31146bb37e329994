"""A single match between two or more teams."""

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

from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from setscore.constants import DEFAULT_MATCH_SCORE, MIN_TEAMS_PER_MATCH
from setscore.exceptions import InvalidMatchException, MatchStateException
from setscore.type_hints import ScoreMap, Seeds, TeamsOrScores
from setscore.utils.validation import (
    require_known_team,
    require_score,
    require_team_ids,
)


class Match:
    """One contest between a fixed group of teams.

    A match is built either from its team list, in which case every team
    starts on 0 and the match is not started, or from an initial score map,
    in which case it counts as started. Explicit ``started``/``finished``
    flags override those defaults when rebuilding a stored match.

    Attributes
    ----------
    id : str
        Unique identifier of the match.
    teams : list of str
        Participating team ids, fixed at creation.
    seeds : list of str
        Tie-break ordering handed down by the owning set.
    started : bool
        Read-only. Whether any score has been recorded or the match was
        marked started.
    finished : bool
        Read-only. Whether the match is over. Scores are frozen once this
        is set.
    """

    def __init__(
        self,
        match_id: str,
        teams_or_scores: TeamsOrScores,
        seeds: Seeds,
        started: Optional[bool] = None,
        finished: Optional[bool] = None,
    ) -> None:
        if isinstance(teams_or_scores, str):
            raise InvalidMatchException(
                f"Match {match_id} expects a team list or a score map, "
                f"got the string {teams_or_scores!r}"
            )
        if isinstance(teams_or_scores, Mapping):
            teams = require_team_ids(teams_or_scores.keys())
            scores = {team: require_score(teams_or_scores[team]) for team in teams}
            default_started = True
        else:
            teams = require_team_ids(teams_or_scores)
            scores = {team: DEFAULT_MATCH_SCORE for team in teams}
            default_started = False

        if len(teams) < MIN_TEAMS_PER_MATCH:
            raise InvalidMatchException(
                f"Match {match_id} needs at least {MIN_TEAMS_PER_MATCH} teams, "
                f"got {len(teams)}"
            )

        finished = bool(finished)
        if started is None:
            started = default_started or finished
        elif finished and not started:
            raise InvalidMatchException(
                f"Match {match_id} cannot be finished without being started"
            )

        self.id = match_id
        self.teams: List[str] = teams
        self.seeds: List[str] = list(seeds)
        self._scores: ScoreMap = scores
        self._started: bool = bool(started)
        self._finished: bool = finished

    def __repr__(self) -> str:
        status = (
            "finished" if self.finished else "started" if self.started else "pending"
        )
        return f"Match({self.id!r}, {self._scores!r}, {status})"

    @property
    def scores(self) -> ScoreMap:
        """Copy of the current per-team scores."""
        return dict(self._scores)

    @property
    def started(self) -> bool:
        return self._started

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def winner(self) -> Optional[str]:
        """Team with the strictly highest score, or None.

        An unstarted match has no winner, and neither does a match whose top
        score is shared. An unfinished match reports its current leader.
        """
        if not self.started:
            return None
        top = max(self._scores.values())
        leaders = [team for team, score in self._scores.items() if score == top]
        if len(leaders) != 1:
            return None
        return leaders[0]

    def score_of(self, team: str) -> int:
        """Return the score of ``team`` in this match."""
        require_known_team(team, self._scores)
        return self._scores[team]

    def start(self) -> None:
        """Mark the match as started without recording a score."""
        self._started = True

    def set_score(self, team: str, score: int) -> None:
        """Record the current score of one team.

        Raises:
            MatchStateException: If the match is already finished
            UnknownTeamException: If ``team`` does not play in this match
            InvalidScoreException: If ``score`` is not a non-negative integer
        """
        if self.finished:
            raise MatchStateException(
                f"Match {self.id} is finished, scores can no longer change"
            )
        require_known_team(team, self._scores)
        self._scores[team] = require_score(score)
        self._started = True

    def finish(self) -> None:
        """Mark the match as finished. Calling it again has no effect."""
        self._started = True
        self._finished = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "scores": dict(self._scores),
            "seeds": list(self.seeds),
            "started": self.started,
            "finished": self.finished,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            match_id=data["id"],
            teams_or_scores=data["scores"],
            seeds=data.get("seeds", []),
            started=data.get("started"),
            finished=data.get("finished", False),
        )
