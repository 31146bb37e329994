"""Random Set Generator (RSG).

Builds reproducible sets with realistic match histories for tests and for the
``python -m setscore.testing`` command line.
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

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from setscore.constants import DEFAULT_GOAL, MIN_TEAMS_PER_MATCH
from setscore.models import Match, Set, SetState
from setscore.utils import setup_logger

logger = setup_logger(__name__)


class ResultPattern(Enum):
    """Result generation patterns for matches."""

    REALISTIC = "realistic"  # higher seeds win more often
    BALANCED = "balanced"  # every team equally likely to win
    TIE_HEAVY = "tie_heavy"  # many drawn matches
    RANDOM = "random"  # any score, any outcome


@dataclass
class RSGConfig:
    """Configuration for Random Set Generator."""

    num_teams: int = 2
    goal: int = DEFAULT_GOAL
    teams_per_match: int = 2
    result_pattern: ResultPattern = ResultPattern.REALISTIC
    seed: Optional[int] = None
    max_score: int = 6
    tie_percentage: int = 10
    forfeit_percentage: int = 0


class RandomSetGenerator:
    """Generate sets whose matches are played until the set is decided."""

    def __init__(self, config: RSGConfig):
        if config.teams_per_match < MIN_TEAMS_PER_MATCH:
            raise ValueError(
                f"teams_per_match must be at least {MIN_TEAMS_PER_MATCH}"
            )
        if config.teams_per_match > config.num_teams:
            raise ValueError("teams_per_match cannot exceed num_teams")
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def create_teams(self) -> List[str]:
        return [f"team{i + 1}" for i in range(self.config.num_teams)]

    def generate_set(self, set_id: str = "set") -> Set:
        """Generate one set and play matches until it is completed.

        Play stops after a fixed number of matches even if the set is still
        undecided, which tie-heavy or random patterns can cause. A warning is
        logged in that case and the set is returned in progress.
        """
        teams = self.create_teams()
        seeds = list(teams)
        self.random.shuffle(seeds)
        match_set = Set(set_id, self.config.goal, teams, seeds)

        max_matches = self.config.goal * self.config.num_teams * 4
        for number in range(1, max_matches + 1):
            if match_set.state is SetState.COMPLETED:
                break
            match = self._play_match(f"{set_id}-match{number}", teams, seeds)
            match_set.add_match(match)
            if (
                self.config.forfeit_percentage
                and self.random.randint(1, 100) <= self.config.forfeit_percentage
            ):
                match_set.forfeit(self.random.choice(match.teams))
                break
        else:
            if match_set.state is not SetState.COMPLETED:
                logger.warning(
                    "Set %s still undecided after %d matches",
                    set_id,
                    max_matches,
                )

        logger.info(
            "Generated set %s: %d matches, state %s",
            set_id,
            len(match_set.matches),
            match_set.state.value,
        )
        return match_set

    def generate_sets(self, count: int) -> List[Set]:
        return [self.generate_set(f"set{i + 1}") for i in range(count)]

    def _play_match(self, match_id: str, teams: List[str], seeds: List[str]) -> Match:
        participants = self.random.sample(teams, self.config.teams_per_match)
        match = Match(match_id, participants, seeds)
        for team, score in self._generate_scores(participants, seeds).items():
            match.set_score(team, score)
        match.finish()
        return match

    def _generate_scores(
        self, participants: List[str], seeds: List[str]
    ) -> Dict[str, int]:
        pattern = self.config.result_pattern
        max_score = self.config.max_score
        scores = {team: self.random.randint(0, max_score - 1) for team in participants}

        if pattern == ResultPattern.RANDOM:
            return scores

        tie_percentage = self.config.tie_percentage
        if pattern == ResultPattern.TIE_HEAVY:
            tie_percentage = max(tie_percentage, 50)
        if self.random.randint(1, 100) <= tie_percentage:
            top = max(scores.values())
            tied = self.random.sample(participants, 2)
            for team in tied:
                scores[team] = top
            return scores

        if pattern == ResultPattern.REALISTIC:
            # Weight toward the better seed
            weights = [
                len(seeds) - seeds.index(team) for team in participants
            ]
            winner = self.random.choices(participants, weights=weights)[0]
        else:
            winner = self.random.choice(participants)
        scores[winner] = max_score
        return scores
