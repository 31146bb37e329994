"""SetConfig data class."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List

from setscore.constants import DEFAULT_GOAL
from setscore.utils.validation import require_goal, require_team_ids


@dataclass
class SetConfig:
    """Set configuration settings.

    Attributes
    ----------
    goal : int
        Number of match wins a team needs to take the set.
    seeds : list of str
        Master tie-break ordering, best seed first.
    """

    goal: int = DEFAULT_GOAL
    seeds: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.goal = require_goal(self.goal)
        self.seeds = require_team_ids(self.seeds)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "goal": self.goal,
            "seeds": list(self.seeds),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SetConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            goal=data.get("goal", DEFAULT_GOAL),
            seeds=data.get("seeds", []),
        )
