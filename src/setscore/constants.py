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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Match outcome tallies
MATCH_WIN_POINTS = 1
NO_POINTS = 0

# Tally assigned to a forfeited team, lower than any real tally
FORFEIT_SCORE = -1

# Default score for a team that has not scored yet
DEFAULT_MATCH_SCORE = 0

# Set goal (match wins needed to take the set)
MIN_GOAL = 1
DEFAULT_GOAL = 3

# A match needs at least two sides
MIN_TEAMS_PER_MATCH = 2

# Logging
LOG_LEVEL_ENV_VAR = "SETSCORE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
