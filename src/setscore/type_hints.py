"""Type hints used in SetScore."""

from typing import Dict, List, Mapping, Sequence, Union

# Opaque team identifier
TeamId = str

# Per-team integer scores of one match
ScoreMap = Dict[TeamId, int]

# Per-team match-win tallies of a set
Tallies = Dict[TeamId, int]

# Ranked team ids, best first
Standings = List[TeamId]

# Master tie-break ordering
Seeds = Sequence[TeamId]

# A match is built from either its team list or its initial scores
TeamsOrScores = Union[Sequence[TeamId], Mapping[TeamId, int]]
