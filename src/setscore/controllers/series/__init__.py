from setscore.controllers.series.scoring import rank_teams, tally_wins
from setscore.controllers.series.state import derive_state

__all__ = ["tally_wins", "rank_teams", "derive_state"]
