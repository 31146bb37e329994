from setscore.models.enums import SetState
from setscore.models.match import Match
from setscore.models.series import Set, SetConfig

__all__ = ["Match", "Set", "SetConfig", "SetState"]
