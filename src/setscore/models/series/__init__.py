from setscore.models.series.match_set import Set
from setscore.models.series.set_config import SetConfig

__all__ = ["Set", "SetConfig"]
