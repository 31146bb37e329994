from setscore.models.match.match import Match

__all__ = ["Match"]
