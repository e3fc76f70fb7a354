"""Models - modelos SQLAlchemy"""
from league_api.models.team import Team
from league_api.models.player import Player
from league_api.models.match_schedule import MatchSchedule
from league_api.models.match_result import MatchResult, PlayerScored
from league_api.models.user import User

__all__ = [
    "Team",
    "Player",
    "MatchSchedule",
    "MatchResult",
    "PlayerScored",
    "User",
]
