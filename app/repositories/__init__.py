from .user_repository import UserRepository
from .stats_repository import StatsRepository
from .score_repository import PersonalBestRepository, LeaderboardRepository
from .session_repository import SessionRepository, PlayedCountRepository
from .folder_repository import FolderRepository, TriviaRepository
from .badge_repository import BadgeRepository
from .catalog_repository import CatalogRepository

__all__ = [
    "UserRepository",
    "StatsRepository",
    "PersonalBestRepository",
    "LeaderboardRepository",
    "SessionRepository",
    "PlayedCountRepository",
    "FolderRepository",
    "TriviaRepository",
    "BadgeRepository",
    "CatalogRepository",
]
