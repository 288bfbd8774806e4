from .user import User
from .stats import UserStats
from .leaderboard import PersonalBest, LeaderboardEntry
from .session import SessionRecord, PlayedCount, QuizOutcome
from .folder import Folder, Trivia
from .badge import Badge
from .catalog import Category, Difficulty, Question
from .results import Updated, Unchanged

__all__ = [
    "User",
    "UserStats",
    "PersonalBest",
    "LeaderboardEntry",
    "SessionRecord",
    "PlayedCount",
    "QuizOutcome",
    "Folder",
    "Trivia",
    "Badge",
    "Category",
    "Difficulty",
    "Question",
    "Updated",
    "Unchanged",
]
