from datetime import datetime
from pydantic import BaseModel, Field

# Se otorga al romper un récord del leaderboard
TROPHY_BADGE = "Trophy"


class Badge(BaseModel):
    user_id: str
    badge_name: str
    badge_url: str
    date: datetime

    class Config:
        populate_by_name = True


class BadgeCreate(BaseModel):
    badge: str = Field(..., min_length=1, max_length=30)
