"""
Tabla de niveles y cálculo de progreso.

Un total de puntos pertenece a la primera fila con points <= end. El
nivel dentro de la fila se cuenta desde `start`:

    level = level_base + (points - start) // tier_size

La primera fila incluye el 0; la última no tiene techo.
"""

from typing import NamedTuple, Optional

from app.models.stats import UserStats


class TierRow(NamedTuple):
    start: int
    end: Optional[int]  # None = sin techo
    tier_size: int
    level_base: int
    title: str


TIER_TABLE: tuple[TierRow, ...] = (
    TierRow(0, 1000, 200, 0, "Newbie"),
    TierRow(1000, 2000, 200, 5, "Apprentice"),
    TierRow(2000, 3500, 300, 10, "Pro"),
    TierRow(3500, 5000, 300, 15, "Ace"),
    TierRow(5000, 7500, 500, 20, "Premier"),
    TierRow(7500, 10000, 500, 25, "Superstar"),
    TierRow(10000, 12500, 500, 30, "Guru"),
    TierRow(12500, None, 500, 35, "King"),
)


class Progress(NamedTuple):
    remaining: int  # Puntos para el próximo nivel, en (0, tier_size]
    tier_size: int


def find_tier(points: int) -> TierRow:
    """Return the single row of TIER_TABLE that contains `points`."""
    if points < 0:
        raise ValueError(f"points must be >= 0, got {points}")

    for row in TIER_TABLE:
        if row.end is None or points <= row.end:
            return row

    # La última fila no tiene techo
    raise AssertionError("TIER_TABLE must end with an unbounded row")


def calc_progress(points: int) -> Progress:
    """
    Points left until the next level, and the size of the current tier.

    On an exact level boundary a full tier remains (the "just leveled up"
    state), so `remaining` is always in (0, tier_size].
    """
    row = find_tier(points)
    remaining = row.tier_size - ((points - row.start) % row.tier_size)
    return Progress(remaining=remaining, tier_size=row.tier_size)


def level_for(points: int) -> tuple[int, str]:
    """(level, title) for a cumulative point total."""
    row = find_tier(points)
    return row.level_base + (points - row.start) // row.tier_size, row.title


def apply_points(stats: UserStats, earned: int) -> UserStats:
    """
    New stats after finishing a quiz worth `earned` points.

    Level and title are recomputed from the final total, never bumped,
    so crossing several tiers in one update lands on the right row.
    """
    if earned < 0:
        raise ValueError(f"earned must be >= 0, got {earned}")

    points = stats.points + earned
    level, title = level_for(points)

    return UserStats(
        _id=stats.user_id,
        level=level,
        title=title,
        points=points,
        quizzes_completed=stats.quizzes_completed + 1,
    )
