from typing import NamedTuple

PLAYER = "player"
AI = "ai"


class WallBounce(NamedTuple):
    y: float


class PaddleHit(NamedTuple):
    side: str   # PLAYER or AI
    speed_x: float


class ScoreChanged(NamedTuple):
    side: str   # who scored
    score: int  # their new total
