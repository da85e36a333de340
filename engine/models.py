"""
Game data model.

GameResponse is what the remote game master must produce each turn. It is
validated strictly: no coercion of strings or booleans into numbers, no
missing required fields, no unknown fields.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class GameStats(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    motivation: int  # students
    authority: int   # professor
    energy: int      # professor (caffeine)


class GameResponse(BaseModel):
    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        frozen=True,
    )

    narrative: str
    stats: GameStats
    choices: List[str]
    game_over: bool = Field(alias="gameOver")
    victory: bool
    reason: Optional[str] = None

    def to_payload(self) -> dict:
        """Wire shape (camelCase keys), as the remote service sends it."""
        return self.model_dump(by_alias=True)


class GameStatus(str, Enum):
    IDLE = "IDLE"
    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"
    VICTORY = "VICTORY"


Role = Literal["user", "model"]


@dataclass(frozen=True)
class Turn:
    role: Role
    text: str
    timestamp: int = field(default_factory=lambda: int(time.time() * 1000))

    def to_dict(self) -> dict:
        return {"role": self.role, "text": self.text, "timestamp": self.timestamp}


# =========================
# OUTCOME
# =========================

@dataclass(frozen=True)
class Playing:
    status = GameStatus.PLAYING


@dataclass(frozen=True)
class Lost:
    reason: Optional[str] = None
    status = GameStatus.GAME_OVER


@dataclass(frozen=True)
class Won:
    reason: Optional[str] = None
    status = GameStatus.VICTORY


Outcome = Union[Playing, Lost, Won]


def decide_outcome(response: GameResponse) -> Outcome:
    """
    gameOver wins over victory when the service sets both.
    """
    if response.game_over:
        return Lost(response.reason)
    if response.victory:
        return Won(response.reason)
    return Playing()
