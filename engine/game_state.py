"""
UI-facing game state: status, transcript, current response and the
transient flags that gate input. Never talks to the game master.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from config import MAX_CHOICES
from engine.models import GameResponse, GameStatus, Outcome, Playing, Turn, decide_outcome
from engine.stats import display_stats


@dataclass
class GameState:
    status: GameStatus = GameStatus.IDLE
    transcript: List[Turn] = field(default_factory=list)
    current: Optional[GameResponse] = None
    outcome: Outcome = field(default_factory=Playing)
    input_text: str = ""
    loading: bool = False
    typing: bool = False

    # =========================
    # GATING
    # =========================

    @property
    def input_enabled(self) -> bool:
        return self.status == GameStatus.PLAYING and not self.loading and not self.typing

    def can_submit(self, text: Optional[str] = None) -> bool:
        text = self.input_text if text is None else text
        return self.input_enabled and bool(text and text.strip())

    @property
    def choices_visible(self) -> bool:
        return self.input_enabled and self.current is not None

    @property
    def restart_visible(self) -> bool:
        return self.status != GameStatus.IDLE

    @property
    def is_over(self) -> bool:
        return self.status in (GameStatus.GAME_OVER, GameStatus.VICTORY)

    def visible_choices(self) -> List[str]:
        if not self.choices_visible:
            return []
        return list(self.current.choices[:MAX_CHOICES])

    # =========================
    # TRANSITIONS
    # =========================

    def begin(self, response: GameResponse) -> None:
        """New session: transcript restarts with the opening narrative."""
        # Terminal flags on the opening turn are ignored.
        self.transcript = [Turn("model", response.narrative)]
        self.input_text = ""
        self.current = response
        self.typing = True
        self.outcome = Playing()
        self.status = GameStatus.PLAYING

    def add_user_turn(self, text: str) -> Turn:
        turn = Turn("user", text)
        self.transcript.append(turn)
        self.input_text = ""
        return turn

    def add_model_turn(self, text: str) -> Turn:
        turn = Turn("model", text)
        self.transcript.append(turn)
        return turn

    def apply(self, response: GameResponse) -> Outcome:
        self.add_model_turn(response.narrative)
        self.current = response
        self.typing = True
        self.outcome = decide_outcome(response)
        self.status = self.outcome.status
        return self.outcome

    def finish_reveal(self) -> None:
        self.typing = False

    # =========================
    # VIEWS
    # =========================

    def snapshot(self) -> dict:
        stats = None
        if self.current is not None:
            stats = {key: value for key, _label, value in display_stats(self.current.stats)}
        return {
            "status": self.status.value,
            "stats": stats,
            "choices": self.visible_choices(),
            "transcript": [t.to_dict() for t in self.transcript],
            "reason": getattr(self.outcome, "reason", None),
            "loading": self.loading,
            "typing": self.typing,
            "inputEnabled": self.input_enabled,
            "restartVisible": self.restart_visible,
        }
