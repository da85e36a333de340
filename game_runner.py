"""
game_runner.py
--------------
Step-based controller between the UI and the game master.
Blocking (CLI) and non-blocking (web) UIs share it.
"""

import logging
from typing import Any, Dict, Optional

from ai.game_master import GameMasterError
from engine.game_state import GameState
from engine.markup import strip_markup
from engine.models import GameStatus
from engine.stats import display_stats
from ui.events import emit_state

logger = logging.getLogger(__name__)

START_FAILED_NOTICE = "Could not reach the game master. Check your API key and try again."
NO_GAME_MASTER_NOTICE = "No game master configured. Set OPENAI_API_KEY or add an apiKey file."
FALLBACK_NARRATIVE = "System error... retrying connection..."
DEFAULT_END_REASON = "The dean wants to see you in their office..."

END_TITLES = {
    GameStatus.VICTORY: "SEMESTER PASSED!",
    GameStatus.GAME_OVER: "GAME OVER",
}


class Game:
    def __init__(self, ui, game_master):
        self.ui = ui
        self.game_master = game_master
        self.is_web = not getattr(ui, "is_blocking", True)
        self.state = GameState()

    # =========================
    # INTENTS
    # =========================

    def start(self) -> bool:
        """
        Start (or restart) a game. On failure nothing changes and the
        user gets a blocking notice.
        """
        if self.state.loading:
            return False
        if self.game_master is None:
            self.ui.notice(NO_GAME_MASTER_NOTICE)
            return False

        self._set_loading(True)
        try:
            response = self.game_master.start_game()
        except GameMasterError as e:
            logger.error("start failed: %s", e)
            self.ui.notice(START_FAILED_NOTICE, {"error": str(e)})
            return False
        finally:
            self._set_loading(False)

        self.state.begin(response)
        logger.info("Opening narrative: %s", strip_markup(response.narrative))
        self.ui.status(self.state.status.value)
        self._render_stats()
        self.ui.narration(response.narrative)
        if not self.is_web:
            self.finish_reveal()
        return True

    def submit_action(self, text: Optional[str] = None) -> bool:
        """
        Send a free-text or choice action. Ignored while input is disabled.
        """
        text = self.state.input_text if text is None else text
        if not self.state.can_submit(text):
            return False
        text = text.strip()

        self.state.add_user_turn(text)
        self.ui.player(text)
        self._set_loading(True)
        try:
            response = self.game_master.send_action(text)
        except GameMasterError as e:
            logger.error("action failed: %s", e)
            self.state.add_model_turn(FALLBACK_NARRATIVE)
            self.ui.narration(FALLBACK_NARRATIVE, {"fallback": True})
            response = None
        finally:
            self._set_loading(False)

        if response is None:
            # Previous response stays current; its choices come back.
            self._render_controls()
            return False

        outcome = self.state.apply(response)
        logger.info("Narrative (%s): %s", self.state.status.value, strip_markup(response.narrative))
        self._render_stats()
        self.ui.narration(response.narrative)
        if self.state.is_over:
            self.ui.status(self.state.status.value, {"reason": outcome.reason})
        if not self.is_web:
            self.finish_reveal()
        return True

    def choose(self, index: int) -> bool:
        options = self.state.visible_choices()
        if not 0 <= index < len(options):
            return False
        return self.submit_action(options[index])

    def finish_reveal(self) -> None:
        """The narrative finished displaying; controls come back."""
        if not self.state.typing:
            return
        self.state.finish_reveal()
        self._render_controls()

    def set_input(self, text: str) -> None:
        self.state.input_text = text or ""

    # =========================
    # STEP API
    # =========================

    def step(self, player_input: Dict[str, Any]) -> bool:
        """
        Advance by one intent. Non-blocking. Safe for web.
        """
        action = (player_input.get("action") or "").lower()
        if action in ("start", "restart"):
            return self.start()
        if action == "act":
            return self.submit_action(player_input.get("text") or "")
        if action == "choice" or player_input.get("choice") is not None:
            try:
                index = int(player_input.get("choice"))
            except (TypeError, ValueError):
                self.ui.error("Choice must be a number.")
                return False
            return self.choose(index)
        if action == "reveal_done":
            self.finish_reveal()
            return True
        if action == "input":
            self.set_input(player_input.get("text") or "")
            return True
        if action == "state":
            emit_state(self.ui, self.state)
            return True
        self.ui.error(f"Unknown action: {action or '(none)'}")
        return False

    def handle_input(self, player_input: dict, session=None):
        """
        Adapter for GameSession; forwards to step().
        """
        return self.step(player_input)

    # =========================
    # RENDERING
    # =========================

    def _set_loading(self, active: bool) -> None:
        self.state.loading = active
        self.ui.loading(active)

    def _render_stats(self) -> None:
        if self.state.current is None:
            return
        self.ui.stats([
            {"key": key, "label": label, "value": value}
            for key, label, value in display_stats(self.state.current.stats)
        ])

    def _render_controls(self) -> None:
        if self.state.is_over:
            reason = getattr(self.state.outcome, "reason", None) or DEFAULT_END_REASON
            self.ui.scene(f"{END_TITLES[self.state.status]}\n{reason}")
            return
        self.ui.choices(self.state.visible_choices())
