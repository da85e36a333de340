"""
Profesor.exe Game Master
------------------------
Session wrapper around the remote narrative service.
Turns a request/response API into one persistent game with a fixed
structured-output contract.
"""

import logging
import os
from typing import Optional

from openai import OpenAIError
from pydantic import ValidationError

from ai.chat_session import ChatSession
from config import API_KEY_ENV, API_KEY_FILE, MAX_OUTPUT_TOKENS, MODEL
from engine.models import GameResponse

logger = logging.getLogger(__name__)

# =========================
# GAME RULES (LOCKED)
# =========================

SYSTEM_INSTRUCTION = """
You are the "Game Master" of a conversational text adventure called "Profesor.exe".
The player is a Computer Science (CS) professor at a technical university.

Player goals:
1. Keep student MOTIVATION high (0-100).
2. Keep their AUTHORITY in class high (0-100).
3. Manage their own ENERGY (0-100).

Rules:
- Open the game with a typical situation (first day of class, students glued to their phones, a broken projector, a hard question about pointers in C).
- The tone is "geek/academic", with programming references (bugs, compiling, stack overflow, coffee).
- Keep the narrative short (3 paragraphs at most).
- Always offer 3 varied actions: one sensible, one risky or funny, one strict.

Response format:
ALWAYS answer with valid JSON following this schema. Do NOT wrap it in markdown code fences, send the raw JSON only.

{
  "narrative": "string (what happens, simple Markdown allowed, **bold** for emphasis)",
  "stats": {
    "motivation": integer 0-100,
    "authority": integer 0-100,
    "energy": integer 0-100
  },
  "choices": ["string", "string", "string"],
  "gameOver": boolean (true when authority or energy reach 0),
  "victory": boolean (true when the professor survives the semester or reaches a major milestone with high motivation),
  "reason": "string or null (why the game ended)"
}

Recommended starting values: motivation 50, authority 80, energy 100.
Adjust the stats dynamically according to the player's actions.
"""

# Strict json_schema mode needs every property listed in "required",
# so the optional reason is nullable instead of omitted.
RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "narrative": {"type": "string"},
        "stats": {
            "type": "object",
            "properties": {
                "motivation": {"type": "integer"},
                "authority": {"type": "integer"},
                "energy": {"type": "integer"},
            },
            "required": ["motivation", "authority", "energy"],
            "additionalProperties": False,
        },
        "choices": {"type": "array", "items": {"type": "string"}},
        "gameOver": {"type": "boolean"},
        "victory": {"type": "boolean"},
        "reason": {"type": ["string", "null"]},
    },
    "required": ["narrative", "stats", "choices", "gameOver", "victory", "reason"],
    "additionalProperties": False,
}

INIT_MESSAGE = "Begin the game. First class session of 'Introduction to Algorithms'."


# =========================
# ERRORS
# =========================

class GameMasterError(Exception):
    """Base class for session wrapper failures."""


class NotStartedError(GameMasterError):
    """An action was sent before any game was started."""


class ServiceError(GameMasterError):
    """The remote call failed or its reply did not match the response schema."""


def load_api_key() -> Optional[str]:
    # Environment first
    key = os.environ.get(API_KEY_ENV)
    if key:
        return key
    # fallback to the apiKey file next to config.py
    if API_KEY_FILE.exists():
        val = API_KEY_FILE.read_text(encoding="utf-8").strip()
        if val:
            return val
    return None


def parse_response(text: Optional[str]) -> GameResponse:
    """
    Raw reply text -> GameResponse. Anything else is a ServiceError.
    """
    if not text:
        raise ServiceError("No response from the game master")
    try:
        return GameResponse.model_validate_json(text)
    except ValidationError as e:
        raise ServiceError(f"Malformed game master reply: {e.error_count()} validation error(s)") from e


# =========================
# GAME MASTER
# =========================

class ClassroomGameMaster:
    def __init__(self, openai_client, model: str = MODEL, max_output_tokens: Optional[int] = MAX_OUTPUT_TOKENS):
        """
        openai_client: already-authenticated OpenAI client
        model: e.g. "gpt-4o-mini"
        """
        self.client = openai_client
        self.model = model
        self.max_output_tokens = max_output_tokens
        self._session: Optional[ChatSession] = None

    @property
    def has_session(self) -> bool:
        return self._session is not None

    def start_game(self) -> GameResponse:
        """
        Open a fresh session and play the opening turn.
        The previous session is only replaced once the opening turn parses.
        """
        session = ChatSession(
            self.client,
            self.model,
            instructions=SYSTEM_INSTRUCTION.strip(),
            schema=RESPONSE_SCHEMA,
            max_output_tokens=self.max_output_tokens,
        )
        try:
            response = self._exchange(session, INIT_MESSAGE)
        except ServiceError as e:
            logger.error("Error starting game: %s", e)
            raise
        self._session = session
        logger.info("New game started (response_id=%s)", session.response_id)
        return response

    def send_action(self, action: str) -> GameResponse:
        if self._session is None:
            raise NotStartedError("Game not started")
        try:
            return self._exchange(self._session, action)
        except ServiceError as e:
            logger.error("Error sending action: %s", e)
            raise

    # =========================
    # INTERNALS
    # =========================

    def _exchange(self, session: ChatSession, message: str) -> GameResponse:
        try:
            text = session.send_message(message)
        except OpenAIError as e:
            raise ServiceError(f"Game master request failed: {e}") from e
        return parse_response(text)

