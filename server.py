import logging
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

import game_context
from config import CORS_ORIGINS
from engine.game_state import GameState
from game_runner import Game
from game_session import GameSession
from ui.ui import UI
from ui.web_provider import WebProvider

logger = logging.getLogger(__name__)

app = FastAPI(title="Profesor.exe")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


sessions: Dict[str, GameSession] = {}


class StepRequest(BaseModel):
    session_id: str
    action: str | None = None
    text: str | None = None
    choice: int | None = None


class SessionRequest(BaseModel):
    session_id: str


def _new_session() -> GameSession:
    session = GameSession(None)
    ui = UI(WebProvider(session))
    session.game = Game(ui, game_context.new_game_master())
    return session


def get_session(session_id: str) -> GameSession:
    session = sessions.get(session_id)
    # A game without a game master (no key at creation time) is rebuilt so a
    # key added later takes effect.
    if session is None or session.game.game_master is None:
        session = _new_session()
        sessions[session_id] = session
        logger.info("New web session %s", session_id)
    return session


@app.post("/step")
# Runs in the threadpool. One call in flight per session is enforced only by
# the game's loading flag; concurrent requests for one session are not serialized.
def step(req: StepRequest):
    session = get_session(req.session_id)
    payload: Dict[str, Any] = {
        "action": req.action,
        "text": req.text,
        "choice": req.choice,
    }
    payload = {k: v for k, v in payload.items() if v is not None}
    return session.step(payload)


@app.post("/events")
def events(req: SessionRequest):
    if req.session_id not in sessions:
        return []
    return sessions[req.session_id].drain()


@app.post("/state")
def state(req: SessionRequest):
    if req.session_id not in sessions:
        return GameState().snapshot()
    return sessions[req.session_id].game.state.snapshot()


@app.post("/end")
def end(req: SessionRequest):
    """Forget a session (and its chat handle)."""
    return {"ok": sessions.pop(req.session_id, None) is not None}
