"""
Central place to host long-lived singletons (the OpenAI client) and to
hand out one game master per game. A game master owns exactly one chat
session, so games never share one.
"""
import logging
import os

from openai import OpenAI

from ai.game_master import ClassroomGameMaster, load_api_key
from config import API_KEY_ENV, MODEL

logger = logging.getLogger(__name__)

_CLIENT = None
_FACTORY = None


def get_client():
    """
    Shared OpenAI client built on first use, or None without an API key.
    """
    global _CLIENT
    if _CLIENT is None:
        api_key = load_api_key()
        if not api_key:
            logger.warning("No API key found in env or apiKey file; games will not start.")
            return None
        logger.info("Using OpenAI client with key source=%s", "env" if os.environ.get(API_KEY_ENV) else "file")
        _CLIENT = OpenAI(api_key=api_key)
    return _CLIENT


def new_game_master(model: str = MODEL):
    if _FACTORY is not None:
        return _FACTORY()
    client = get_client()
    if client is None:
        return None
    return ClassroomGameMaster(client, model=model)


def set_game_master_factory(factory) -> None:
    """Swap how game masters are built (tests, alternative backends). None restores the default."""
    global _FACTORY
    _FACTORY = factory
