"""
Profesor.exe - Configuration Module

Tunable parameters live here. Values can be overridden through the
environment without touching game logic.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent

# =============================================================================
# REMOTE GAME MASTER
# =============================================================================

# Key lookup order: OPENAI_API_KEY, then the apiKey file next to this module.
API_KEY_ENV = "OPENAI_API_KEY"
API_KEY_FILE = BASE_DIR / "apiKey"

MODEL = os.environ.get("PROFESOR_MODEL", "gpt-4o-mini")

# Three short paragraphs of JSON fit well under this.
MAX_OUTPUT_TOKENS = int(os.environ.get("PROFESOR_MAX_OUTPUT_TOKENS", "1024"))

# =============================================================================
# PRESENTATION
# =============================================================================

# Seconds per character for the CLI typewriter reveal (0 prints instantly).
REVEAL_DELAY = float(os.environ.get("PROFESOR_REVEAL_DELAY", "0.015"))

# Choice buttons shown per turn.
MAX_CHOICES = 3

STAT_MIN = 0
STAT_MAX = 100

# =============================================================================
# LOGGING / WEB
# =============================================================================

LOG_FILE = Path(os.environ.get("PROFESOR_LOG_FILE", str(BASE_DIR / "profesor.log")))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173",
    ).split(",")
    if origin.strip()
]
