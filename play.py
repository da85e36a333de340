import argparse
import logging
from pathlib import Path

import game_context
from config import LOG_FILE, MODEL, REVEAL_DELAY
from engine.models import GameStatus
from game_runner import Game
from ui.cli_provider import CLIProvider
from ui.ui import UI

logger = logging.getLogger(__name__)

TITLE = """PROFESOR.EXE
v1.0.4 | Academic Simulation"""

INTRO = """Ready to teach?
Your students are waiting. The projector is broken. You have a coffee hangover.
Welcome to the Computer Science department."""

SIDEBAR = """COURSE      Algorithms and Data Structures II
CLASSROOM   Lab 404
INVENTORY   Lenovo laptop (40% battery), whiteboard marker (almost dry),
            coffee mug (empty), USB stick with the 2023 exams"""

HELP = "Type a number to pick a choice, or write your own action. /restart starts over, /quit exits."


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Profesor.exe, a classroom survival text adventure.")
    parser.add_argument("--model", default=MODEL, help=f"Model used by the game master (default {MODEL}).")
    parser.add_argument(
        "--reveal-delay",
        type=float,
        default=REVEAL_DELAY,
        help="Seconds per character for the typewriter reveal (0 disables it).",
    )
    parser.add_argument("--log-file", type=Path, default=LOG_FILE, help="Where to write the session log.")
    parser.add_argument("--verbose", action="store_true", help="Also log to the console.")
    return parser.parse_args(argv)


def setup_logging(log_file: Path, verbose: bool = False) -> None:
    handlers = [logging.FileHandler(log_file, encoding="utf-8")]
    if verbose:
        handlers.append(logging.StreamHandler())
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )


def read_command(ui) -> str:
    return ui.text_input("What do you do?")


def game_step(game: Game, raw: str) -> bool:
    """
    One line of player input. Returns False when the player quits.
    """
    ui = game.ui
    raw = (raw or "").strip()
    if not raw:
        return True
    cmd = raw.lower()
    if cmd in ("/quit", "/exit", "q"):
        ui.system("Class dismissed.")
        return False
    if cmd in ("/restart", "/start"):
        game.start()
        return True
    if cmd in ("/help", "?"):
        ui.system(HELP)
        return True
    if game.state.is_over:
        ui.system("The semester is over. /restart to play again or /quit.")
        return True
    if raw.isdigit():
        if not game.choose(int(raw) - 1):
            ui.error(f"Pick a number from 1 to {len(game.state.visible_choices())}.")
        return True
    game.submit_action(raw)
    return True


def run(game: Game) -> None:
    ui = game.ui
    ui.scene(TITLE)
    ui.system(SIDEBAR)
    ui.scene(INTRO)

    while game.state.status == GameStatus.IDLE:
        raw = ui.text_input("Press Enter to START THE SEMESTER (or /quit)")
        if raw.strip().lower() in ("/quit", "/exit", "q"):
            return
        if not game.start():
            retry = ui.choice("Try again?", ["Retry", "Quit"])
            if retry == 1:
                return

    ui.system(HELP)
    while True:
        if not game_step(game, read_command(ui)):
            break


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    logger.info("Starting CLI game (model=%s)", args.model)
    ui = UI(CLIProvider(reveal_delay=args.reveal_delay))
    game = Game(ui, game_context.new_game_master(model=args.model))
    try:
        run(game)
    except (KeyboardInterrupt, EOFError):
        ui.system("\nClass dismissed.")


if __name__ == "__main__":
    main()
