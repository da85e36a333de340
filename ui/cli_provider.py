from __future__ import annotations

import sys
import time
from typing import Any, Dict, List, Optional

from config import REVEAL_DELAY
from engine.markup import ANSI_RESET, ANSI_STRONG, iter_spans, render_ansi
from engine.stats import render_bar
from ui.provider import UIProvider


class CLIProvider(UIProvider):
    is_blocking = True

    def __init__(self, reveal_delay: float = REVEAL_DELAY):
        self.reveal_delay = max(0.0, reveal_delay)

    def scene(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        print()
        print(text)
        print()

    def narration(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        print()
        self._typewrite(text)
        print()

    def player(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        print(f"\n>> {text}")

    def stats(self, stats: List[Dict[str, Any]], data: Optional[Dict[str, Any]] = None) -> None:
        print()
        for s in stats:
            print(f"{s['label']:<22} {render_bar(s['value'])} {s['value']:>3}%")

    def choices(self, options: List[str], data: Optional[Dict[str, Any]] = None) -> None:
        if not options:
            return
        print()
        for i, opt in enumerate(options, start=1):
            print(f"{i}. {opt}")

    def status(self, status: str, data: Optional[Dict[str, Any]] = None) -> None:
        pass

    def loading(self, active: bool) -> None:
        if active:
            print("...", flush=True)

    def system(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        print(text)

    def error(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        print(f"[ERROR] {text}")

    def notice(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        print()
        print(f"[!] {text}")
        input("Press Enter to continue...")

    def choice(self, prompt: str, options: List[str], data: Optional[Dict[str, Any]] = None) -> int:
        print()
        if prompt:
            print(prompt)
        for i, opt in enumerate(options, start=1):
            print(f"{i}. {opt}")

        while True:
            raw = input("> ").strip()
            try:
                sel = int(raw)
                if 1 <= sel <= len(options):
                    return sel - 1
            except ValueError:
                pass
            self.error(f"Enter a number from 1 to {len(options)}.")

    def text_input(self, prompt: str, data: Optional[Dict[str, Any]] = None) -> str:
        print()
        return input(f"{prompt}\n> ").strip()

    def _typewrite(self, text: str) -> None:
        out = sys.stdout
        if not self.reveal_delay:
            out.write(render_ansi(text) + "\n")
            out.flush()
            return
        for span in iter_spans(text):
            if span.emphasized:
                out.write(ANSI_STRONG)
            for ch in span.text:
                out.write(ch)
                out.flush()
                time.sleep(self.reveal_delay)
            if span.emphasized:
                out.write(ANSI_RESET)
        out.write("\n")
        out.flush()
