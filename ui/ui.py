from __future__ import annotations

from typing import Any, Dict, List, Optional
from ui.provider import UIProvider


class UI:
    """
    The game talks to UI, not to a specific provider.
    """

    def __init__(self, provider: UIProvider):
        self.provider = provider

    @property
    def is_blocking(self) -> bool:
        return getattr(self.provider, "is_blocking", True)

    def scene(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.provider.scene(text, data)

    def narration(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.provider.narration(text, data)

    def player(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.provider.player(text, data)

    def stats(self, stats: List[Dict[str, Any]], data: Optional[Dict[str, Any]] = None) -> None:
        self.provider.stats(stats, data)

    def choices(self, options: List[str], data: Optional[Dict[str, Any]] = None) -> None:
        self.provider.choices(options, data)

    def status(self, status: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.provider.status(status, data)

    def loading(self, active: bool) -> None:
        self.provider.loading(active)

    def system(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.provider.system(text, data)

    def error(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.provider.error(text, data)

    def notice(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.provider.notice(text, data)

    def choice(self, prompt: str, options: List[str], data: Optional[Dict[str, Any]] = None) -> Optional[int]:
        return self.provider.choice(prompt, options, data)

    def text_input(self, prompt: str, data: Optional[Dict[str, Any]] = None) -> Optional[str]:
        return self.provider.text_input(prompt, data)
