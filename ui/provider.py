from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class UIProvider(ABC):
    """
    UI abstraction. The game emits structured updates. The provider renders them.
    Providers may be CLI, Web, etc.
    """

    is_blocking = True

    @abstractmethod
    def scene(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        """Title cards and end-of-game banners."""
        pass

    @abstractmethod
    def narration(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        """A game master turn. Text may carry **emphasis** markup."""
        pass

    @abstractmethod
    def player(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        """The player's own action, echoed into the transcript."""
        pass

    @abstractmethod
    def stats(self, stats: List[Dict[str, Any]], data: Optional[Dict[str, Any]] = None) -> None:
        """
        stats: [{"key", "label", "value"}] with values already clamped.
        """
        pass

    @abstractmethod
    def choices(self, options: List[str], data: Optional[Dict[str, Any]] = None) -> None:
        pass

    @abstractmethod
    def status(self, status: str, data: Optional[Dict[str, Any]] = None) -> None:
        pass

    @abstractmethod
    def loading(self, active: bool) -> None:
        pass

    @abstractmethod
    def system(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        pass

    @abstractmethod
    def error(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        pass

    @abstractmethod
    def notice(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        """
        Blocking notice: the user must acknowledge it before going on.
        """
        pass

    @abstractmethod
    def choice(
        self,
        prompt: str,
        options: List[str],
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[int]:
        """
        Returns the 0-based index of the selected option.
        """
        pass

    @abstractmethod
    def text_input(
        self,
        prompt: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        """
        Returns raw string input.
        """
        pass
