from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from .styles import ComputedStyle


class StyleEngine(ABC):
    """Read-only handle on a rendered document.

    Elements are opaque to the cloner; only the engine knows how to walk them
    and how to resolve their computed style.
    """

    @abstractmethod
    def load_html(self, html: str) -> None:
        """Replace the current document with ``html`` and render it."""

    @abstractmethod
    def query_selector(self, selector: str) -> Optional[Any]:
        """First element matching ``selector`` in document order, or None.

        Raises InvalidSelectorError for a malformed selector.
        """

    @abstractmethod
    def children(self, element: Any) -> List[Any]:
        """Element children in document order (text and comments excluded)."""

    @abstractmethod
    def tag_name(self, element: Any) -> str:
        ...

    @abstractmethod
    def outer_html(self, element: Any) -> str:
        ...

    @abstractmethod
    def computed_style(self, element: Any, pseudo: Optional[str] = None) -> ComputedStyle:
        """Resolved style of ``element`` or of its ``::pseudo`` element.

        Engines raise PseudoElementUnavailable when a pseudo-element cannot be
        queried.
        """
