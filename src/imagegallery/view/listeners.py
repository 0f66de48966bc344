"""
Interaction Listeners
=====================
One narrow interface per kind of user interaction, and a slot that holds at
most one listener of that kind.

The GalleryController implements all five protocols and registers itself for
each. Registering again replaces the previous listener; an interaction that
arrives before anyone registered is dropped.
"""
from __future__ import annotations

import logging
from typing import Any, Generic, Optional, Protocol, TypeVar

logger = logging.getLogger(__name__)


class SearchListener(Protocol):
    def on_search_change(self, term: str) -> None: ...


class CategoryListener(Protocol):
    def on_category_change(self, category: str) -> None: ...


class PrevPageListener(Protocol):
    def on_prev_page(self) -> None: ...


class NextPageListener(Protocol):
    def on_next_page(self) -> None: ...


class ImageClickListener(Protocol):
    def on_image_click(self, image_id: int) -> None: ...


L = TypeVar("L")


class ListenerSlot(Generic[L]):
    """Holds the single listener for one interaction kind."""

    def __init__(self, kind: str, method: str) -> None:
        self.kind = kind
        self._method = method
        self._listener: Optional[L] = None

    @property
    def listener(self) -> Optional[L]:
        return self._listener

    def register(self, listener: Optional[L]) -> None:
        if self._listener is not None and listener is not self._listener:
            logger.debug(f"Replacing {self.kind} listener {self._listener!r} with {listener!r}")
        self._listener = listener

    def notify(self, *args: Any) -> bool:
        """Forward to the listener. Returns False when no listener is registered."""
        if self._listener is None:
            logger.debug(f"No {self.kind} listener registered; ignoring input.")
            return False
        getattr(self._listener, self._method)(*args)
        return True
