"""
Element Handles
===============
A small retained tree of UI elements that the GalleryView renders into.

Why is this file needed?
------------------------
1. Testability: The view logic (what is shown, which control is disabled,
   when the overlay hides) can be exercised without creating real widgets.
2. Decoupling: The Qt window only listens to `changed` and turns element
   state into widget state, so rendering rules live in one place.

Clicks bubble from the clicked element up through its ancestors, like in a
browser, and any handler may stop the propagation.
"""
from __future__ import annotations

import logging
import warnings
from typing import Optional

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class ClickEvent:
    def __init__(self, target: Element) -> None:
        self.target = target
        self.current_target: Element = target
        self.propagation_stopped = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class Element(QObject):
    changed = Signal()
    clicked = Signal(object)  # ClickEvent
    focus_requested = Signal()

    def __init__(self, role: str, text: str = "", classes: tuple[str, ...] = ()) -> None:
        super().__init__()
        self.role = role
        self.text = text
        self.value = ""
        self.disabled = False
        self.classes: set[str] = set(classes)
        self.attrs: dict[str, str] = {}
        self.style: dict[str, str] = {}
        self.child_elements: list[Element] = []
        self.container: Optional[Element] = None

    def __repr__(self) -> str:
        return f"<Element {self.role} classes={sorted(self.classes)}>"

    # --- STATE ---

    def set_text(self, text: str) -> None:
        self.text = text
        self.changed.emit()

    def set_value(self, value: str) -> None:
        self.value = value
        self.changed.emit()

    def set_disabled(self, disabled: bool) -> None:
        self.disabled = disabled
        self.changed.emit()

    def set_attr(self, name: str, value: str) -> None:
        self.attrs[name] = value
        self.changed.emit()

    def set_style(self, **properties: str) -> None:
        self.style.update(properties)
        self.changed.emit()

    def add_class(self, name: str) -> None:
        self.classes.add(name)
        self.changed.emit()

    def remove_class(self, name: str) -> None:
        self.classes.discard(name)
        self.changed.emit()

    def toggle_class(self, name: str, on: bool) -> None:
        if on:
            self.add_class(name)
        else:
            self.remove_class(name)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    # --- TREE ---

    @property
    def is_attached(self) -> bool:
        return self.container is not None

    def replace_children(self, children: list[Element]) -> None:
        """Swap the whole content. Old children are detached and stop dispatching."""
        for child in self.child_elements:
            if child not in children:
                child.detach()
        for child in children:
            child.container = self
        self.child_elements = list(children)
        self.changed.emit()

    def clear_children(self) -> None:
        self.replace_children([])

    def detach(self) -> None:
        """Drop out of the tree and release every click and change handler."""
        self.container = None
        for child in self.child_elements:
            child.detach()
        for signal in (self.clicked, self.changed):
            with warnings.catch_warnings():
                # PySide6 warns (older releases raise) when nothing is connected
                warnings.simplefilter("ignore", RuntimeWarning)
                try:
                    signal.disconnect()
                except (RuntimeError, TypeError):
                    pass

    # --- INPUT ---

    def click(self) -> ClickEvent:
        event = ClickEvent(self)
        if self.disabled:
            logger.debug(f"Ignoring click on disabled {self.role}")
            return event
        node: Optional[Element] = self
        while node is not None and not event.propagation_stopped:
            event.current_target = node
            node.clicked.emit(event)
            node = node.container
        return event

    def focus(self) -> None:
        self.focus_requested.emit()
