"""
Gallery View
============
Renders catalog data into the GallerySurface and turns raw clicks into
interaction callbacks.

Why is this file needed?
------------------------
1. Rendering: cards, the "no results" placeholder, pagination controls, the
   active category and the search field are all written here and nowhere else.
2. Input: raw element clicks are translated into the five listener calls
   (search, category, previous page, next page, image click).
3. Modal: the detail overlay is a two-state machine (CLOSED/OPEN) whose
   content is only cleared once the closing animation is over.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Any, Callable, Optional, Sequence

from imagegallery.config import (
    GalleryTimings, DEFAULT_TIMINGS, PAGE_INFO_TEMPLATE, NO_RESULTS_TITLE, NO_RESULTS_HINT
)
from imagegallery.controller.scheduling import Scheduler
from imagegallery.model.image import Image, PaginationInfo
from imagegallery.view.elements import ClickEvent, Element
from imagegallery.view.listeners import (
    ListenerSlot, SearchListener, CategoryListener, PrevPageListener, NextPageListener,
    ImageClickListener
)
from imagegallery.view.surface import GallerySurface
from imagegallery.view.transitions import PhasedTransition

logger = logging.getLogger(__name__)

ACTIVE_CLASS = "active"
SHOW_CLASS = "show"
CARD_CLASS = "image-card"


class ModalPhase(Enum):
    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True)
class ModalState:
    is_open: bool = False
    displayed_image: Optional[Image] = None


def format_categories(image: Image) -> str:
    return ", ".join(category.capitalize() for category in image.categories)


def log_stats(stats: Any) -> None:
    logger.info(f"Gallery statistics: {stats}")


class GalleryView:
    def __init__(
        self,
        surface: GallerySurface,
        scheduler: Scheduler,
        timings: GalleryTimings = DEFAULT_TIMINGS,
        stats_sink: Callable[[Any], None] = log_stats,
    ) -> None:
        self.surface = surface
        self._scheduler = scheduler
        self._timings = timings
        self._stats_sink = stats_sink

        self._search_slot: ListenerSlot[SearchListener] = ListenerSlot("search", "on_search_change")
        self._category_slot: ListenerSlot[CategoryListener] = ListenerSlot("category", "on_category_change")
        self._prev_slot: ListenerSlot[PrevPageListener] = ListenerSlot("previous page", "on_prev_page")
        self._next_slot: ListenerSlot[NextPageListener] = ListenerSlot("next page", "on_next_page")
        self._image_slot: ListenerSlot[ImageClickListener] = ListenerSlot("image click", "on_image_click")

        self._gallery_transition = PhasedTransition(
            surface.gallery, scheduler, timings.fade_out_ms, timings.fade_in_ms
        )

        self._modal_phase = ModalPhase.CLOSED
        self._displayed_image: Optional[Image] = None
        # Bumped on every open/close so stale delayed steps can tell they are outdated
        self._modal_token = 0

        self._setup_event_listeners()
        self._setup_modal_events()

    # ------------------------------------------------------------------------------
    # Listener registration
    # ------------------------------------------------------------------------------

    def set_search_listener(self, listener: Optional[SearchListener]) -> None:
        self._search_slot.register(listener)

    def set_category_listener(self, listener: Optional[CategoryListener]) -> None:
        self._category_slot.register(listener)

    def set_prev_page_listener(self, listener: Optional[PrevPageListener]) -> None:
        self._prev_slot.register(listener)

    def set_next_page_listener(self, listener: Optional[NextPageListener]) -> None:
        self._next_slot.register(listener)

    def set_image_click_listener(self, listener: Optional[ImageClickListener]) -> None:
        self._image_slot.register(listener)

    def _setup_event_listeners(self) -> None:
        s = self.surface
        s.search_button.clicked.connect(lambda _event: self._search_slot.notify(s.search_input.value))
        for button in s.category_buttons:
            button.clicked.connect(partial(self._on_category_clicked, button))
        s.prev_button.clicked.connect(lambda _event: self._prev_slot.notify())
        s.next_button.clicked.connect(lambda _event: self._next_slot.notify())

    def _setup_modal_events(self) -> None:
        s = self.surface
        s.close_button.clicked.connect(lambda _event: self.hide_modal())
        s.modal.clicked.connect(self._on_backdrop_clicked)
        # Clicks inside the content box must never reach the backdrop handler
        s.modal_content.clicked.connect(lambda event: event.stop_propagation())

    def _on_category_clicked(self, button: Element, _event: ClickEvent) -> None:
        self._category_slot.notify(button.attrs.get("data-category", ""))

    def _on_backdrop_clicked(self, event: ClickEvent) -> None:
        if event.target is self.surface.modal:
            self.hide_modal()

    # ------------------------------------------------------------------------------
    # Gallery
    # ------------------------------------------------------------------------------

    @property
    def cards(self) -> list[Element]:
        return [child for child in self.surface.gallery.child_elements if child.has_class(CARD_CLASS)]

    def render_gallery(self, images: Sequence[Image]) -> None:
        """Fade the gallery out, replace its content, fade it back in."""
        snapshot = list(images)
        self._gallery_transition.run(partial(self._swap_gallery_content, snapshot))

    def when_rendered(self, callback: Callable[[list[Element]], None]) -> None:
        """Call `callback` with the cards of the latest render once they are in place."""
        self._gallery_transition.after_swap(lambda: callback(self.cards))

    def _swap_gallery_content(self, images: list[Image]) -> None:
        if not images:
            self._render_no_results()
        else:
            self._render_images(images)

    def _render_images(self, images: list[Image]) -> None:
        cards = [self._build_card(image) for image in images]
        self.surface.gallery.replace_children(cards)
        self._bind_image_click(cards)
        logger.debug(f"Rendered {len(cards)} image cards.")

    def _render_no_results(self) -> None:
        placeholder = Element("no-results", text=NO_RESULTS_TITLE, classes=("no-results",))
        placeholder.attrs["hint"] = NO_RESULTS_HINT
        self.surface.gallery.replace_children([placeholder])
        logger.debug("Rendered empty-result placeholder.")

    @staticmethod
    def _build_card(image: Image) -> Element:
        card = Element("image-card", text=image.title, classes=(CARD_CLASS,))
        card.attrs.update({
            "data-id": str(image.id),
            "src": image.url,
            "alt": image.title,
            "category": format_categories(image),
        })
        return card

    def _bind_image_click(self, cards: list[Element]) -> None:
        for card in cards:
            card.clicked.connect(partial(self._on_card_clicked, card))

    def _on_card_clicked(self, card: Element, _event: ClickEvent) -> None:
        self._image_slot.notify(int(card.attrs["data-id"]))

    # ------------------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------------------

    def update_pagination(self, info: PaginationInfo) -> None:
        s = self.surface
        s.page_info.set_text(PAGE_INFO_TEMPLATE.format(current=info.current_page, total=info.total_pages))
        s.prev_button.set_disabled(not info.has_prev_page)
        s.next_button.set_disabled(not info.has_next_page)

    def update_category_buttons(self, active_category: str) -> None:
        for button in self.surface.category_buttons:
            button.toggle_class(ACTIVE_CLASS, button.attrs.get("data-category") == active_category)

    def update_search_input(self, term: str) -> None:
        self.surface.search_input.set_value(term)

    def show_stats(self, stats: Any) -> None:
        self._stats_sink(stats)

    # ------------------------------------------------------------------------------
    # Modal
    # ------------------------------------------------------------------------------

    @property
    def modal_state(self) -> ModalState:
        return ModalState(
            is_open=self._modal_phase is ModalPhase.OPEN,
            displayed_image=self._displayed_image,
        )

    def show_modal(self, image: Image) -> None:
        s = self.surface
        self._modal_token += 1
        token = self._modal_token

        s.modal_image.set_attr("src", image.url)
        s.modal_image.set_attr("alt", image.title)
        s.modal_caption.set_text(image.title)
        tokens = []
        for keyword in image.keywords:
            tokens.append(Element("keyword", text=keyword, classes=("keyword",)))
        s.keywords.replace_children(tokens)

        # Snapshot before flagging open so the state is never open without an image
        self._displayed_image = image
        self._modal_phase = ModalPhase.OPEN
        s.modal.add_class(SHOW_CLASS)
        s.body.set_style(overflow="hidden")
        logger.debug(f"Modal opened for image {image.id}")

        self._scheduler.call_later(self._timings.modal_focus_delay_ms, partial(self._focus_close_button, token))

    def hide_modal(self) -> None:
        if self._modal_phase is ModalPhase.CLOSED:
            return
        s = self.surface
        self._modal_token += 1
        token = self._modal_token

        self._modal_phase = ModalPhase.CLOSED
        s.modal.remove_class(SHOW_CLASS)
        s.body.set_style(overflow="")
        logger.debug("Modal closed.")

        self._scheduler.call_later(self._timings.modal_close_ms, partial(self._clear_modal_content, token))

    def _focus_close_button(self, token: int) -> None:
        if token == self._modal_token and self._modal_phase is ModalPhase.OPEN:
            self.surface.close_button.focus()

    def _clear_modal_content(self, token: int) -> None:
        # Reopened in the meantime: the new content stays
        if token != self._modal_token:
            return
        s = self.surface
        s.modal_image.set_attr("src", "")
        s.modal_image.set_attr("alt", "")
        s.modal_caption.set_text("")
        s.keywords.clear_children()
        self._displayed_image = None
