"""
Gallery Controller
==================
The single authority that turns user intent into catalog changes and drives
re-renders.

Why is this file needed?
------------------------
1. Routing: It implements every interaction listener of the GalleryView and
   translates each into catalog setter calls.
2. Sequencing: Re-renders are never synchronous. Each change schedules the
   gallery update sequence, which re-reads the catalog when it runs, so the
   last scheduled update always shows the latest query.
3. Animation: After each render it staggers the entrance of the new cards.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from imagegallery.config import ALL_CATEGORIES, GalleryTimings, DEFAULT_TIMINGS
from imagegallery.controller.scheduling import Scheduler
from imagegallery.model.catalog import CatalogLike
from imagegallery.model.image import Image
from imagegallery.view.gallery_view import GalleryView
from imagegallery.view.transitions import StaggeredReveal

logger = logging.getLogger(__name__)


class GalleryController:
    def __init__(
        self,
        catalog: CatalogLike,
        view: GalleryView,
        scheduler: Scheduler,
        timings: GalleryTimings = DEFAULT_TIMINGS,
    ) -> None:
        self.catalog = catalog
        self.view = view
        self._scheduler = scheduler
        self._timings = timings
        self._reveal = StaggeredReveal(scheduler, timings)

        self._update_sequence = 0
        self._pending_updates = 0

        self._setup_view_listeners()
        self.initialize_gallery()

    def _setup_view_listeners(self) -> None:
        self.view.set_search_listener(self)
        self.view.set_category_listener(self)
        self.view.set_prev_page_listener(self)
        self.view.set_next_page_listener(self)
        self.view.set_image_click_listener(self)

    def initialize_gallery(self) -> None:
        self.update_gallery()

    @property
    def pending_updates(self) -> int:
        return self._pending_updates

    # --- LISTENERS ---

    def on_search_change(self, term: str) -> None:
        self.catalog.set_search(term)
        self.update_gallery()

    def on_category_change(self, category: str) -> None:
        self.catalog.set_category(category)
        self.update_gallery()

    def on_prev_page(self) -> None:
        if self.catalog.prev_page():
            self.update_gallery()
        else:
            logger.debug("Already on the first page.")

    def on_next_page(self) -> None:
        if self.catalog.next_page():
            self.update_gallery()
        else:
            logger.debug("Already on the last page.")

    def on_image_click(self, image_id: int) -> None:
        image = self._find_image(image_id)
        if image is None:
            logger.warning(f"Clicked image {image_id} is not in the catalog; ignoring.")
            return
        self.view.show_modal(image)

    def _find_image(self, image_id: int) -> Optional[Image]:
        for image in self.catalog.get_all_images():
            if image.id == image_id:
                return image
        return None

    # --- COMMANDS ---

    def reset_filters(self) -> None:
        self.catalog.set_category(ALL_CATEGORIES)
        self.catalog.set_search("")
        self.update_gallery()

    def update_gallery(self) -> None:
        """Schedule the gallery update sequence."""
        self._update_sequence += 1
        self._pending_updates += 1
        sequence = self._update_sequence
        logger.debug(f"Gallery update #{sequence} scheduled ({self._pending_updates} pending).")
        self._scheduler.call_later(self._timings.update_delay_ms, lambda: self._run_update(sequence))

    def _run_update(self, sequence: int) -> None:
        self._pending_updates -= 1

        # Always read the catalog now, not when the update was scheduled
        images = self.catalog.get_current_page_images()
        pagination = self.catalog.get_pagination_info()
        stats = self.catalog.get_stats()

        self.view.render_gallery(images)
        self.view.update_pagination(pagination)
        self.view.update_category_buttons(self.catalog.current_category)
        self.view.update_search_input(self.catalog.current_search)
        self.view.show_stats(stats)

        self.view.when_rendered(self._reveal.run)
        logger.debug(
            f"Gallery update #{sequence}: {len(images)} images, "
            f"page {pagination.current_page}/{pagination.total_pages}."
        )

    # --- QUERIES ---

    def get_detailed_stats(self) -> dict[str, Any]:
        stats = self.catalog.get_stats()
        pagination = self.catalog.get_pagination_info()
        return {
            **stats.to_dict(),
            **pagination.to_dict(),
            "images_per_page": self.catalog.images_per_page,
        }

    def get_all_images(self) -> list[Image]:
        return list(self.catalog.get_all_images())

    def get_filtered_images(self) -> list[Image]:
        return list(self.catalog.get_filtered_images())
