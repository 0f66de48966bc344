"""
Image Catalog
=============
The authoritative store of images and of the current query (search term,
category, page).

Why is this file needed?
------------------------
1. Single mutator: the controller changes the query only through the setters
   below; views never touch it.
2. Derived values: filtered results, the visible page, pagination flags and
   stats are recomputed from the query on every call, so they are never stale.

Classes:
    CatalogLike: The interface the controller depends on.
    ImageCatalog: In-memory implementation.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, Protocol, Sequence

from imagegallery.config import ALL_CATEGORIES, DEFAULT_IMAGES_PER_PAGE
from imagegallery.model.image import Image, PaginationInfo, CatalogStats
from imagegallery.model.io import load_images

logger = logging.getLogger(__name__)


class CatalogLike(Protocol):
    @property
    def current_category(self) -> str: ...
    @property
    def current_search(self) -> str: ...
    @property
    def images_per_page(self) -> int: ...

    def set_search(self, term: str) -> None: ...
    def set_category(self, category: str) -> None: ...
    def prev_page(self) -> bool: ...
    def next_page(self) -> bool: ...
    def get_all_images(self) -> Sequence[Image]: ...
    def get_filtered_images(self) -> Sequence[Image]: ...
    def get_current_page_images(self) -> Sequence[Image]: ...
    def get_pagination_info(self) -> PaginationInfo: ...
    def get_stats(self) -> CatalogStats: ...


class ImageCatalog:
    def __init__(self, images: Iterable[Image], images_per_page: int = DEFAULT_IMAGES_PER_PAGE) -> None:
        if images_per_page < 1:
            raise ValueError(f"images_per_page must be at least 1, got {images_per_page}")

        self._images: list[Image] = list(images)
        seen: set[int] = set()
        for image in self._images:
            if image.id in seen:
                raise ValueError(f"Duplicate image id {image.id} in catalog.")
            seen.add(image.id)

        self._images_per_page = images_per_page
        self._search = ""
        self._category = ALL_CATEGORIES
        self._page = 1

    @classmethod
    def from_file(cls, filepath: str, images_per_page: int = DEFAULT_IMAGES_PER_PAGE) -> ImageCatalog:
        return cls(load_images(filepath), images_per_page=images_per_page)

    # --- QUERY STATE ---

    @property
    def current_search(self) -> str:
        return self._search

    @property
    def current_category(self) -> str:
        return self._category

    @property
    def current_page(self) -> int:
        return self._page

    @property
    def images_per_page(self) -> int:
        return self._images_per_page

    def set_search(self, term: str) -> None:
        self._search = term
        self._page = 1
        logger.debug(f"Search set to {term!r}")

    def set_category(self, category: str) -> None:
        # Unknown categories are accepted and simply match nothing
        self._category = category
        self._page = 1
        logger.debug(f"Category set to {category!r}")

    def prev_page(self) -> bool:
        if self._page <= 1:
            return False
        self._page -= 1
        return True

    def next_page(self) -> bool:
        if self._page >= self._total_pages():
            return False
        self._page += 1
        return True

    # --- QUERIES ---

    def categories(self) -> list[str]:
        """Distinct category identifiers in first-seen order."""
        found: dict[str, None] = {}
        for image in self._images:
            for category in image.categories:
                found.setdefault(category, None)
        return list(found)

    def get_all_images(self) -> list[Image]:
        return list(self._images)

    def get_filtered_images(self) -> list[Image]:
        needle = self._search.strip().casefold()
        return [
            image for image in self._images
            if self._matches_category(image) and self._matches_search(image, needle)
        ]

    def get_current_page_images(self) -> list[Image]:
        start = (self._page - 1) * self._images_per_page
        return self.get_filtered_images()[start:start + self._images_per_page]

    def get_pagination_info(self) -> PaginationInfo:
        total = self._total_pages()
        return PaginationInfo(
            current_page=self._page,
            total_pages=total,
            has_prev_page=self._page > 1,
            has_next_page=self._page < total,
        )

    def get_stats(self) -> CatalogStats:
        counts: dict[str, int] = {}
        for image in self._images:
            for category in image.categories:
                counts[category] = counts.get(category, 0) + 1
        return CatalogStats(
            total_images=len(self._images),
            filtered_images=len(self.get_filtered_images()),
            category_counts=counts,
            active_category=self._category,
            search_term=self._search,
        )

    # --- HELPERS ---

    def _total_pages(self) -> int:
        # Zero results still show as "page 1 of 1"
        return max(1, math.ceil(len(self.get_filtered_images()) / self._images_per_page))

    def _matches_category(self, image: Image) -> bool:
        return self._category == ALL_CATEGORIES or image.in_category(self._category)

    @staticmethod
    def _matches_search(image: Image, needle: str) -> bool:
        if not needle:
            return True
        haystack = [image.title, *image.categories, *image.keywords]
        return any(needle in text.casefold() for text in haystack)
