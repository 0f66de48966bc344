"""
Gallery Data Types
==================
Plain value objects passed between the catalog, the controller and the view.

Classes:
    Image: One browsable image with its categories and keywords.
    PaginationInfo: Where the current page sits within the filtered results.
    CatalogStats: Aggregate counts reported to the stats sink.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Union


class CatalogLoadError(ValueError):
    """Raised when a catalog record or file cannot be turned into images."""


@dataclass(frozen=True)
class Image:
    id: int
    url: str
    title: str
    # A single category or an ordered tuple of them
    category: Union[str, tuple[str, ...]] = ""
    keywords: tuple[str, ...] = ()

    @property
    def categories(self) -> tuple[str, ...]:
        if isinstance(self.category, str):
            return (self.category,) if self.category else ()
        return tuple(self.category)

    def in_category(self, category: str) -> bool:
        return category in self.categories

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Image:
        """
        Build an Image from a JSON record.

        `category` may be a string or a list of strings; `keywords` a list of strings.
        """
        if not isinstance(data, dict):
            raise CatalogLoadError(f"Image record must be an object, got {type(data).__name__}")

        missing = [key for key in ("id", "url", "title") if key not in data]
        if missing:
            raise CatalogLoadError(f"Image record {data!r} is missing {', '.join(missing)}")

        image_id = data["id"]
        if isinstance(image_id, bool) or not isinstance(image_id, int):
            raise CatalogLoadError(f"Image id must be an integer, got {image_id!r}")

        raw_category = data.get("category", "")
        if isinstance(raw_category, list):
            category: Union[str, tuple[str, ...]] = tuple(str(c) for c in raw_category)
        elif isinstance(raw_category, str):
            category = raw_category
        else:
            raise CatalogLoadError(f"Image {image_id}: category must be a string or a list")

        keywords = data.get("keywords", [])
        if not isinstance(keywords, list):
            raise CatalogLoadError(f"Image {image_id}: keywords must be a list")

        return cls(
            id=image_id,
            url=str(data["url"]),
            title=str(data["title"]),
            category=category,
            keywords=tuple(str(k) for k in keywords),
        )


@dataclass(frozen=True)
class PaginationInfo:
    current_page: int
    total_pages: int
    has_prev_page: bool
    has_next_page: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CatalogStats:
    total_images: int
    filtered_images: int
    category_counts: dict[str, int] = field(default_factory=dict)
    active_category: str = ""
    search_term: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
