"""
Gallery Surface
Every element handle the GalleryView needs, built once and injected.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Optional, Sequence

from imagegallery.view.elements import Element


@dataclass
class GallerySurface:
    body: Element
    search_input: Element
    search_button: Element
    category_buttons: list[Element]
    prev_button: Element
    next_button: Element
    page_info: Element
    gallery: Element
    modal: Element
    modal_content: Element
    modal_image: Element
    modal_caption: Element
    keywords: Element
    close_button: Element

    focused: Optional[Element] = field(default=None, init=False)

    def __post_init__(self) -> None:
        for element in self.elements():
            element.focus_requested.connect(partial(self._set_focus, element))

    @classmethod
    def build(cls, categories: Sequence[str]) -> GallerySurface:
        """Create the element tree with one category button per identifier."""
        body = Element("body")

        category_buttons = []
        for category in categories:
            button = Element("category-button", text=category.capitalize(), classes=("category-btn",))
            button.attrs["data-category"] = category
            category_buttons.append(button)

        modal = Element("modal", classes=("modal",))
        modal_content = Element("modal-content", classes=("modal-content",))
        modal_image = Element("modal-image")
        modal_caption = Element("modal-caption")
        keywords = Element("keywords")
        close_button = Element("close-button", text="×", classes=("close-btn",))

        modal.replace_children([modal_content])
        modal_content.replace_children([close_button, modal_image, modal_caption, keywords])
        body.replace_children([modal])

        return cls(
            body=body,
            search_input=Element("search-input"),
            search_button=Element("search-button", text="Search"),
            category_buttons=category_buttons,
            prev_button=Element("prev-button", text="Previous"),
            next_button=Element("next-button", text="Next"),
            page_info=Element("page-info"),
            gallery=Element("gallery", classes=("gallery",)),
            modal=modal,
            modal_content=modal_content,
            modal_image=modal_image,
            modal_caption=modal_caption,
            keywords=keywords,
            close_button=close_button,
        )

    def elements(self) -> list[Element]:
        return [
            self.body, self.search_input, self.search_button, *self.category_buttons,
            self.prev_button, self.next_button, self.page_info, self.gallery,
            self.modal, self.modal_content, self.modal_image, self.modal_caption,
            self.keywords, self.close_button,
        ]

    def _set_focus(self, element: Element) -> None:
        self.focused = element
