"""
Main Application Window
=======================
The Qt surface the GalleryView renders into.

Why is this file needed?
------------------------
1. Layout: It organizes the search bar, category buttons, the card grid and
   the pagination row, with the detail overlay on top.
2. Binding: Widget input is forwarded to element handles (clicks, typed
   text) and element changes are mirrored back onto widgets. It holds no
   gallery logic of its own.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QPropertyAnimation
from PySide6.QtGui import QResizeEvent
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLineEdit, QPushButton,
    QLabel, QScrollArea, QGraphicsOpacityEffect
)

from imagegallery.application import VISIBLE_APP_NAME
from imagegallery.config import GalleryTimings, DEFAULT_TIMINGS
from imagegallery.view.elements import Element
from imagegallery.view.surface import GallerySurface
from imagegallery.view.widgets.cards import CardWidget, PlaceholderWidget
from imagegallery.view.widgets.modal_overlay import ModalOverlay

logger = logging.getLogger(__name__)

GRID_COLUMNS = 4


class GalleryWindow(QMainWindow):
    def __init__(
        self,
        surface: GallerySurface,
        image_root: Optional[str] = None,
        timings: GalleryTimings = DEFAULT_TIMINGS,
    ) -> None:
        super().__init__()
        self.surface = surface
        self.image_root = image_root
        self.timings = timings
        self._rendered_children: list[Element] = []
        self._fade_class: Optional[str] = None

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 800)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. SEARCH BAR ---
        search_row = QHBoxLayout()
        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search by title, category or keyword...")
        self.search_edit.textEdited.connect(surface.search_input.set_value)
        self.search_edit.returnPressed.connect(lambda: surface.search_button.click())
        search_row.addWidget(self.search_edit)

        self.btn_search = QPushButton(surface.search_button.text)
        self._bind_button(surface.search_button, self.btn_search)
        search_row.addWidget(self.btn_search)
        main_layout.addLayout(search_row)

        surface.search_input.changed.connect(self.sync_search_input)

        # --- 2. CATEGORY BUTTONS ---
        category_row = QHBoxLayout()
        self.category_buttons: list[QPushButton] = []
        for element in surface.category_buttons:
            button = QPushButton(element.text)
            button.setCheckable(True)
            self._bind_button(element, button)
            category_row.addWidget(button)
            self.category_buttons.append(button)
        category_row.addStretch()
        main_layout.addLayout(category_row)

        # --- 3. CARD GRID ---
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.grid_host = QWidget()
        self.grid = QGridLayout(self.grid_host)
        self.grid.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        self.scroll_area.setWidget(self.grid_host)
        main_layout.addWidget(self.scroll_area, stretch=1)

        self._gallery_effect = QGraphicsOpacityEffect(self.grid_host)
        self.grid_host.setGraphicsEffect(self._gallery_effect)
        self._gallery_animation = QPropertyAnimation(self._gallery_effect, b"opacity", self)

        surface.gallery.changed.connect(self.sync_gallery)
        surface.body.changed.connect(self.sync_body)

        # --- 4. PAGINATION ---
        pagination_row = QHBoxLayout()
        self.btn_prev = QPushButton(surface.prev_button.text)
        self._bind_button(surface.prev_button, self.btn_prev)
        self.lbl_page = QLabel()
        self.lbl_page.setAlignment(Qt.AlignCenter)
        surface.page_info.changed.connect(lambda: self.lbl_page.setText(surface.page_info.text))
        self.btn_next = QPushButton(surface.next_button.text)
        self._bind_button(surface.next_button, self.btn_next)
        pagination_row.addStretch()
        pagination_row.addWidget(self.btn_prev)
        pagination_row.addWidget(self.lbl_page)
        pagination_row.addWidget(self.btn_next)
        pagination_row.addStretch()
        main_layout.addLayout(pagination_row)

        # --- 5. OVERLAY ---
        self.overlay = ModalOverlay(surface, image_root, main_widget)

    # --- BINDING ---

    @staticmethod
    def _bind_button(element: Element, button: QPushButton) -> None:
        def sync() -> None:
            button.setText(element.text)
            button.setEnabled(not element.disabled)
            if button.isCheckable():
                button.setChecked(element.has_class("active"))

        button.clicked.connect(lambda: element.click())
        element.changed.connect(sync)
        sync()

    # --- SLOTS ---

    def sync_search_input(self) -> None:
        value = self.surface.search_input.value
        if self.search_edit.text() != value:
            self.search_edit.setText(value)

    def sync_body(self) -> None:
        locked = self.surface.body.style.get("overflow") == "hidden"
        self.scroll_area.verticalScrollBar().setEnabled(not locked)

    def sync_gallery(self) -> None:
        gallery = self.surface.gallery
        if gallery.child_elements != self._rendered_children:
            self._rebuild_grid(gallery.child_elements)

        fade = "fade-out" if gallery.has_class("fade-out") else "fade-in" if gallery.has_class("fade-in") else None
        if fade != self._fade_class:
            self._fade_class = fade
            if fade == "fade-out":
                self._animate_gallery(0.0, self.timings.fade_out_ms)
            elif fade == "fade-in":
                self._animate_gallery(1.0, self.timings.fade_in_ms)

    def _animate_gallery(self, opacity: float, duration_ms: int) -> None:
        self._gallery_animation.stop()
        self._gallery_animation.setDuration(duration_ms)
        self._gallery_animation.setEndValue(opacity)
        self._gallery_animation.start()

    def _rebuild_grid(self, children: list[Element]) -> None:
        while self.grid.count():
            item = self.grid.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

        for index, child in enumerate(children):
            if child.has_class("image-card"):
                widget: QWidget = CardWidget(child, self.image_root, self.timings.reveal_duration_ms)
                self.grid.addWidget(widget, index // GRID_COLUMNS, index % GRID_COLUMNS)
            else:
                widget = PlaceholderWidget(child)
                self.grid.addWidget(widget, 0, 0, 1, GRID_COLUMNS)
        self._rendered_children = list(children)
        logger.debug(f"Grid rebuilt with {len(children)} items.")

    def card_widgets(self) -> list[CardWidget]:
        widgets = []
        for i in range(self.grid.count()):
            widget = self.grid.itemAt(i).widget()
            if isinstance(widget, CardWidget):
                widgets.append(widget)
        return widgets

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.overlay.setGeometry(self.centralWidget().rect())
