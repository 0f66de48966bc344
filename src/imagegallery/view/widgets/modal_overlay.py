"""
Detail Overlay
A full-window backdrop with a content frame. Backdrop clicks go to the modal
element, clicks on the frame go to the content element, so the bubbling rules
of the element tree decide whether the overlay closes.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QMouseEvent, QPainter, QColor, QPaintEvent
from PySide6.QtWidgets import QWidget, QFrame, QVBoxLayout, QHBoxLayout, QLabel, QPushButton

from imagegallery.view.surface import GallerySurface
from imagegallery.view.widgets.cards import set_picture

MODAL_IMAGE_SIZE = 480


class ContentFrame(QFrame):
    def __init__(self, surface: GallerySurface, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.surface = surface
        self.setObjectName("modalContent")
        self.setStyleSheet("#modalContent { background: white; border-radius: 8px; }")

    def mousePressEvent(self, event: QMouseEvent) -> None:
        self.surface.modal_content.click()
        event.accept()


class ModalOverlay(QWidget):
    def __init__(self, surface: GallerySurface, image_root: Optional[str], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.surface = surface
        self.image_root = image_root

        outer = QVBoxLayout(self)
        outer.setAlignment(Qt.AlignCenter)

        self.content = ContentFrame(surface, self)
        outer.addWidget(self.content)
        layout = QVBoxLayout(self.content)

        header = QHBoxLayout()
        header.addStretch()
        self.btn_close = QPushButton(surface.close_button.text)
        self.btn_close.setFixedWidth(32)
        self.btn_close.clicked.connect(lambda: surface.close_button.click())
        header.addWidget(self.btn_close)
        layout.addLayout(header)

        self.lbl_image = QLabel()
        self.lbl_image.setAlignment(Qt.AlignCenter)
        self.lbl_image.setMinimumSize(MODAL_IMAGE_SIZE, MODAL_IMAGE_SIZE // 2)
        layout.addWidget(self.lbl_image)

        self.lbl_caption = QLabel()
        self.lbl_caption.setAlignment(Qt.AlignCenter)
        self.lbl_caption.setStyleSheet("font-size: 16px; font-weight: bold;")
        layout.addWidget(self.lbl_caption)

        self.keywords_row = QHBoxLayout()
        layout.addLayout(self.keywords_row)
        self.keyword_labels: list[QLabel] = []

        surface.modal.changed.connect(self.sync_visibility)
        surface.modal_image.changed.connect(self.sync_image)
        surface.modal_caption.changed.connect(self.sync_caption)
        surface.keywords.changed.connect(self.sync_keywords)
        surface.close_button.focus_requested.connect(self.btn_close.setFocus)

        self.sync_visibility()

    def sync_visibility(self) -> None:
        visible = self.surface.modal.has_class("show")
        self.setVisible(visible)
        if visible:
            self.raise_()

    def sync_image(self) -> None:
        attrs = self.surface.modal_image.attrs
        set_picture(self.lbl_image, attrs.get("src", ""), attrs.get("alt", ""), self.image_root, MODAL_IMAGE_SIZE)

    def sync_caption(self) -> None:
        self.lbl_caption.setText(self.surface.modal_caption.text)

    def sync_keywords(self) -> None:
        for label in self.keyword_labels:
            self.keywords_row.removeWidget(label)
            label.deleteLater()
        self.keyword_labels = []
        for token in self.surface.keywords.child_elements:
            label = QLabel(token.text)
            label.setStyleSheet("background: #e8f0e8; border-radius: 4px; padding: 2px 6px;")
            self.keywords_row.addWidget(label)
            self.keyword_labels.append(label)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(0, 0, 0, 160))
        super().paintEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        self.surface.modal.click()
        event.accept()
