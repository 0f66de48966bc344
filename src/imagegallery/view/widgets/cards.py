from __future__ import annotations

import os
from typing import Optional

from PySide6.QtCore import Qt, QPropertyAnimation, QEasingCurve
from PySide6.QtGui import QPixmap, QMouseEvent
from PySide6.QtWidgets import QFrame, QVBoxLayout, QLabel, QGraphicsOpacityEffect, QWidget

from imagegallery.view.elements import Element

THUMBNAIL_SIZE = 180


def load_pixmap(url: str, image_root: Optional[str]) -> QPixmap:
    """Load a local image. Remote or missing files give a null pixmap."""
    if not url or "://" in url:
        return QPixmap()
    path = url if os.path.isabs(url) or not image_root else os.path.join(image_root, url)
    if not os.path.exists(path):
        return QPixmap()
    return QPixmap(path)


def set_picture(label: QLabel, url: str, alt: str, image_root: Optional[str], size: int) -> None:
    pixmap = load_pixmap(url, image_root)
    if pixmap.isNull():
        label.setPixmap(QPixmap())
        label.setText(alt)
    else:
        label.setPixmap(pixmap.scaled(size, size, Qt.KeepAspectRatio, Qt.SmoothTransformation))


class CardWidget(QFrame):
    """One image card. Clicks go to the card element; its inline opacity is mirrored."""

    def __init__(self, card: Element, image_root: Optional[str], reveal_ms: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.card = card
        self._reveal_ms = reveal_ms
        self.setObjectName("imageCard")
        self.setFrameShape(QFrame.StyledPanel)
        self.setCursor(Qt.PointingHandCursor)

        layout = QVBoxLayout(self)
        self.lbl_image = QLabel()
        self.lbl_image.setAlignment(Qt.AlignCenter)
        self.lbl_image.setFixedSize(THUMBNAIL_SIZE, THUMBNAIL_SIZE)
        set_picture(self.lbl_image, card.attrs.get("src", ""), card.attrs.get("alt", ""), image_root, THUMBNAIL_SIZE)
        layout.addWidget(self.lbl_image)

        self.lbl_title = QLabel(card.text)
        self.lbl_title.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.lbl_title)

        self.lbl_category = QLabel(card.attrs.get("category", ""))
        self.lbl_category.setStyleSheet("color: gray;")
        layout.addWidget(self.lbl_category)

        self._effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self._effect)
        self._animation = QPropertyAnimation(self._effect, b"opacity", self)
        self._animation.setEasingCurve(QEasingCurve.InOutQuad)

        card.changed.connect(self.sync)
        self.sync()

    def sync(self) -> None:
        target = float(self.card.style.get("opacity", "1"))
        if "transition" in self.card.style and target > self._effect.opacity():
            self._animation.stop()
            self._animation.setDuration(self._reveal_ms)
            self._animation.setEndValue(target)
            self._animation.start()
        else:
            self._animation.stop()
            self._effect.setOpacity(target)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.LeftButton:
            self.card.click()
            event.accept()
            return
        super().mousePressEvent(event)


class PlaceholderWidget(QFrame):
    """Shown instead of cards when nothing matches."""

    def __init__(self, placeholder: Element, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        title = QLabel(placeholder.text)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 16px; font-weight: bold;")
        hint = QLabel(placeholder.attrs.get("hint", ""))
        hint.setAlignment(Qt.AlignCenter)
        hint.setStyleSheet("color: gray;")
        layout.addWidget(title)
        layout.addWidget(hint)
