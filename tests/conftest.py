import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from imagegallery.controller.scheduling import ManualScheduler
from imagegallery.model.catalog import ImageCatalog
from imagegallery.model.image import Image
from imagegallery.view.gallery_view import GalleryView
from imagegallery.view.surface import GallerySurface

CATEGORIES = ["all", "flowers", "trees", "ferns"]


def make_images(count: int, category: str = "flowers") -> list[Image]:
    return [
        Image(id=i, url=f"img{i}.jpg", title=f"Plant {i}", category=category, keywords=(f"kw{i}",))
        for i in range(1, count + 1)
    ]


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def surface() -> GallerySurface:
    return GallerySurface.build(CATEGORIES)


@pytest.fixture
def stats_log() -> list:
    return []


@pytest.fixture
def view(surface, scheduler, stats_log) -> GalleryView:
    return GalleryView(surface, scheduler, stats_sink=stats_log.append)


@pytest.fixture
def plants() -> list[Image]:
    return [
        Image(id=1, url="rose.jpg", title="Rose", category="flowers", keywords=("red", "thorns")),
        Image(id=2, url="oak.jpg", title="Oak", category="trees", keywords=("acorn", "shade")),
        Image(id=3, url="tulip.jpg", title="Tulip", category="flowers", keywords=("spring",)),
        Image(id=4, url="birch.jpg", title="Birch", category="trees", keywords=("white bark",)),
        Image(id=5, url="lavender.jpg", title="Lavender", category=("flowers", "herbs"), keywords=("purple",)),
        Image(id=6, url="willow.jpg", title="Willow", category="trees", keywords=("water", "shade")),
        Image(id=7, url="a.jpg", title="Fern", category="ferns", keywords=("green", "shade")),
    ]


@pytest.fixture
def catalog(plants) -> ImageCatalog:
    return ImageCatalog(plants, images_per_page=3)
