"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Loads the image catalog (Model).
2. Builds the element surface, the GalleryView and the Qt window (View).
3. Wires the GalleryController to both with a QTimer-backed scheduler.
4. Prevents circular import errors by being the orchestrator.
"""
import logging
import os
import sys

from PySide6.QtWidgets import QMessageBox

from imagegallery.application import create_app
from imagegallery.config import ALL_CATEGORIES, DEFAULT_CATALOG_PATH, DEFAULT_TIMINGS
from imagegallery.controller.gallery_controller import GalleryController
from imagegallery.controller.scheduling import QtScheduler
from imagegallery.logging_config import setup_logging_from_env
from imagegallery.model.catalog import ImageCatalog
from imagegallery.model.image import CatalogLoadError
from imagegallery.view.gallery_view import GalleryView
from imagegallery.view.surface import GallerySurface
from imagegallery.view.widgets.gallery_window import GalleryWindow

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Setup Logging
    setup_logging_from_env()

    # 2. Create the Qt Application
    app = create_app()

    # 3. Load the Catalog
    catalog_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CATALOG_PATH
    try:
        catalog = ImageCatalog.from_file(catalog_path)
    except CatalogLoadError as e:
        logger.error(f"Could not load catalog: {e}")
        QMessageBox.critical(None, "Catalog Error", str(e))
        sys.exit(1)

    # 4. Build the View and its Qt surface
    scheduler = QtScheduler()
    surface = GallerySurface.build([ALL_CATEGORIES, *catalog.categories()])
    view = GalleryView(surface, scheduler, DEFAULT_TIMINGS)
    window = GalleryWindow(surface, image_root=os.path.dirname(os.path.abspath(catalog_path)))

    # 5. Wire the Controller (performs the first render)
    controller = GalleryController(catalog, view, scheduler, DEFAULT_TIMINGS)
    window.controller = controller
    window.show()

    # 6. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
