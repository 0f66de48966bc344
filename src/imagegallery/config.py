"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers (animation timings,
   page sizes, placeholder copy) scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the bundled catalog) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_CATALOG_PATH (str): Absolute path to the bundled image catalog.
    GalleryTimings: All delays and durations (milliseconds) used by the widget.
"""
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: config.py is in src/imagegallery/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_CATALOG_PATH: str = os.path.join(ASSETS_PATH, "catalog_default.json")

ALL_CATEGORIES: str = "all"
DEFAULT_IMAGES_PER_PAGE: int = 8

LOG_LEVEL_ENV: str = "IMAGEGALLERY_LOG_LEVEL"
LOG_FILE_ENV: str = "IMAGEGALLERY_LOG_FILE"

PAGE_INFO_TEMPLATE: str = "Page {current} of {total}"
NO_RESULTS_TITLE: str = "No images found"
NO_RESULTS_HINT: str = "Try adjusting the filters or search terms"


@dataclass(frozen=True)
class GalleryTimings:
    """Delays and durations in milliseconds."""
    update_delay_ms: int = 300
    fade_out_ms: int = 150
    fade_in_ms: int = 300
    stagger_step_ms: int = 100
    reveal_settle_ms: int = 50
    reveal_duration_ms: int = 600
    modal_focus_delay_ms: int = 100
    modal_close_ms: int = 300


DEFAULT_TIMINGS = GalleryTimings()

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
