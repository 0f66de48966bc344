"""
Catalog Input
Reads the JSON image catalog shipped with the application (or given on the
command line) into Image objects.
"""
import json
import logging
import os

from imagegallery.model.image import Image, CatalogLoadError

logger = logging.getLogger(__name__)


def load_images(filepath: str) -> list[Image]:
    """
    Load images from a JSON document of the form {"images": [{...}, ...]}.

    Raises:
        CatalogLoadError: The file is missing, not JSON, or holds malformed records.
    """
    logger.info(f"Loading image catalog from: {filepath}")
    if not os.path.exists(filepath):
        raise CatalogLoadError(f"Catalog file not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Catalog file '{filepath}' is not valid JSON: {e}") from e

    records = document.get("images") if isinstance(document, dict) else None
    if not isinstance(records, list):
        raise CatalogLoadError(f"Catalog file '{filepath}' has no 'images' list")

    images = [Image.from_dict(record) for record in records]
    logger.info(f"Loaded {len(images)} images.")
    return images
