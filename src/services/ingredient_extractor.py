"""Ingredient extraction service.

Connects the captioning client to the filtering pipeline:
1. Caption the image (Hugging Face git-base)
2. Run the captions through src.pipeline.ingredient_filter.extract

An empty ingredient list is a valid result here; deciding whether that is a
user-facing error is left to the caller.
"""

import logging
from collections.abc import Sequence
from typing import Any

from src.pipeline.ingredient_filter import extract
from src.services.image_captioner import ImageCaptioner, get_image_captioner

logger = logging.getLogger(__name__)


class IngredientExtractionService:
    """Service for extracting ingredient lists from images and captions."""

    def __init__(self, captioner: ImageCaptioner | None = None):
        """Initialize the service.

        Args:
            captioner: Captioning client (created lazily if omitted).
        """
        self._captioner = captioner

    @property
    def captioner(self) -> ImageCaptioner:
        """Get or create the captioning client."""
        if self._captioner is None:
            self._captioner = get_image_captioner()
        return self._captioner

    def extract_from_text(self, text: str | Sequence[str]) -> dict[str, Any]:
        """Extract ingredients from caption text.

        Args:
            text: A caption or list of captions.

        Returns:
            Dictionary with:
                - ingredients: Sorted unique ingredient names
        """
        return {"ingredients": extract(text)}

    def extract_from_image(self, image_bytes: bytes) -> dict[str, Any]:
        """Caption an image and extract ingredients from the caption.

        Args:
            image_bytes: Raw image file content.

        Returns:
            Dictionary with:
                - caption: The caption text that was analyzed
                - ingredients: Sorted unique ingredient names

        Raises:
            CaptioningError: If the captioning provider call fails.
        """
        captions = self.captioner.caption(image_bytes)
        ingredients = extract(captions)
        logger.info(
            "Found %d ingredient(s) in caption: %s", len(ingredients), ", ".join(ingredients)
        )
        return {
            "caption": " ".join(captions),
            "ingredients": ingredients,
        }


# Singleton instance for reuse
_extraction_service: IngredientExtractionService | None = None


def get_extraction_service() -> IngredientExtractionService:
    """Get or create a singleton IngredientExtractionService instance.

    Returns:
        IngredientExtractionService instance.
    """
    global _extraction_service
    if _extraction_service is None:
        _extraction_service = IngredientExtractionService()
    return _extraction_service
