"""Services package for external integrations."""

from src.services.image_captioner import CaptioningError, ImageCaptioner, get_image_captioner
from src.services.ingredient_extractor import (
    IngredientExtractionService,
    get_extraction_service,
)

__all__ = [
    "CaptioningError",
    "ImageCaptioner",
    "get_image_captioner",
    "IngredientExtractionService",
    "get_extraction_service",
]
