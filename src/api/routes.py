"""FastAPI routes for ingredient extraction.

Provides endpoints for:
- Extracting ingredients from caption text
- Uploading a food image and extracting ingredients from its caption
- Listing the ingredient vocabulary and dietary preferences

Design:
- Hugging Face git-base: Captions the uploaded image
- Ingredient filter: Turns caption text into a whitelisted ingredient list
"""

import logging
from typing import Annotated

from fastapi import APIRouter, File, HTTPException, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from src.config import config
from src.data.dietary_preferences import DIETARY_PREFERENCES
from src.data.ingredient_vocabulary import INGREDIENT_VOCABULARY
from src.services.image_captioner import CaptioningError
from src.services.ingredient_extractor import get_extraction_service

logger = logging.getLogger(__name__)

# Create API router
router = APIRouter(prefix="/api/v1", tags=["ingredients"])


# Pydantic models for request/response
class ExtractRequest(BaseModel):
    """Request body for text extraction."""

    text: str | list[str] = Field(
        description="Caption text, or a list of captions joined with spaces"
    )


class ExtractResponse(BaseModel):
    """Response from text extraction endpoint."""

    ingredients: list[str]
    count: int


class ImageExtractResponse(BaseModel):
    """Response from image extraction endpoint."""

    caption: str
    ingredients: list[str]
    count: int


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    caption: str | None = Field(
        default=None,
        description="Caption that was analyzed (only for NO_INGREDIENTS)",
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str


class VocabularyResponse(BaseModel):
    """Response from vocabulary endpoint."""

    ingredients: list[str]
    count: int


class DietaryPreference(BaseModel):
    """A selectable dietary preference."""

    id: str
    label: str
    value: str


class DietaryPreferencesResponse(BaseModel):
    """Response from dietary preferences endpoint."""

    preferences: list[DietaryPreference]
    count: int


# Upstream captioning failures mapped to the status we return
_CAPTION_ERROR_STATUS = {
    "EMPTY_IMAGE": status.HTTP_400_BAD_REQUEST,
    "TIMEOUT": status.HTTP_504_GATEWAY_TIMEOUT,
}


def allowed_file(filename: str) -> bool:
    """Check if file extension is allowed.

    Args:
        filename: The filename to check.

    Returns:
        True if extension is allowed.
    """
    if "." not in filename:
        return False
    ext = filename.rsplit(".", 1)[1].lower()
    return ext in config.ALLOWED_EXTENSIONS


def _file_too_large() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_413_CONTENT_TOO_LARGE,
        detail={
            "error": f"File exceeds {config.MAX_CONTENT_LENGTH} bytes",
            "code": "FILE_TOO_LARGE",
        },
    )


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint.

    Returns:
        Health status response.
    """
    return HealthResponse(status="healthy", service="pantry-lens")


@router.post("/ingredients/extract", response_model=ExtractResponse)
async def extract_ingredients(request: ExtractRequest) -> ExtractResponse:
    """Extract ingredients from caption text.

    An empty list is a normal response when no ingredient is recognized.
    """
    result = get_extraction_service().extract_from_text(request.text)
    ingredients = result["ingredients"]
    return ExtractResponse(ingredients=ingredients, count=len(ingredients))


@router.post(
    "/images/extract-ingredients",
    response_model=ImageExtractResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def extract_ingredients_from_image(
    image: Annotated[UploadFile, File(description="Food image to analyze")],
) -> ImageExtractResponse:
    """Caption an uploaded image and extract its ingredients.

    Processing Flow:
    1. Validate the upload (extension, size)
    2. Caption the image via the Hugging Face Inference API
    3. Filter the caption down to known ingredients

    Args:
        image: The uploaded image file.

    Returns:
        Caption text and the extracted ingredients.
    """
    if not image.filename or not allowed_file(image.filename):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": f"Invalid file type. Allowed: {', '.join(sorted(config.ALLOWED_EXTENSIONS))}",
                "code": "INVALID_FILE",
            },
        )

    # Multipart parsing records the size, so oversize uploads are refused unread.
    if image.size is not None and image.size > config.MAX_CONTENT_LENGTH:
        raise _file_too_large()

    content = await image.read()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Uploaded file is empty", "code": "INVALID_FILE"},
        )
    if len(content) > config.MAX_CONTENT_LENGTH:
        raise _file_too_large()

    service = get_extraction_service()
    try:
        result = await run_in_threadpool(service.extract_from_image, content)
    except CaptioningError as e:
        logger.error(
            "Captioning failed for %s: %s (code=%s, upstream_status=%s)",
            image.filename,
            e,
            e.code,
            e.status_code,
        )
        raise HTTPException(
            status_code=_CAPTION_ERROR_STATUS.get(e.code, status.HTTP_502_BAD_GATEWAY),
            detail={"error": str(e), "code": e.code},
        )

    if not result["ingredients"]:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail={
                "error": "No ingredients found in the image",
                "code": "NO_INGREDIENTS",
                "caption": result["caption"],
            },
        )

    return ImageExtractResponse(
        caption=result["caption"],
        ingredients=result["ingredients"],
        count=len(result["ingredients"]),
    )


@router.get("/ingredients/vocabulary", response_model=VocabularyResponse)
async def get_vocabulary() -> VocabularyResponse:
    """List every ingredient word the extractor recognizes."""
    return VocabularyResponse(
        ingredients=list(INGREDIENT_VOCABULARY),
        count=len(INGREDIENT_VOCABULARY),
    )


@router.get("/dietary-preferences", response_model=DietaryPreferencesResponse)
async def get_dietary_preferences() -> DietaryPreferencesResponse:
    """List the selectable dietary preferences."""
    preferences = [DietaryPreference(**item) for item in DIETARY_PREFERENCES]
    return DietaryPreferencesResponse(preferences=preferences, count=len(preferences))
