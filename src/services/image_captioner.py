"""Hugging Face Inference API client for image captioning.

Sends a base64-encoded image to a captioning model (microsoft/git-base by
default) and returns the generated caption text. The captions are the input
of the ingredient extraction pipeline.

This client never retries; a failed call surfaces as CaptioningError and the
caller decides whether to try again.
"""

import base64
import logging

import requests

from src.config import config

logger = logging.getLogger(__name__)


class CaptioningError(Exception):
    """Raised when the captioning provider cannot produce a caption.

    Attributes:
        code: Machine-readable error code (e.g. "TIMEOUT", "INVALID_API_KEY").
        status_code: HTTP status returned by the provider, if any.
    """

    def __init__(self, message: str, code: str, status_code: int | None = None):
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class ImageCaptioner:
    """Client for a Hugging Face image-to-text model."""

    def __init__(
        self,
        api_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the captioner.

        Args:
            api_url: Inference endpoint URL (default from config).
            api_key: Hugging Face API token (default from config).
            timeout: Request timeout in seconds (default from config).
            session: Optional requests session to reuse connections.
        """
        self._api_url = api_url or config.CAPTION_API_URL
        self._api_key = api_key if api_key is not None else config.HF_API_KEY
        self._timeout = timeout if timeout is not None else config.CAPTION_TIMEOUT
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def caption(self, image_bytes: bytes) -> list[str]:
        """Generate captions for an image.

        Args:
            image_bytes: Raw image file content.

        Returns:
            Non-empty list of generated caption strings.

        Raises:
            CaptioningError: If the image is empty, the request fails, or the
                response carries no generated text.
        """
        if not image_bytes:
            raise CaptioningError("Image payload is empty", code="EMPTY_IMAGE")

        payload = {"inputs": base64.b64encode(image_bytes).decode("ascii")}
        logger.info(
            "Requesting caption from %s (%d bytes)", self._api_url, len(image_bytes)
        )

        try:
            response = self._session.post(
                self._api_url,
                json=payload,
                headers=self._headers(),
                timeout=self._timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.warning("Captioning request timed out after %.1fs", self._timeout)
            raise CaptioningError(
                "Request timed out. Please try again.", code="TIMEOUT"
            ) from e
        except requests.exceptions.RequestException as e:
            logger.warning("Captioning request failed: %s", e)
            raise CaptioningError(
                "Network error. Please check your internet connection.",
                code="NETWORK_ERROR",
            ) from e

        if response.status_code == 401:
            raise CaptioningError(
                "Invalid API key. Please check your Hugging Face API key.",
                code="INVALID_API_KEY",
                status_code=401,
            )
        if not response.ok:
            detail = self._error_detail(response)
            logger.error("Captioning API error %d: %s", response.status_code, detail)
            raise CaptioningError(
                f"API Error: {detail}",
                code="API_ERROR",
                status_code=response.status_code,
            )

        captions = self._parse_captions(response)
        logger.info("Caption received: %s", captions[0][:100])
        return captions

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return "Unknown error occurred"
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return "Unknown error occurred"

    @staticmethod
    def _parse_captions(response: requests.Response) -> list[str]:
        """Pull every generated_text out of the provider response.

        The first element must carry a caption; later elements without one
        are skipped.
        """
        try:
            body = response.json()
        except ValueError as e:
            raise CaptioningError(
                "Invalid response from API", code="INVALID_RESPONSE"
            ) from e

        if (
            not isinstance(body, list)
            or not body
            or not isinstance(body[0], dict)
            or not isinstance(body[0].get("generated_text"), str)
            or not body[0]["generated_text"]
        ):
            raise CaptioningError("Invalid response from API", code="INVALID_RESPONSE")

        return [
            item["generated_text"]
            for item in body
            if isinstance(item, dict) and isinstance(item.get("generated_text"), str)
        ]


# Singleton instance for reuse
_image_captioner: ImageCaptioner | None = None


def get_image_captioner() -> ImageCaptioner:
    """Get or create a singleton ImageCaptioner instance.

    Returns:
        ImageCaptioner instance.
    """
    global _image_captioner
    if _image_captioner is None:
        _image_captioner = ImageCaptioner()
    return _image_captioner
