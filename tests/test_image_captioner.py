"""Tests for the Hugging Face captioning client and extraction service."""

import base64
from unittest.mock import MagicMock

import pytest
import requests

from src.config import Config
from src.services.image_captioner import CaptioningError, ImageCaptioner
from src.services.ingredient_extractor import IngredientExtractionService

IMAGE_BYTES = b"\x89PNG fake image"


def make_response(status_code: int, body=None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    if body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def captioner(session):
    return ImageCaptioner(
        api_url="https://example.test/models/git-base",
        api_key="test-key",
        timeout=5,
        session=session,
    )


class TestImageCaptioner:
    """Request building and error mapping."""

    def test_returns_caption(self, captioner, session):
        session.post.return_value = make_response(
            200, [{"generated_text": "a bowl of rice and beans"}]
        )

        assert captioner.caption(IMAGE_BYTES) == ["a bowl of rice and beans"]

        session.post.assert_called_once_with(
            "https://example.test/models/git-base",
            json={"inputs": base64.b64encode(IMAGE_BYTES).decode("ascii")},
            headers={
                "Authorization": "Bearer test-key",
                "Content-Type": "application/json",
            },
            timeout=5,
        )

    def test_explicit_zero_timeout_is_kept(self, session):
        session.post.return_value = make_response(200, [{"generated_text": "rice"}])
        captioner = ImageCaptioner(
            api_url="https://example.test/models/git-base",
            api_key="test-key",
            timeout=0,
            session=session,
        )

        captioner.caption(IMAGE_BYTES)

        assert session.post.call_args.kwargs["timeout"] == 0

    def test_default_timeout_from_config(self, session, monkeypatch):
        monkeypatch.setattr(Config, "CAPTION_TIMEOUT", 12.5)
        session.post.return_value = make_response(200, [{"generated_text": "rice"}])

        ImageCaptioner(api_key="test-key", session=session).caption(IMAGE_BYTES)

        assert session.post.call_args.kwargs["timeout"] == 12.5

    def test_returns_every_caption(self, captioner, session):
        session.post.return_value = make_response(
            200, [{"generated_text": "rice"}, {"score": 0.1}, {"generated_text": "beans"}]
        )
        assert captioner.caption(IMAGE_BYTES) == ["rice", "beans"]

    def test_empty_image(self, captioner, session):
        with pytest.raises(CaptioningError) as exc_info:
            captioner.caption(b"")
        assert exc_info.value.code == "EMPTY_IMAGE"
        session.post.assert_not_called()

    def test_invalid_api_key(self, captioner, session):
        session.post.return_value = make_response(401, {"error": "Authorization header is invalid"})
        with pytest.raises(CaptioningError) as exc_info:
            captioner.caption(IMAGE_BYTES)
        assert exc_info.value.code == "INVALID_API_KEY"
        assert exc_info.value.status_code == 401

    def test_api_error_carries_provider_message(self, captioner, session):
        session.post.return_value = make_response(503, {"error": "Model is loading"})
        with pytest.raises(CaptioningError) as exc_info:
            captioner.caption(IMAGE_BYTES)
        assert exc_info.value.code == "API_ERROR"
        assert exc_info.value.status_code == 503
        assert "Model is loading" in str(exc_info.value)

    def test_api_error_without_body(self, captioner, session):
        session.post.return_value = make_response(500)
        with pytest.raises(CaptioningError) as exc_info:
            captioner.caption(IMAGE_BYTES)
        assert "Unknown error occurred" in str(exc_info.value)

    def test_timeout(self, captioner, session):
        session.post.side_effect = requests.exceptions.Timeout()
        with pytest.raises(CaptioningError) as exc_info:
            captioner.caption(IMAGE_BYTES)
        assert exc_info.value.code == "TIMEOUT"

    def test_network_error(self, captioner, session):
        session.post.side_effect = requests.exceptions.ConnectionError()
        with pytest.raises(CaptioningError) as exc_info:
            captioner.caption(IMAGE_BYTES)
        assert exc_info.value.code == "NETWORK_ERROR"

    @pytest.mark.parametrize("body", [[], {}, [{"label": "food"}], [{"generated_text": ""}]])
    def test_invalid_response(self, captioner, session, body) -> None:
        session.post.return_value = make_response(200, body)
        with pytest.raises(CaptioningError) as exc_info:
            captioner.caption(IMAGE_BYTES)
        assert exc_info.value.code == "INVALID_RESPONSE"


class TestIngredientExtractionService:
    """Caption → ingredient orchestration."""

    def test_extract_from_image(self):
        fake_captioner = MagicMock()
        fake_captioner.caption.return_value = ["a bowl of rice,beans and 2 cups corn"]
        service = IngredientExtractionService(captioner=fake_captioner)

        result = service.extract_from_image(IMAGE_BYTES)

        assert result == {
            "caption": "a bowl of rice,beans and 2 cups corn",
            "ingredients": ["beans", "corn", "rice"],
        }
        fake_captioner.caption.assert_called_once_with(IMAGE_BYTES)

    def test_empty_result_is_not_an_error(self):
        fake_captioner = MagicMock()
        fake_captioner.caption.return_value = ["a photo of a wooden table"]
        service = IngredientExtractionService(captioner=fake_captioner)

        assert service.extract_from_image(IMAGE_BYTES)["ingredients"] == []

    def test_extract_from_text(self):
        service = IngredientExtractionService(captioner=MagicMock())
        assert service.extract_from_text("CHICKEN Breast!!") == {
            "ingredients": ["breast", "chicken"]
        }
