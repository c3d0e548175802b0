"""
Provider gateway: request shape and client construction.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from google.genai import types
from pydantic import SecretStr

from conftest import image_part, make_response, text_part
from id_photo_bot.data.constants import MediaType
from id_photo_bot.data.settings import GeminiConfig
from id_photo_bot.dto.id_photo import GenerationOptions, SourceImage
from id_photo_bot.services.clients.google_ai_client import (
    GoogleGeminiClient,
    create_gemini_client,
    serialize_response,
)
from id_photo_bot.services.prompting.id_photo import build_request

CLIENT_PATH = "id_photo_bot.services.clients.google_ai_client.genai.Client"


@pytest.fixture
def request_(png_bytes):
    return build_request(
        SourceImage(data=png_bytes, media_type=MediaType.PNG),
        GenerationOptions(),
    )


class TestCreateClient:
    def test_none_without_key(self):
        assert create_gemini_client(GeminiConfig()) is None

    def test_none_with_blank_key(self):
        assert create_gemini_client(GeminiConfig(api_key=SecretStr(""))) is None

    def test_uses_configured_model(self):
        with patch(CLIENT_PATH):
            client = create_gemini_client(GeminiConfig(api_key=SecretStr("k"), model="custom-model"))
        assert client.model == "custom-model"

    def test_default_model(self):
        with patch(CLIENT_PATH):
            client = GoogleGeminiClient(api_key="k")
        assert client.model == "gemini-2.5-flash-image"


class TestRequestShape:
    def test_contents_image_then_instruction(self, request_, png_bytes):
        contents = GoogleGeminiClient.build_contents(request_)

        assert len(contents) == 2
        assert contents[0].inline_data.data == png_bytes
        assert contents[0].inline_data.mime_type == "image/png"
        assert contents[1] == request_.instruction

    def test_config_requests_image_and_text(self):
        config = GoogleGeminiClient.build_config()
        assert config.response_modalities == [types.Modality.IMAGE, types.Modality.TEXT]

    @pytest.mark.asyncio
    async def test_single_call_returns_raw_response(self, request_):
        response = make_response(parts=[image_part()])
        with patch(CLIENT_PATH) as client_cls:
            sdk = MagicMock()
            sdk.aio.models.generate_content = AsyncMock(return_value=response)
            client_cls.return_value = sdk

            result = await GoogleGeminiClient(api_key="k").generate_content(request_)

        assert result is response
        sdk.aio.models.generate_content.assert_awaited_once()
        kwargs = sdk.aio.models.generate_content.await_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash-image"
        assert kwargs["contents"][1] == request_.instruction

    @pytest.mark.asyncio
    async def test_exceptions_propagate(self, request_):
        with patch(CLIENT_PATH) as client_cls:
            sdk = MagicMock()
            sdk.aio.models.generate_content = AsyncMock(side_effect=TimeoutError("slow"))
            client_cls.return_value = sdk

            with pytest.raises(TimeoutError):
                await GoogleGeminiClient(api_key="k").generate_content(request_)


class TestSerializeResponse:
    def test_redacts_image_bytes(self):
        payload = serialize_response(make_response(parts=[image_part(b"x" * 10), text_part("hi")]))

        parts = payload["candidates"][0]["parts"]
        assert parts[0]["inline_data"]["data"] == "<redacted 10 bytes>"
        assert parts[1] == {"text": "hi"}
        assert payload["candidates"][0]["finish_reason"] == "STOP"

    def test_empty(self):
        assert serialize_response(None) == {}
