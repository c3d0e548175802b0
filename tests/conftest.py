"""
Shared fixtures: simulated Gemini responses built from real SDK types.
"""

from io import BytesIO
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types
from PIL import Image

from id_photo_bot.services.clients.google_ai_client import GoogleGeminiClient

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def image_part(data: bytes = PNG_MAGIC + b"generated", mime_type: str = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))


def text_part(text: str) -> types.Part:
    return types.Part(text=text)


def make_response(parts=None, finish_reason=types.FinishReason.STOP, with_candidate=True):
    """Builds a GenerateContentResponse with at most one candidate."""
    if not with_candidate:
        return types.GenerateContentResponse(candidates=[])
    content = types.Content(role="model", parts=parts) if parts is not None else None
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=content, finish_reason=finish_reason)]
    )


def encode_image(fmt: str, size=(8, 8)) -> bytes:
    buf = BytesIO()
    Image.new("RGB", size, color=(160, 216, 239)).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def jpeg_bytes() -> bytes:
    return encode_image("JPEG")


@pytest.fixture
def png_bytes() -> bytes:
    return encode_image("PNG")


@pytest.fixture
def mock_client():
    """A GoogleGeminiClient stand-in whose generate_content is awaitable."""
    client = MagicMock(spec=GoogleGeminiClient)
    client.generate_content = AsyncMock(return_value=make_response(parts=[image_part()]))
    return client
