# id_photo_bot/services/clients/google_ai_client.py
from __future__ import annotations
from typing import Any

import structlog

# Google Gen AI SDK (Gemini Developer API backend)
from google import genai
from google.genai import types
from google.genai.types import Modality

from id_photo_bot.data.settings import GeminiConfig
from id_photo_bot.dto.id_photo import GenerationRequest

logger = structlog.get_logger(__name__)


def serialize_response(resp: Any) -> dict:
    """Safe, small logging payload; redacts inline image bytes."""
    if not resp:
        return {}
    try:
        candidates = []
        for c in getattr(resp, "candidates", None) or []:
            content = getattr(c, "content", None)
            out_parts = []
            for p in getattr(content, "parts", None) or []:
                inline = getattr(p, "inline_data", None)
                if inline is not None:
                    data = getattr(inline, "data", None) or b""
                    out_parts.append({
                        "inline_data": {
                            "mime_type": getattr(inline, "mime_type", None) or "image/png",
                            "data": f"<redacted {len(data)} bytes>",
                        }
                    })
                elif getattr(p, "text", None):
                    out_parts.append({"text": p.text[:500]})
                else:
                    out_parts.append({"other": type(p).__name__})
            finish_reason = getattr(c, "finish_reason", None)
            candidates.append({
                "finish_reason": getattr(finish_reason, "value", finish_reason),
                "parts": out_parts,
            })
        return {"candidates": candidates}
    except Exception as e:
        logger.warning("serialize_response_fallback", error=str(e))
        return {"content": str(resp)[:500]}


class GoogleGeminiClient:
    """
    Gemini client for ID photo editing.

    Notes:
      - Uses model 'gemini-2.5-flash-image' unless configured otherwise.
      - Async call through client.aio.models.generate_content.
      - One call per request: no retries, no timeout handling.
    """
    DEFAULT_MODEL = "gemini-2.5-flash-image"

    def __init__(self, api_key: str, model: str | None = None) -> None:
        self.model = model or self.DEFAULT_MODEL
        self._client = genai.Client(api_key=api_key)
        logger.info("GenAI client initialized (Gemini API backend).", model=self.model)

    @staticmethod
    def build_contents(request: GenerationRequest) -> list[Any]:
        """Image part first, instruction text second."""
        return [
            types.Part.from_bytes(
                data=request.image.data,
                mime_type=request.image.media_type.value,
            ),
            request.instruction,
        ]

    @staticmethod
    def build_config() -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_modalities=[Modality.IMAGE, Modality.TEXT],
        )

    async def generate_content(self, request: GenerationRequest) -> types.GenerateContentResponse:
        """Sends one edit request and returns the raw SDK response."""
        log = logger.bind(model=self.model, media_type=request.image.media_type.value)
        log.info("Calling Gemini for ID photo generation.", instruction_length=len(request.instruction))

        response = await self._client.aio.models.generate_content(
            model=self.model,
            contents=self.build_contents(request),
            config=self.build_config(),
        )

        log.debug("Gemini response received.", payload=serialize_response(response))
        return response


def create_gemini_client(config: GeminiConfig) -> GoogleGeminiClient | None:
    """
    Builds the process-wide client once at startup.

    Returns None when no API key is configured; callers treat that as a
    configuration error instead of checking the key again.
    """
    if config.api_key is None or not config.api_key.get_secret_value():
        logger.warning("Gemini API key is not configured. Set GEMINI__API_KEY.")
        return None
    try:
        return GoogleGeminiClient(
            api_key=config.api_key.get_secret_value(),
            model=config.model,
        )
    except Exception:
        logger.exception("Failed to initialize Google Gen AI client.")
        raise
