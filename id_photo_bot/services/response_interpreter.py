# id_photo_bot/services/response_interpreter.py
"""
Turns a raw Gemini response into image bytes or a classified error.

The response is first reduced to a `ResponseShape` by walking a fixed,
ordered list of rules; the first rule that matches wins. Safety blocks are
checked before emptiness, and an image part always beats a text part.
"""
from collections.abc import Callable
from enum import Enum
from typing import Any, NamedTuple

import structlog

from id_photo_bot.data.constants import SAFETY_FINISH_REASONS
from .errors import (
    EmptyResponseError,
    ProviderMessageError,
    SafetyBlockedError,
    UnknownFailureError,
)

logger = structlog.get_logger(__name__)


class ResponseShape(str, Enum):
    SAFETY_BLOCKED = "safety_blocked"
    EMPTY = "empty"
    IMAGE = "image"
    TEXT = "text"
    UNKNOWN = "unknown"


class ClassifiedResponse(NamedTuple):
    shape: ResponseShape
    image_bytes: bytes | None = None
    text: str | None = None


def _first_candidate(response: Any) -> Any | None:
    candidates = getattr(response, "candidates", None) or []
    return candidates[0] if candidates else None


def _finish_reason(candidate: Any) -> str | None:
    reason = getattr(candidate, "finish_reason", None)
    # SDK enums and plain strings both reduce to the bare name
    return getattr(reason, "value", reason)


def _parts(candidate: Any) -> list[Any]:
    content = getattr(candidate, "content", None)
    return list(getattr(content, "parts", None) or [])


def _inline_image(parts: list[Any]) -> bytes | None:
    # An inline part with zero bytes is not a usable image; it falls through
    # to the text and unknown rules.
    for part in parts:
        inline = getattr(part, "inline_data", None)
        if inline is not None and getattr(inline, "data", None):
            return inline.data
    return None


def _text(parts: list[Any]) -> str | None:
    for part in parts:
        text = getattr(part, "text", None)
        if text:
            return text
    return None


def _rule_safety(candidate: Any) -> ClassifiedResponse | None:
    if candidate is None or _finish_reason(candidate) in SAFETY_FINISH_REASONS:
        return ClassifiedResponse(ResponseShape.SAFETY_BLOCKED)
    return None


def _rule_empty(candidate: Any) -> ClassifiedResponse | None:
    if not _parts(candidate):
        return ClassifiedResponse(ResponseShape.EMPTY)
    return None


def _rule_image(candidate: Any) -> ClassifiedResponse | None:
    data = _inline_image(_parts(candidate))
    if data:
        return ClassifiedResponse(ResponseShape.IMAGE, image_bytes=data)
    return None


def _rule_text(candidate: Any) -> ClassifiedResponse | None:
    text = _text(_parts(candidate))
    if text:
        return ClassifiedResponse(ResponseShape.TEXT, text=text)
    return None


# Evaluation order is significant.
RULES: tuple[Callable[[Any], ClassifiedResponse | None], ...] = (
    _rule_safety,
    _rule_empty,
    _rule_image,
    _rule_text,
)


def classify_response(response: Any) -> ClassifiedResponse:
    candidate = _first_candidate(response)
    for rule in RULES:
        classified = rule(candidate)
        if classified is not None:
            return classified
    return ClassifiedResponse(ResponseShape.UNKNOWN)


def interpret_response(response: Any) -> bytes:
    """
    Returns the generated image's encoded bytes.

    Raises:
        SafetyBlockedError: no candidate, or the candidate was stopped for safety.
        EmptyResponseError: the candidate carries no content parts.
        ProviderMessageError: only text came back; the text is kept verbatim.
        UnknownFailureError: parts present but neither image nor text.
    """
    classified = classify_response(response)
    log = logger.bind(shape=classified.shape.value)

    if classified.shape is ResponseShape.IMAGE:
        log.info("Image part found in response.", image_size=len(classified.image_bytes))
        return classified.image_bytes

    log.warning("No image in response.", finish_reason=_finish_reason(_first_candidate(response)))
    if classified.shape is ResponseShape.SAFETY_BLOCKED:
        raise SafetyBlockedError()
    if classified.shape is ResponseShape.EMPTY:
        raise EmptyResponseError()
    if classified.shape is ResponseShape.TEXT:
        raise ProviderMessageError(classified.text)
    raise UnknownFailureError()
