# id_photo_bot/services/clients/__init__.py
from .google_ai_client import GoogleGeminiClient, create_gemini_client

__all__ = [
    "GoogleGeminiClient",
    "create_gemini_client",
]
