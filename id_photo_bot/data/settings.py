# id_photo_bot/data/settings.py
from pydantic import BaseModel, Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BotConfig(BaseModel):
    token: SecretStr
    support_email: str = "support@example.com"

    @computed_field
    @property
    def id(self) -> int:
        return int(self.token.get_secret_value().split(":")[0])


class GeminiConfig(BaseModel):
    """Credentials and model for the image editing provider."""
    api_key: SecretStr | None = None
    model: str = "gemini-2.5-flash-image"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Optional so the generation core can be imported without a bot token.
    bot: BotConfig | None = None
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)

    logging_level: int = 20
    status_rotation_seconds: float = 2.5


settings = Settings()
