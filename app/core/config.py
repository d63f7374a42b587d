import os
from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, ConfigDict

load_dotenv()

DEFAULT_FORM_MESSAGE = (
    "I want a form to keep track of the guests at my restaurant's opening night"
)


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"{name}={value!r} is not a number, using {default}")
        return default


class ProviderConfig(BaseModel):
    """Connection details for the chat-completion provider."""

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    model: str = ""
    base_url: str = ""
    timeout: float = 60.0

    @property
    def is_complete(self) -> bool:
        return bool(self.api_key and self.model and self.base_url)


class Settings:
    # App
    APP_NAME: str = "Form Generator API"
    DEBUG: bool
    ALLOWED_ORIGINS: list[str]

    # Model provider
    OPENAI_API_KEY: str
    OPENAI_MODEL: str
    OPENAI_BASE_URL: str
    OPENAI_TIMEOUT: float

    # Prompt used when the caller sends no message
    DEFAULT_FORM_MESSAGE: str

    def __init__(self):
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"

        # CORS
        self.ALLOWED_ORIGINS = os.getenv(
            "ALLOWED_ORIGINS", "http://localhost:3000"
        ).split(",")

        self.OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
        self.OPENAI_MODEL = os.getenv("OPENAI_MODEL", "")
        self.OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "")
        self.OPENAI_TIMEOUT = _float_env("OPENAI_TIMEOUT", 60.0)

        self.DEFAULT_FORM_MESSAGE = os.getenv(
            "DEFAULT_FORM_MESSAGE", DEFAULT_FORM_MESSAGE
        )

    def provider_config(self) -> ProviderConfig:
        return ProviderConfig(
            api_key=self.OPENAI_API_KEY,
            model=self.OPENAI_MODEL,
            base_url=self.OPENAI_BASE_URL,
            timeout=self.OPENAI_TIMEOUT,
        )


settings = Settings()
