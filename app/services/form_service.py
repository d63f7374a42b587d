from typing import Any, Optional

import httpx
from loguru import logger
from openai import APIStatusError

from app.core.config import ProviderConfig
from app.core.prompts import build_form_messages
from app.llm.utils import build_openai_client
from app.services.results import (
    Absent,
    ConfigError,
    FormResult,
    InternalError,
    ShapeError,
    Success,
    UpstreamError,
    extract_content,
)


def _response_body(response: httpx.Response) -> Any:
    """Parsed JSON body if there is one, raw text otherwise."""
    try:
        return response.json()
    except ValueError:
        return response.text


def _describe_exception(exc: Exception) -> str:
    message = str(exc)
    cause = exc.__cause__
    if cause is not None and str(cause) and str(cause) not in message:
        message = f"{message} ({cause})"
    return message


class FormService:
    """
    Turns a free-text description into a form schema via one chat completion.

    Every call to ``generate`` ends in a ``FormResult``; exceptions raised while
    talking to the provider are folded into ``InternalError``.
    """

    def __init__(
        self, config: ProviderConfig, http_client: Optional[httpx.AsyncClient] = None
    ):
        self.config = config
        self._client = None
        if config.is_complete:
            self._client = build_openai_client(config, http_client)

    async def generate(self, message: str) -> FormResult:
        if self._client is None:
            logger.warning("Form generation requested without provider configuration")
            return ConfigError()

        try:
            logger.info(f"Requesting form schema from model {self.config.model}")

            raw = await self._client.chat.completions.with_raw_response.create(
                model=self.config.model,
                response_format={"type": "json_object"},
                messages=build_form_messages(message),
            )
            data = raw.http_response.json()
            if not isinstance(data, (dict, list)):
                raise TypeError(
                    f"Expected a JSON object from model provider, got {type(data).__name__}"
                )

            content = extract_content(data)

            if isinstance(content, Absent):
                logger.warning("Model provider response has no message content")
                return ShapeError(data)

            return Success(content.value)

        except APIStatusError as e:
            logger.warning(f"Model provider returned status {e.status_code}")
            return UpstreamError(e.status_code, _response_body(e.response))

        except Exception as e:
            logger.exception(f"Error calling model provider: {e}")
            return InternalError(_describe_exception(e))

    async def aclose(self):
        if self._client is not None:
            await self._client.close()
