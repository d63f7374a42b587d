from typing import Optional

import httpx
from openai import AsyncOpenAI

from app.core.config import ProviderConfig


def build_openai_client(
    config: ProviderConfig, http_client: Optional[httpx.AsyncClient] = None
) -> AsyncOpenAI:
    """Create a client whose chat completions hit {base_url}/v1/chat/completions."""
    return AsyncOpenAI(
        api_key=config.api_key,
        base_url=f"{config.base_url.rstrip('/')}/v1",
        timeout=config.timeout,
        max_retries=0,
        http_client=http_client,
    )
