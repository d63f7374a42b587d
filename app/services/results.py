"""Result types produced by the form generation service.

Content extracted from a completion is tagged as ``Structured``, ``Text`` or
``Absent``. A whole generation call ends in exactly one ``FormResult`` variant,
each of which knows the HTTP status and JSON payload it maps to.
"""
import json
from dataclasses import dataclass
from typing import Any, ClassVar, Union

MISSING_CONFIG_ERROR = (
    "Missing required environment variables. "
    "Please set OPENAI_API_KEY, OPENAI_MODEL, and OPENAI_BASE_URL."
)
UPSTREAM_ERROR = "Upstream request failed"
SHAPE_ERROR = "Unexpected response format from model provider"
INTERNAL_ERROR = "Exception while calling the model provider"
EXAMPLE_EXPECTED = {"choices": [{"message": {"content": "..."}}]}


@dataclass(frozen=True)
class Structured:
    value: Any


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Absent:
    pass


ExtractedContent = Union[Structured, Text, Absent]


def extract_content(data: Any) -> ExtractedContent:
    """Pull ``choices[0].message.content`` out of a completion body and decode it."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return Absent()

    if content is None:
        return Absent()
    if not isinstance(content, str):
        return Structured(content)

    try:
        decoded = json.loads(content)
    except ValueError:
        return Text(content)

    # a literal "null" answer carries no content
    if decoded is None:
        return Absent()
    return Structured(decoded)


@dataclass(frozen=True)
class Success:
    status_code: ClassVar[int] = 200
    message: Any

    def payload(self) -> dict:
        return {"message": self.message}


@dataclass(frozen=True)
class ConfigError:
    status_code: ClassVar[int] = 500

    def payload(self) -> dict:
        return {"error": MISSING_CONFIG_ERROR}


@dataclass(frozen=True)
class UpstreamError:
    status_code: ClassVar[int] = 502
    upstream_status: int
    body: Any

    def payload(self) -> dict:
        return {
            "error": UPSTREAM_ERROR,
            "status": self.upstream_status,
            "body": self.body,
        }


@dataclass(frozen=True)
class ShapeError:
    status_code: ClassVar[int] = 500
    received: Any

    def payload(self) -> dict:
        return {
            "error": SHAPE_ERROR,
            "example_expected": EXAMPLE_EXPECTED,
            "received": self.received,
        }


@dataclass(frozen=True)
class InternalError:
    status_code: ClassVar[int] = 500
    message: str

    def payload(self) -> dict:
        return {"error": INTERNAL_ERROR, "message": self.message}


FormResult = Union[Success, ConfigError, UpstreamError, ShapeError, InternalError]
