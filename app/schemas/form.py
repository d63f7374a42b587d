from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

FIELD_TYPES = (
    "text",
    "email",
    "date",
    "select",
    "password",
    "checkbox",
    "radio",
    "number",
    "textarea",
)

FieldType = Literal[
    "text",
    "email",
    "date",
    "select",
    "password",
    "checkbox",
    "radio",
    "number",
    "textarea",
]


class FormRequest(BaseModel):
    """Request schema for form generation"""

    message: Optional[str] = None


class FormField(BaseModel):
    type: FieldType
    label: str
    name: str
    required: bool = False
    options: Optional[list[str]] = None  # select and radio only


class FormSchema(BaseModel):
    """Shape the model is asked to produce. Not enforced on upstream output."""

    formTitle: str
    themeColor: str = Field(..., examples=["#1E88E5"])
    font: str
    fields: list[FormField] = []


class FormResponse(BaseModel):
    message: Union[FormSchema, str]


class ErrorResponse(BaseModel):
    error: str
    status: Optional[int] = None
    body: Optional[Any] = None
    example_expected: Optional[dict] = None
    received: Optional[Any] = None
    message: Optional[str] = None
