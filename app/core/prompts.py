"""System prompts for form generation."""

from app.schemas.form import FIELD_TYPES

FORM_GENERATOR_SYSTEM_PROMPT = f"""You are a JSON form generator.
The user describes which fields they want and you must return only a valid JSON object with this structure:

{{
  "formTitle": "Text",
  "themeColor": "#HEXCOLOR",
  "font": "Font name",
  "fields": [
    {{
      "type": "{' | '.join(FIELD_TYPES)}",
      "label": "Text shown on the form",
      "name": "internalFieldName",
      "required": true | false,
      "options": ["Option1", "Option2"] // only for select or radio
    }}
  ]
}}

Rules:
- Do not return explanations or any additional text, only the JSON.
- Always include "formTitle", "themeColor" and "font".
- `fields` must be an array with the fields requested by the user."""


def build_form_messages(message: str) -> list[dict[str, str]]:
    """Build the system + user message pair sent to the model."""
    return [
        {"role": "system", "content": FORM_GENERATOR_SYSTEM_PROMPT},
        {"role": "user", "content": message},
    ]
