from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.dependencies import get_form_service
from app.core.config import settings
from app.schemas.form import ErrorResponse, FormRequest, FormResponse
from app.services.form_service import FormService

router = APIRouter()

RESPONSES = {
    200: {"model": FormResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


async def _generate(message: Optional[str], service: FormService) -> JSONResponse:
    if message is None:
        message = settings.DEFAULT_FORM_MESSAGE

    result = await service.generate(message)
    return JSONResponse(status_code=result.status_code, content=result.payload())


@router.post("/form", responses=RESPONSES)
async def generate_form(
    form_request: Optional[FormRequest] = None,
    service: FormService = Depends(get_form_service),
):
    """
    Generate a form schema from a free-text description.

    Returns:
    - 200 with the form schema (or the model's raw text) under `message`
    - 500 when provider configuration is missing, the provider response has
      no message content, or the call raised
    - 502 when the provider answered with a non-success status
    """
    message = form_request.message if form_request else None
    return await _generate(message, service)


@router.get("/form", responses=RESPONSES)
async def generate_form_from_query(
    message: Optional[str] = None,
    service: FormService = Depends(get_form_service),
):
    """Same as `POST /form`, reading `message` from the query string."""
    return await _generate(message, service)
