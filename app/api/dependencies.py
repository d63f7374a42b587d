from fastapi import Request

from app.services.form_service import FormService


def get_form_service(request: Request) -> FormService:
    """Return the FormService built at startup."""
    return request.app.state.form_service
