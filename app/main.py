from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from app.core.config import settings
from app.api.routes import form
from app.services.form_service import FormService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    # Startup: build the provider client once from the loaded settings
    config = settings.provider_config()
    if not config.is_complete:
        logger.warning(
            "OPENAI_API_KEY, OPENAI_MODEL or OPENAI_BASE_URL is not set; "
            "form generation requests will fail"
        )
    app.state.form_service = FormService(config)
    yield
    # Shutdown: release the HTTP connection pool
    await app.state.form_service.aclose()


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)

# Include routers
app.include_router(form.router, tags=["form"])


@app.get("/")
def read_root():
    return {"name": settings.APP_NAME, "status": "ok"}
