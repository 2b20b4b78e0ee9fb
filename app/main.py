import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from app.api.routes.parse import router as parse_router
from app.core.settings import get_settings

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())

OPENAPI_TAGS = [
    {"name": "parse", "description": "Contact blurb extraction"},
    {"name": "health", "description": "Liveness checks"},
]

app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version=settings.app_version,
    openapi_tags=OPENAPI_TAGS,
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": settings.app_name, "version": settings.app_version, "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """OpenAPI schema built from the same settings as the app metadata."""
    if app.openapi_schema:
        return app.openapi_schema
    app.openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        tags=OPENAPI_TAGS,
    )
    return app.openapi_schema

app.openapi = custom_openapi
