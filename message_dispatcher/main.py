"""FastAPI entrypoint for the message dispatcher."""

from fastapi import FastAPI

from message_dispatcher.api.v1.router import api_router
from message_dispatcher.core.logging import configure_logging
from message_dispatcher.core.settings import settings

configure_logging(settings.log_level)

app = FastAPI(title=settings.app_name, version=settings.app_version)


@app.get("/")
async def health_check() -> dict[str, str]:
    """Simple health endpoint to validate service status."""
    return {"status": "ok", "message": "Message dispatcher is running"}


# Mount API v1 routes under /api/v1.
app.include_router(api_router, prefix="/api/v1")
