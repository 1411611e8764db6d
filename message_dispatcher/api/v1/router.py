"""Main router for API v1."""

from fastapi import APIRouter

from message_dispatcher.api.v1.routes.messages import router as messages_router

api_router = APIRouter()

api_router.include_router(messages_router, tags=["messages"])
