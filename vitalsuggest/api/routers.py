from fastapi import APIRouter

from .endpoints import health
from .endpoints import suggest

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, prefix="", tags=["health"])
api_router.include_router(suggest.router, prefix="", tags=["suggest"])
