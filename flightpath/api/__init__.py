"""API routers for the Flightpath tracker."""

from fastapi import APIRouter

from .flights import router as flights_router
from .status import router as status_router

api_router = APIRouter()
api_router.include_router(status_router)
api_router.include_router(flights_router)

__all__ = ["api_router"]
