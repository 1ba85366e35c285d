from fastapi import APIRouter

from .router import analyze_router

api_router = APIRouter(prefix="/api")
api_router.include_router(analyze_router)

__all__ = ["api_router"]
