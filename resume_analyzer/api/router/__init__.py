from .analyze import analyze_router

__all__ = ["analyze_router"]
