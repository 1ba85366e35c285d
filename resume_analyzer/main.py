import logging

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .api import api_router
from .core import Settings, settings, setup_logging
from .core.exceptions import analysis_error_handler, request_validation_error_handler
from .services.exceptions import AnalysisError

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Configure and return the FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"{app_settings.PROJECT_NAME} starting: provider={app_settings.LLM_PROVIDER}, "
            f"model={app_settings.LL_MODEL}"
        )
        if not app_settings.LLM_API_KEY and app_settings.LLM_PROVIDER.lower() != "ollama":
            logger.warning("LLM_API_KEY is not set; suggestion requests will fail")
        yield

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOW_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AnalysisError, analysis_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.include_router(api_router)

    return app


def run() -> None:
    import uvicorn

    uvicorn.run(
        "resume_analyzer.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
    )


if __name__ == "__main__":
    run()
