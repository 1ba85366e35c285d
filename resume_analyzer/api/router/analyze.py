import logging

from typing import Optional
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from ...core import Settings
from ...schemas.pydantic import AnalyzeResponse, ErrorResponse, HealthResponse
from ...services import (
    AnalysisError,
    JobDescriptionValidationError,
    ResumeValidationError,
    SuggestionService,
    analyze_texts,
    extract_text,
)

logger = logging.getLogger(__name__)

analyze_router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_suggestion_service(app_settings: Settings = Depends(get_settings)) -> SuggestionService:
    return SuggestionService(
        config=app_settings.llm_config,
        text_limit=app_settings.PROMPT_TEXT_LIMIT,
    )


@analyze_router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Score a resume against a job description and suggest bullet rewrites",
)
async def analyze_resume(
    resume: Optional[UploadFile] = File(None),
    job_description: Optional[str] = Form(None, alias="jobDescription"),
    app_settings: Settings = Depends(get_settings),
    suggestion_service: SuggestionService = Depends(get_suggestion_service),
) -> AnalyzeResponse:
    """
    Extract text from the uploaded resume, score keyword overlap with the
    job description and ask the model for improved bullet points.
    """
    logger.info("Received /api/analyze request")

    if resume is None:
        logger.info("Rejected request: no resume file uploaded")
        raise ResumeValidationError()
    if not job_description:
        logger.info("Rejected request: no job description provided")
        raise JobDescriptionValidationError()

    try:
        data = await resume.read()

        logger.info(f"Step 1: Extracting text from {resume.filename!r} ({resume.content_type})...")
        resume_text = await extract_text(data, resume.content_type)
        logger.info("Text extracted successfully.")

        logger.info("Step 2: Analyzing keywords...")
        analysis = analyze_texts(
            resume_text,
            job_description,
            missing_limit=app_settings.MISSING_KEYWORDS_LIMIT,
        )
        logger.info(f"Analysis complete. Score: {analysis.score}%")

        logger.info(f"Step 3: Requesting suggestions from '{suggestion_service.config.provider}'...")
        suggestions = await suggestion_service.suggest(
            resume_text,
            job_description,
            analysis.missing_keywords,
        )
        logger.info("Suggestion request successful.")
    except AnalysisError:
        logger.exception("An error occurred in /api/analyze")
        raise
    except Exception as e:
        logger.exception("An unexpected error occurred in /api/analyze")
        raise AnalysisError(str(e)) from e

    return AnalyzeResponse(
        score=analysis.score,
        missing_keywords=analysis.missing_keywords,
        suggestions=suggestions,
    )


@analyze_router.get("/health", response_model=HealthResponse)
async def health(app_settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        provider=app_settings.LLM_PROVIDER,
        model=app_settings.LL_MODEL,
    )
