from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class KeywordAnalysis(BaseModel):
    score: int = Field(ge=0, le=100)
    matching_keywords: List[str]
    missing_keywords: List[str]


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(ge=0, le=100)
    missing_keywords: List[str] = Field(alias="missingKeywords")
    suggestions: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    provider: str
    model: str
