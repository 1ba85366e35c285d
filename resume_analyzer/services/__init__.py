from .keyword_analyzer import analyze_texts, tokenize
from .suggestion_service import SuggestionService
from .text_extractor import extract_text
from .exceptions import (
    AnalysisError,
    ErrorKind,
    ResumeValidationError,
    JobDescriptionValidationError,
    UnsupportedFileTypeError,
    ResumeParsingError,
    SuggestionError,
)

__all__ = [
    "analyze_texts",
    "tokenize",
    "extract_text",
    "SuggestionService",
    "AnalysisError",
    "ErrorKind",
    "ResumeValidationError",
    "JobDescriptionValidationError",
    "UnsupportedFileTypeError",
    "ResumeParsingError",
    "SuggestionError",
]
