from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    UNSUPPORTED_FORMAT = "unsupported_format"
    EXTERNAL_SERVICE = "external_service"

    @property
    def status_code(self) -> int:
        if self is ErrorKind.VALIDATION:
            return 400
        return 500


class AnalysisError(Exception):
    """Base class for every error the analysis flow reports to the client."""

    kind: ErrorKind = ErrorKind.EXTERNAL_SERVICE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class ResumeValidationError(AnalysisError):
    """Raised when the request carries no resume file."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str = "No resume file uploaded."):
        super().__init__(message)


class JobDescriptionValidationError(AnalysisError):
    """Raised when the job description field is missing or empty."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str = "No job description provided."):
        super().__init__(message)


class UnsupportedFileTypeError(AnalysisError):
    """Raised when the uploaded file's media type has no extractor."""

    kind = ErrorKind.UNSUPPORTED_FORMAT

    def __init__(self, content_type: Optional[str] = None):
        self.content_type = content_type
        message = "Unsupported file type"
        if content_type:
            message = f"{message}: {content_type}"
        super().__init__(message)


class ResumeParsingError(AnalysisError):
    """Raised when the PDF/DOCX parser fails on the uploaded bytes."""

    kind = ErrorKind.EXTERNAL_SERVICE


class SuggestionError(AnalysisError):
    """
    Raised when the suggestion model call fails for any reason.

    Network errors, quota errors and missing credentials all end up here;
    no distinction is made between transient and permanent failures.
    """

    kind = ErrorKind.EXTERNAL_SERVICE

    def __init__(
        self,
        message: Optional[str] = None,
        provider: Optional[str] = None,
        original_error: Optional[str] = None,
    ):
        self.provider = provider
        self.original_error = original_error
        if message is None:
            if provider:
                message = f"Suggestion request to '{provider}' failed: {original_error}"
            else:
                message = f"Suggestion request failed: {original_error}"
        super().__init__(message)
