import pytest

from resume_analyzer.services.exceptions import (
    AnalysisError,
    ErrorKind,
    JobDescriptionValidationError,
    ResumeParsingError,
    ResumeValidationError,
    SuggestionError,
    UnsupportedFileTypeError,
)


@pytest.mark.parametrize(
    "kind, status_code",
    [
        (ErrorKind.VALIDATION, 400),
        (ErrorKind.UNSUPPORTED_FORMAT, 500),
        (ErrorKind.EXTERNAL_SERVICE, 500),
    ],
)
def test_error_kind_status_codes(kind, status_code):
    assert kind.status_code == status_code


def test_validation_errors_carry_client_messages():
    assert ResumeValidationError().message == "No resume file uploaded."
    assert JobDescriptionValidationError().message == "No job description provided."
    assert ResumeValidationError().status_code == 400
    assert JobDescriptionValidationError().status_code == 400


def test_unsupported_file_type_without_media_type():
    error = UnsupportedFileTypeError()
    assert str(error) == "Unsupported file type"
    assert error.content_type is None


@pytest.mark.parametrize(
    "error",
    [
        ResumeValidationError(),
        UnsupportedFileTypeError("text/plain"),
        ResumeParsingError("bad pdf"),
        SuggestionError(original_error="boom"),
    ],
)
def test_every_domain_error_is_an_analysis_error(error):
    assert isinstance(error, AnalysisError)
