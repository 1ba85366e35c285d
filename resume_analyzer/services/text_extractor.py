import io
import logging

from typing import Callable, Dict, Optional
from docx import Document
from fastapi.concurrency import run_in_threadpool
from pypdf import PdfReader

from .exceptions import ResumeParsingError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _extract_pdf(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def _extract_docx(data: bytes) -> str:
    document = Document(io.BytesIO(data))
    lines = [paragraph.text for paragraph in document.paragraphs]
    # Skills and contact blocks are often laid out as tables
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                if cell.text:
                    lines.append(cell.text)
    return "\n".join(lines)


EXTRACTORS: Dict[str, Callable[[bytes], str]] = {
    PDF_MEDIA_TYPE: _extract_pdf,
    DOCX_MEDIA_TYPE: _extract_docx,
}


def _normalize_media_type(content_type: Optional[str]) -> str:
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


async def extract_text(data: bytes, content_type: Optional[str]) -> str:
    """
    Extract plain text from an uploaded PDF or DOCX buffer.

    The parser is chosen from the declared media type only; the bytes are
    never sniffed. Parsing runs in the threadpool.

    Raises:
        UnsupportedFileTypeError: the media type has no extractor
        ResumeParsingError: the parser rejected the bytes
    """
    media_type = _normalize_media_type(content_type)
    extractor = EXTRACTORS.get(media_type)
    if extractor is None:
        raise UnsupportedFileTypeError(content_type)

    try:
        text = await run_in_threadpool(extractor, data)
    except Exception as e:
        logger.error(f"Failed to extract text from {media_type} upload: {e}")
        raise ResumeParsingError(f"Failed to extract text from {media_type} file: {e}") from e

    logger.debug(f"Extracted {len(text)} characters from {media_type} upload")
    return text
