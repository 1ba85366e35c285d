import math
import re

from typing import List

from ..schemas.pydantic import KeywordAnalysis

DEFAULT_MISSING_KEYWORDS_LIMIT = 20

_NON_WORD = re.compile(r"[^\w\s]")


def tokenize(text: str) -> List[str]:
    """Lowercase, drop punctuation, split on whitespace runs."""
    return _NON_WORD.sub("", text.lower()).split()


def _unique(tokens: List[str]) -> List[str]:
    # dict keeps insertion order, so this is a first-seen dedup
    return list(dict.fromkeys(tokens))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def analyze_texts(
    resume_text: str,
    job_text: str,
    missing_limit: int = DEFAULT_MISSING_KEYWORDS_LIMIT,
) -> KeywordAnalysis:
    """
    Score how many job-description words also appear in the resume.

    Matching is exact on normalized tokens: no stemming, synonyms, stop
    words or weighting. Keyword lists keep first-seen order so that the
    truncated missing list is stable across calls.
    """
    resume_words = _unique(tokenize(resume_text))
    job_words = _unique(tokenize(job_text))
    resume_set = set(resume_words)
    job_set = set(job_words)

    matching = [word for word in resume_words if word in job_set]
    missing = [word for word in job_words if word not in resume_set]

    score = _round_half_up(len(matching) / len(job_words) * 100) if job_words else 0

    return KeywordAnalysis(
        score=score,
        matching_keywords=matching,
        missing_keywords=missing[:missing_limit],
    )
