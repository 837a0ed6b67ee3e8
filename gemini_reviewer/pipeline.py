import logging
from typing import Optional

from gemini_reviewer.config import LOGGER_NAME
from gemini_reviewer.formatting import format_review_comment
from gemini_reviewer.gemini_service import TextModel
from gemini_reviewer.models import ReviewOptions
from gemini_reviewer.reviewer import get_review


async def run_pipeline(
    model: TextModel,
    diff: str,
    options: ReviewOptions,
    logger: Optional[logging.Logger] = None,
) -> str:
    """Chunk, review, summarize and format; returns the comment body."""
    result = await get_review(model, diff, options, logger or logging.getLogger(LOGGER_NAME))
    return format_review_comment(result.summary, result.chunk_reviews)
