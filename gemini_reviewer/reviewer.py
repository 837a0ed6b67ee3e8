"""
Per-chunk review requests and the summary over all of them.

Every model call is awaited before the next one starts. A failed call is
logged and re-raised; nothing is retried and no partial result survives.
"""

import logging
from typing import List, Optional

from gemini_reviewer.chunker import chunk_string
from gemini_reviewer.config import LOGGER_NAME
from gemini_reviewer.gemini_service import TextModel
from gemini_reviewer.models import ReviewOptions, ReviewResult
from gemini_reviewer.review_builders import build_review_prompt, build_summary_prompt


async def request_review(
    model: TextModel,
    prompt_prefix: str,
    chunk: str,
    logger: Optional[logging.Logger] = None,
) -> str:
    logger = logger or logging.getLogger(LOGGER_NAME)
    try:
        review = await model.generate(prompt_prefix + chunk)
    except Exception:
        logger.error("Error generating review for chunk", exc_info=True)
        raise
    logger.debug(f"Response AI: {review}")
    return review


async def summarize_reviews(
    model: TextModel,
    chunk_reviews: List[str],
    logger: Optional[logging.Logger] = None,
) -> str:
    logger = logger or logging.getLogger(LOGGER_NAME)
    try:
        summary = await model.generate(build_summary_prompt(chunk_reviews))
    except Exception:
        logger.error("Error summarizing the review", exc_info=True)
        raise
    logger.debug(f"Response AI (summary): {summary}")
    return summary


async def get_review(
    model: TextModel,
    diff: str,
    options: ReviewOptions,
    logger: Optional[logging.Logger] = None,
) -> ReviewResult:
    """Review the diff chunk by chunk, then summarize the chunk reviews."""
    logger = logger or logging.getLogger(LOGGER_NAME)

    prompt_prefix = build_review_prompt(options.extra_prompt)
    chunks = chunk_string(diff, options.chunk_size)
    logger.info(f"Reviewing diff of {len(diff)} chars in {len(chunks)} chunk(s)")

    chunk_reviews: List[str] = []
    for index, chunk in enumerate(chunks, start=1):
        logger.debug(f"Requesting review for chunk {index}/{len(chunks)}")
        chunk_reviews.append(await request_review(model, prompt_prefix, chunk, logger))

    summary = await summarize_reviews(model, chunk_reviews, logger)
    return ReviewResult(chunk_reviews=chunk_reviews, summary=summary)
