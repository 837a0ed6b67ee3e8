"""
GitHub Action entry point.

Reads the action inputs and secrets from the environment, reviews the pull
request diff with Gemini and files the result as a COMMENT review.
Exits non-zero when anything fails; no partial review is ever posted.
"""

import asyncio
import logging
import sys
from typing import Optional

from gemini_reviewer.config import LOGGER_NAME, ActionSettings, load_action_settings, setup_logging
from gemini_reviewer.errors import ConfigurationError
from gemini_reviewer.gemini_service import GeminiModel, TextModel
from gemini_reviewer.pipeline import run_pipeline
from gemini_reviewer.providers.base import VCSProvider
from gemini_reviewer.providers.github import GitHubProvider


async def review_pull_request(
    settings: ActionSettings,
    model: Optional[TextModel] = None,
    provider: Optional[VCSProvider] = None,
    logger: Optional[logging.Logger] = None,
) -> dict:
    """Run the review pipeline for one pull request and post the comment."""
    logger = logger or logging.getLogger(LOGGER_NAME)
    options = settings.review_options()

    model = model or GeminiModel(settings.GEMINI_API_KEY, options.model)
    provider = provider or GitHubProvider(settings.GITHUB_TOKEN, settings.GITHUB_API_URL)

    body = await run_pipeline(model, settings.PULL_REQUEST_DIFF, options, logger)

    review = await provider.create_review(
        settings.GITHUB_REPOSITORY,
        settings.GITHUB_PULL_REQUEST_NUMBER,
        settings.GIT_COMMIT_HASH,
        body,
    )
    logger.info(
        f"Posted review {review.get('id')} on "
        f"{settings.GITHUB_REPOSITORY}#{settings.GITHUB_PULL_REQUEST_NUMBER}"
    )
    return review


def main() -> int:
    try:
        settings = load_action_settings()
    except ConfigurationError as e:
        setup_logging().error(f"Invalid configuration: {e}")
        return 1

    logger = setup_logging(settings.LOG_LEVEL)
    try:
        asyncio.run(review_pull_request(settings, logger=logger))
    except Exception:
        logger.exception("Error during execution")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
