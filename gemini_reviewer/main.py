import logging
import math

import httpx
from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import JSONResponse

from gemini_reviewer.config import Settings, get_settings
from gemini_reviewer.deps import ModelFactory, get_model_factory, get_vcs_provider
from gemini_reviewer.models import ReviewOptions, ReviewRequest, ReviewResponse
from gemini_reviewer.pipeline import run_pipeline
from gemini_reviewer.providers.base import VCSProvider

logger = logging.getLogger(__name__)

app = FastAPI(title="Gemini PR Review API")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    logger.exception("Unhandled error")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/reviews", response_model=ReviewResponse)
async def create_review(
    req: ReviewRequest,
    settings: Settings = Depends(get_settings),
    build_model: ModelFactory = Depends(get_model_factory),
    provider: VCSProvider = Depends(get_vcs_provider),
):
    options = ReviewOptions(
        model=req.model or settings.GEMINI_MODEL,
        extra_prompt=req.extra_prompt,
        chunk_size=req.chunk_size,
    )

    try:
        body = await run_pipeline(build_model(options.model), req.diff, options)
    except Exception:
        logger.exception("Gemini review failed")
        raise HTTPException(
            status_code=502,
            detail="AI review service failed"
        )

    try:
        review = await provider.create_review(
            req.repository, req.pull_number, req.commit_id, body
        )
    except httpx.HTTPError:
        logger.exception("GitHub review post failed")
        raise HTTPException(
            status_code=502,
            detail="Failed to post review to GitHub"
        )

    chunks = math.ceil(len(req.diff) / options.chunk_size)
    return ReviewResponse(
        review_id=review.get("id"),
        html_url=review.get("html_url"),
        chunks=chunks,
        body=body,
    )
