from pydantic import BaseModel, Field
from typing import List, Optional

DEFAULT_MODEL = "gemini-1.5-pro-latest"
DEFAULT_CHUNK_SIZE = 3500


class ReviewOptions(BaseModel):
    model: str = DEFAULT_MODEL
    extra_prompt: str = ""
    chunk_size: int = Field(DEFAULT_CHUNK_SIZE, gt=0)


class ReviewResult(BaseModel):
    chunk_reviews: List[str]
    summary: str


class ReviewRequest(BaseModel):
    repository: str  # "owner/repo"
    pull_number: int = Field(gt=0)
    commit_id: str
    diff: str = ""
    chunk_size: int = Field(DEFAULT_CHUNK_SIZE, gt=0)
    model: Optional[str] = None
    extra_prompt: str = ""


class ReviewResponse(BaseModel):
    review_id: Optional[int] = None
    html_url: Optional[str] = None
    chunks: int
    body: str
