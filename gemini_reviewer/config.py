import logging
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gemini_reviewer.errors import ConfigurationError
from gemini_reviewer.models import DEFAULT_CHUNK_SIZE, DEFAULT_MODEL, ReviewOptions

LOGGER_NAME = "code_review"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Action log-level names and their stdlib equivalents
LOG_LEVELS = {
    "silly": logging.DEBUG,
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
}


def _input(name: str, action_input: str) -> AliasChoices:
    # GitHub exposes action inputs as INPUT_<NAME>, hyphens kept
    return AliasChoices(name, f"INPUT_{action_input.upper()}")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        populate_by_name=True,
    )

    GITHUB_TOKEN: str
    GEMINI_API_KEY: str
    GEMINI_MODEL: str = DEFAULT_MODEL
    GITHUB_API_URL: str = "https://api.github.com"
    LOG_LEVEL: str = Field("info", validation_alias=_input("LOG_LEVEL", "log-level"))

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


class ActionSettings(Settings):
    """Everything one GitHub Action run needs, read once at start."""

    GITHUB_REPOSITORY: str
    GITHUB_PULL_REQUEST_NUMBER: int = Field(gt=0)
    GIT_COMMIT_HASH: str

    PULL_REQUEST_DIFF: str = Field(
        "", validation_alias=_input("PULL_REQUEST_DIFF", "pull_request_diff")
    )
    PULL_REQUEST_CHUNK_SIZE: int = Field(
        DEFAULT_CHUNK_SIZE,
        gt=0,
        validation_alias=_input("PULL_REQUEST_CHUNK_SIZE", "pull_request_chunk_size"),
    )
    MODEL: Optional[str] = Field(None, validation_alias=_input("MODEL", "model"))
    EXTRA_PROMPT: str = Field("", validation_alias=_input("EXTRA_PROMPT", "extra-prompt"))

    def review_options(self) -> ReviewOptions:
        return ReviewOptions(
            model=self.MODEL or self.GEMINI_MODEL,
            extra_prompt=self.EXTRA_PROMPT,
            chunk_size=self.PULL_REQUEST_CHUNK_SIZE,
        )


def _describe(error: ValidationError) -> str:
    problems = []
    for err in error.errors():
        name = ".".join(str(part) for part in err["loc"]) or "settings"
        if err["type"] == "missing":
            problems.append(f"{name} is not set")
        else:
            problems.append(f"{name}: {err['msg']}")
    return "; ".join(problems)


def load_action_settings(env_file: Optional[str] = ".env") -> ActionSettings:
    try:
        return ActionSettings(_env_file=env_file)
    except ValidationError as e:
        raise ConfigurationError(_describe(e)) from e


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(_describe(e)) from e


def setup_logging(level: str = "info") -> logging.Logger:
    """Configure the process-wide review logger and return it."""
    logging.basicConfig(format=LOG_FORMAT)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(LOG_LEVELS.get(level.lower(), logging.INFO))
    return logger
