# deps.py
from typing import Callable

from fastapi import Depends

from gemini_reviewer.config import Settings, get_settings
from gemini_reviewer.gemini_service import GeminiModel, TextModel
from gemini_reviewer.providers.base import VCSProvider
from gemini_reviewer.providers.github import GitHubProvider

ModelFactory = Callable[[str], TextModel]


def get_model_factory(settings: Settings = Depends(get_settings)) -> ModelFactory:
    def build(model_name: str) -> TextModel:
        return GeminiModel(settings.GEMINI_API_KEY, model_name)

    return build


def get_vcs_provider(settings: Settings = Depends(get_settings)) -> VCSProvider:
    return GitHubProvider(settings.GITHUB_TOKEN, settings.GITHUB_API_URL)
