from typing import Protocol

import google.generativeai as genai

from gemini_reviewer.models import DEFAULT_MODEL


class TextModel(Protocol):
    async def generate(self, prompt: str) -> str:
        ...


class GeminiModel:
    """Gemini text generation, one prompt in, response text out."""

    def __init__(self, api_key: str, model_name: str = DEFAULT_MODEL):
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self._model = genai.GenerativeModel(model_name)

    async def generate(self, prompt: str) -> str:
        response = await self._model.generate_content_async(prompt)
        return response.text
