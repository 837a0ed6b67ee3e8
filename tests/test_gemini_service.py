from unittest.mock import AsyncMock, Mock, patch

import pytest

from gemini_reviewer.gemini_service import GeminiModel


@patch("gemini_reviewer.gemini_service.genai")
def test_model_is_configured(mock_genai):
    model = GeminiModel("api-key", "gemini-2.0-flash")

    mock_genai.configure.assert_called_once_with(api_key="api-key")
    mock_genai.GenerativeModel.assert_called_once_with("gemini-2.0-flash")
    assert model.model_name == "gemini-2.0-flash"


@pytest.mark.asyncio
@patch("gemini_reviewer.gemini_service.genai")
async def test_generate_returns_response_text(mock_genai):
    backend = mock_genai.GenerativeModel.return_value
    backend.generate_content_async = AsyncMock(return_value=Mock(text="Found 2 issues"))

    text = await GeminiModel("api-key").generate("review this")

    backend.generate_content_async.assert_awaited_once_with("review this")
    assert text == "Found 2 issues"


@pytest.mark.asyncio
@patch("gemini_reviewer.gemini_service.genai")
async def test_generate_errors_propagate(mock_genai):
    backend = mock_genai.GenerativeModel.return_value
    backend.generate_content_async = AsyncMock(side_effect=RuntimeError("blocked"))

    with pytest.raises(RuntimeError, match="blocked"):
        await GeminiModel("api-key").generate("review this")
