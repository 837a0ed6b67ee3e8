import pytest


class FakeModel:
    """Records every prompt; answers from `responses` or with a numbered reply."""

    def __init__(self, responses=None, fail_on=None):
        self.prompts = []
        self._responses = list(responses or [])
        self.fail_on = fail_on

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.fail_on == len(self.prompts):
            raise RuntimeError("429 quota exceeded")
        if self._responses:
            return self._responses.pop(0)
        return f"response {len(self.prompts)}"


class FakeProvider:
    def __init__(self, error=None):
        self.calls = []
        self.error = error

    async def create_review(self, repository, pull_number, commit_id, body):
        self.calls.append((repository, pull_number, commit_id, body))
        if self.error:
            raise self.error
        return {"id": 99, "html_url": f"https://github.com/{repository}/pull/{pull_number}#pullrequestreview-99"}


@pytest.fixture
def make_model():
    return FakeModel


@pytest.fixture
def make_provider():
    return FakeProvider


ENV_VARS = [
    "GITHUB_TOKEN",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "GITHUB_API_URL",
    "LOG_LEVEL",
    "INPUT_LOG-LEVEL",
    "GITHUB_REPOSITORY",
    "GITHUB_PULL_REQUEST_NUMBER",
    "GIT_COMMIT_HASH",
    "PULL_REQUEST_DIFF",
    "INPUT_PULL_REQUEST_DIFF",
    "PULL_REQUEST_CHUNK_SIZE",
    "INPUT_PULL_REQUEST_CHUNK_SIZE",
    "MODEL",
    "INPUT_MODEL",
    "EXTRA_PROMPT",
    "INPUT_EXTRA-PROMPT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def action_env(clean_env):
    clean_env.setenv("GITHUB_TOKEN", "ghp_test")
    clean_env.setenv("GEMINI_API_KEY", "gemini-test")
    clean_env.setenv("GITHUB_REPOSITORY", "octo/hello")
    clean_env.setenv("GITHUB_PULL_REQUEST_NUMBER", "42")
    clean_env.setenv("GIT_COMMIT_HASH", "abc123")
    return clean_env
