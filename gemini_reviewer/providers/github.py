import logging

import httpx

from gemini_reviewer.providers.base import VCSProvider

logger = logging.getLogger(__name__)


class GitHubProvider(VCSProvider):
    API = "https://api.github.com"

    def __init__(
        self,
        token: str,
        api_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = (api_url or self.API).rstrip("/")
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github.v3+json",
        }
        self._transport = transport

    async def create_review(self, repository, pull_number, commit_id, body):
        """Post `body` as a COMMENT review on the pull request."""
        url = f"{self.api_url}/repos/{repository}/pulls/{pull_number}/reviews"
        data = {
            "body": body,
            "commit_id": commit_id,
            "event": "COMMENT",
        }

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                r = await client.post(url, headers=self.headers, json=data)
                r.raise_for_status()
            except httpx.HTTPError:
                logger.error(f"Error posting review to {repository}#{pull_number}", exc_info=True)
                raise
            return r.json()
