# jira_timelogger/app/jira.py
"""
JIRA REST client for issue summary lookups.

Only the summary field is fetched. Transient failures are retried with
exponential backoff; a missing issue is a normal result, not an error.
"""

import logging

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from jira_timelogger.config.schema import JiraConfig

logger = logging.getLogger(__name__)


def is_retryable(exception: BaseException) -> bool:
    """
    Returns True if the exception should be retried.

    Retryable conditions:
    - httpx.TransportError (connection refused, timeouts, resets)
    - HTTPStatusError with status in (408, 429, 500, 502, 503, 504)
    """
    if isinstance(exception, httpx.TransportError):
        return True

    if isinstance(exception, httpx.HTTPStatusError):
        return exception.response.status_code in {408, 429, 500, 502, 503, 504}

    return False


jira_retry = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
    retry=retry_if_exception(is_retryable),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)


class JiraClient:
    """Async JIRA client returning issue summaries."""

    def __init__(
        self,
        base_url: str,
        username: str | None = None,
        api_token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize JIRA client.

        Args:
            base_url:  JIRA base URL, e.g. https://example.atlassian.net
            username:  Username or email for basic auth (None = anonymous)
            api_token: API token or password for basic auth
            timeout:   Request timeout in seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        auth = (username, api_token or "") if username else None
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            auth=auth,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    @classmethod
    def from_config(cls, config: JiraConfig) -> "JiraClient | None":
        """Build a client from config, or None when no base URL is set."""
        if not config.base_url:
            return None
        return cls(
            base_url=config.base_url,
            username=config.username,
            api_token=config.api_token,
            timeout=config.timeout,
        )

    async def get_issue_summary(self, key: str) -> str | None:
        """
        Fetch the summary of an issue.

        Args:
            key: Full issue key, e.g. "ABC-12"

        Returns:
            Summary text, or None if the issue does not exist

        Raises:
            httpx.HTTPStatusError: Non-404 error status after retries
            httpx.TransportError: Server unreachable after retries
        """
        data = await self._fetch_issue(key)
        if data is None:
            logger.info(f"Issue {key} not found")
            return None

        summary = (data.get("fields") or {}).get("summary")
        logger.info(f"Fetched summary for {key}")
        return summary or None

    @jira_retry
    async def _fetch_issue(self, key: str) -> dict | None:
        response = await self._client.get(
            f"/rest/api/2/issue/{key}", params={"fields": "summary"}
        )
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()
