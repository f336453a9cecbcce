"""
Plain HTTP page fetcher for display boards that render server-side.
"""

from __future__ import annotations

import requests

from app.scraping.errors import FetchError
from app.scraping.fetching.base import DEFAULT_USER_AGENT, PageFetcher


class RequestsPageFetcher(PageFetcher):
    """
    Fetches raw HTML with a shared `requests.Session`.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._headers = {"User-Agent": user_agent, **(headers or {})}

    def fetch_rendered_html(self, url: str, timeout_seconds: float) -> str:
        try:
            response = self._session.get(
                url,
                headers=self._headers,
                timeout=timeout_seconds,
                allow_redirects=True,
            )
            response.raise_for_status()
        except requests.Timeout as exc:
            raise FetchError(f"Request timed out after {timeout_seconds:g}s url={url}") from exc
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            raise FetchError(f"Display board returned status={status_code} url={url}") from exc
        except requests.RequestException as exc:
            raise FetchError(f"Request failed url={url} error={exc}") from exc
        return response.text
