"""SharedCount API client."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import requests

from share_count.core.config import DEFAULT_API_DOMAIN, ShareCountConfig

logger = logging.getLogger(__name__)

CredentialsResolver = Callable[[], tuple[str, str]]
ParamsHook = Callable[[dict[str, Any], str], dict[str, Any]]


class SharedCountClient:
    """Single GET against ``{api_domain}/url`` returning the raw response body.

    Every failure is soft: a missing key, a transport error, a non-200 status
    or an empty body all yield None so the caller keeps whatever it had cached.

    Extension points:
        credentials: Callable returning ``(api_key, api_domain)``. Called on
            every fetch, so rotated keys are picked up without a rebuild.
        params_hook: Callable receiving the query parameters and the subject
            URL, returning the parameters to send.
    """

    def __init__(
        self,
        api_key: str = "",
        api_domain: str = DEFAULT_API_DOMAIN,
        timeout: float | None = 10.0,
        session: requests.Session | None = None,
        credentials: CredentialsResolver | None = None,
        params_hook: ParamsHook | None = None,
    ) -> None:
        self._api_key = api_key
        self._api_domain = api_domain
        self._timeout = timeout
        self._session = session or requests.Session()
        self._credentials = credentials
        self._params_hook = params_hook

    @classmethod
    def from_config(cls, config: ShareCountConfig, **kwargs: Any) -> "SharedCountClient":
        """Create a client from a ShareCountConfig."""
        return cls(
            api_key=config.api_key,
            api_domain=config.api_domain,
            timeout=config.request_timeout,
            **kwargs,
        )

    def resolve_credentials(self) -> tuple[str, str]:
        """Return the API key and domain in effect for the next request."""
        if self._credentials is not None:
            return self._credentials()
        return self._api_key, self._api_domain

    def endpoint(self, api_domain: str) -> str:
        return f"{api_domain.rstrip('/')}/url"

    def fetch(self, url: str) -> str | None:
        """Fetch share counts for a URL, returning the raw body or None."""
        if not url:
            return None
        api_key, api_domain = self.resolve_credentials()
        if not api_key:
            logger.debug("No SharedCount API key configured, skipping fetch for %s", url)
            return None

        params: dict[str, Any] = {"url": url, "apikey": api_key}
        if self._params_hook is not None:
            params = self._params_hook(params, url)

        try:
            response = self._session.get(
                self.endpoint(api_domain), params=params, timeout=self._timeout
            )
        except requests.RequestException as exc:
            logger.warning("SharedCount request for %s failed: %s", url, exc)
            return None

        if response.status_code != 200:
            logger.warning(
                "SharedCount returned HTTP %s for %s", response.status_code, url
            )
            return None
        if not response.text:
            logger.warning("SharedCount returned an empty body for %s", url)
            return None
        return response.text

    def close(self) -> None:
        self._session.close()
