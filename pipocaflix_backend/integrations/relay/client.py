"""
Relay client for the published catalog spreadsheet.

The spreadsheet export is never requested directly: every request goes to a
relay endpoint that forwards it to the origin, with the origin URL passed as
the percent-encoded `url` query parameter.

Automated tests for this module should never call the live relay. Inject an
`httpx.MockTransport` instead.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from types import TracebackType
from urllib.parse import quote

import httpx

from pipocaflix_backend.config import (
    BACKOFF_UNIT_SECONDS,
    MAX_ATTEMPTS,
    RELAY_BASE_URL,
    REQUEST_TIMEOUT_SECONDS,
    CatalogSettings,
)

logger = logging.getLogger(__name__)

# Characters JavaScript's encodeURIComponent leaves alone besides the unreserved set.
_URL_PARAM_SAFE = "!*'()"

SleepFn = Callable[[float], Awaitable[None]]


class RelayClientError(RuntimeError):
    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body_snippet: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


class TransientNetworkError(RelayClientError):
    """A single relay attempt failed (connection error, non-2xx status or timeout)."""


class ExhaustedRetriesError(RelayClientError):
    """Every relay attempt failed; `last_error` is the failure of the final attempt."""

    def __init__(self, message: str, *, attempts: int, last_error: TransientNetworkError) -> None:
        super().__init__(
            message,
            status_code=last_error.status_code,
            body_snippet=last_error.body_snippet,
        )
        self.attempts = attempts
        self.last_error = last_error


FetchError = ExhaustedRetriesError


def build_relay_url(relay_base_url: str, target_url: str) -> str:
    return f"{relay_base_url}?url={quote(target_url, safe=_URL_PARAM_SAFE)}"


class RelayClient:
    """
    Fetches raw text through the relay with a per-attempt timeout and linear backoff.

    Attempt `n` that fails is followed by a `n * backoff_unit_seconds` pause, as long
    as attempts remain. A timeout cancels only the in-flight request of that attempt.
    """

    def __init__(
        self,
        *,
        relay_base_url: str = RELAY_BASE_URL,
        timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
        max_attempts: int = MAX_ATTEMPTS,
        backoff_unit_seconds: float = BACKOFF_UNIT_SECONDS,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: SleepFn | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.relay_base_url = relay_base_url
        self.timeout_seconds = timeout_seconds
        self.max_attempts = max_attempts
        self.backoff_unit_seconds = backoff_unit_seconds
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                timeout=timeout_seconds,
                transport=transport,
                follow_redirects=True,
            )
        self._client = client
        self._sleep = sleep or asyncio.sleep

    @classmethod
    def from_settings(cls, settings: CatalogSettings, **kwargs) -> "RelayClient":  # noqa: ANN003
        return cls(
            relay_base_url=settings.relay_base_url,
            timeout_seconds=settings.request_timeout_seconds,
            max_attempts=settings.max_attempts,
            backoff_unit_seconds=settings.backoff_unit_seconds,
            **kwargs,
        )

    async def __aenter__(self) -> "RelayClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def relay_url_for(self, target_url: str) -> str:
        return build_relay_url(self.relay_base_url, target_url)

    async def _attempt(self, relay_url: str) -> str:
        headers = {
            "accept": "text/csv, text/plain;q=0.9, */*;q=0.5",
            "user-agent": "Mozilla/5.0",
        }
        try:
            resp = await asyncio.wait_for(
                self._client.get(relay_url, headers=headers),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise TransientNetworkError(f"Relay request timed out after {self.timeout_seconds:g}s.") from exc
        except httpx.HTTPError as exc:
            raise TransientNetworkError(f"Relay request failed: {exc}") from exc
        except Exception as exc:
            raise TransientNetworkError(f"Relay request failed unexpectedly: {exc!r}") from exc

        if not resp.is_success:
            raise TransientNetworkError(
                f"Relay request failed with HTTP {resp.status_code}.",
                status_code=resp.status_code,
                body_snippet=(resp.text or "")[:400],
            )
        return resp.text

    async def fetch(self, target_url: str) -> str:
        """
        Return the body served by the relay for `target_url`.

        Raises:
            ExhaustedRetriesError: when all `max_attempts` attempts failed.
        """

        relay_url = self.relay_url_for(target_url)
        last_error: TransientNetworkError | None = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                return await self._attempt(relay_url)
            except TransientNetworkError as exc:
                last_error = exc
                logger.warning(f"Relay attempt {attempt}/{self.max_attempts} failed for {target_url}: {exc}")

            if attempt < self.max_attempts:
                await self._sleep(attempt * self.backoff_unit_seconds)

        if last_error is None:
            raise RelayClientError("Relay fetch failed (no attempt was made).")
        raise ExhaustedRetriesError(
            f"Relay fetch failed after {self.max_attempts} attempts: {last_error}",
            attempts=self.max_attempts,
            last_error=last_error,
        ) from last_error
