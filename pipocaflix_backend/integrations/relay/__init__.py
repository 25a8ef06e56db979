"""
Relay (anti-CORS proxy) integration client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pipocaflix_backend.integrations.relay.client import (
        ExhaustedRetriesError,
        FetchError,
        RelayClient,
        RelayClientError,
        TransientNetworkError,
        build_relay_url,
    )

__all__ = [
    "ExhaustedRetriesError",
    "FetchError",
    "RelayClient",
    "RelayClientError",
    "TransientNetworkError",
    "build_relay_url",
]


def __getattr__(name: str):
    if name in __all__:
        from pipocaflix_backend.integrations.relay import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
