"""Request target construction with optional relay prefix."""

from typing import Any

import httpx


def relay_target(
    url: str,
    params: dict[str, Any] | None = None,
    relay_prefix: str = "",
) -> tuple[str, dict[str, Any] | None]:
    """Build the URL and params to send, routing through a relay when configured.

    A relay takes the complete target URL (query string included) appended to
    its own prefix, e.g. ``https://corsproxy.io/?https://example.com/?q=1``.

    Args:
        url: Target endpoint URL.
        params: Query parameters for the target endpoint.
        relay_prefix: Relay URL prefix, or empty for a direct request.

    Returns:
        Tuple of (url, params) suitable for ``httpx.AsyncClient.get``.
    """
    if not relay_prefix:
        return url, params
    target = httpx.URL(url, params=params) if params else httpx.URL(url)
    return f"{relay_prefix}{target}", None
