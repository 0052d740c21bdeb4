"""Remote call helper that degrades to a local fallback."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

T = TypeVar("T")

_logger = logging.getLogger(__name__)


async def with_fallback(
    remote: Callable[[], Awaitable[T]],
    fallback: Callable[[], T],
    *,
    action: str,
) -> T:
    """Await the remote call once; on any failure return the fallback value.

    Network errors, bad statuses, malformed payloads and a disabled assistant
    all take the same path.
    """
    try:
        return await remote()
    except Exception as exc:
        _logger.warning(
            "%s failed, using fallback (%s): %s", action, type(exc).__name__, exc
        )
        return fallback()
