r"""Response body buffering.

The retry predicate receives the body as text, so the whole body is read
before the predicate runs.
"""

from __future__ import annotations

__all__ = ["read_body", "read_body_async"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


def read_body(response: httpx.Response) -> str:
    """Read the full response body and decode it.

    Args:
        response: The HTTP response. Reading an already buffered response
            is a no-op.

    Returns:
        The decoded body text.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretrier.utils import read_body
        >>> read_body(httpx.Response(503, text="unavailable"))
        'unavailable'

        ```
    """
    response.read()
    return response.text


async def read_body_async(response: httpx.Response) -> str:
    """Read the full response body asynchronously and decode it.

    Args:
        response: The HTTP response. Reading an already buffered response
            is a no-op.

    Returns:
        The decoded body text.
    """
    await response.aread()
    return response.text
