"""Fetch the index page of a release mirror."""

import logging
from typing import Optional

import httpx

from .. import config
from .errors import MirrorFetchError

logger = logging.getLogger(__name__)


def normalize_mirror_url(mirror_url: str) -> str:
    """Ensure the mirror URL ends with a slash so it addresses the directory index."""
    if not mirror_url.endswith("/"):
        return f"{mirror_url}/"
    return mirror_url


def create_mirror_client(timeout: float = config.REQUEST_TIMEOUT) -> httpx.AsyncClient:
    """Create an httpx AsyncClient configured for mirror requests.

    Args:
        timeout: Request timeout in seconds

    Returns:
        Configured httpx AsyncClient
    """
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": config.USER_AGENT},
        follow_redirects=True,
    )


async def fetch_mirror_page(
    mirror_url: str, client: Optional[httpx.AsyncClient] = None
) -> str:
    """Fetch the raw text of a mirror's index page.

    Args:
        mirror_url: The mirror URL, with or without a trailing slash
        client: httpx AsyncClient to use; a short-lived one is created if omitted

    Returns:
        The response body as text

    Raises:
        MirrorFetchError: On network errors or any non-200 response
    """
    url = normalize_mirror_url(mirror_url)

    if client is None:
        async with create_mirror_client() as owned_client:
            return await _get_body(url, owned_client)
    return await _get_body(url, client)


async def _get_body(url: str, client: httpx.AsyncClient) -> str:
    logger.debug("Fetching mirror index %s", url)
    try:
        response = await client.get(url)
    except httpx.TimeoutException as e:
        raise MirrorFetchError(url, f"request timed out ({e})") from e
    except httpx.HTTPError as e:
        raise MirrorFetchError(url, f"error getting url: {e}") from e

    logger.debug("Mirror %s responded with HTTP %s", url, response.status_code)
    if response.status_code != 200:
        raise MirrorFetchError(
            url,
            f"HTTP error {response.status_code}: {response.reason_phrase}",
            status_code=response.status_code,
        )

    return response.text
