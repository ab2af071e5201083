"""Listing the versions published on a mirror."""

import logging
from typing import Iterable, Optional

import httpx

from .extractors import extract_versions
from .fetcher import fetch_mirror_page

logger = logging.getLogger(__name__)

# Display marker appended to the newest installed version, e.g. "1.5.7 *recent"
RECENT_MARKER = "*recent"


async def list_versions(
    mirror_url: str,
    include_prerelease: bool,
    client: Optional[httpx.AsyncClient] = None,
) -> list[str]:
    """Get the list of available versions from a mirror.

    Args:
        mirror_url: The mirror serving the release directory listing
        include_prerelease: Whether pre-release versions are listed too
        client: httpx AsyncClient to use for the request

    Returns:
        Versions in the order they appear on the index page. An empty list means
        the page was fetched but listed no versions.

    Raises:
        MirrorFetchError: If the index page cannot be fetched
    """
    logger.debug("Getting list of versions from %s", mirror_url)
    body = await fetch_mirror_page(mirror_url, client)

    versions = extract_versions(body, include_prerelease)
    if not versions:
        logger.warning("Cannot get version list from mirror: %s", mirror_url)
    return versions


def strip_recent_marker(version: str) -> str:
    """Return ``version`` without a trailing ``*recent`` display marker."""
    version = version.strip()
    if version.endswith(RECENT_MARKER):
        version = version[: -len(RECENT_MARKER)].rstrip()
    return version


def remove_duplicate_versions(versions: Iterable[str]) -> list[str]:
    """Drop repeated versions, keeping the first occurrence of each.

    ``"1.2.3"`` and ``"1.2.3 *recent"`` count as the same version; whichever
    comes first is kept as written.
    """
    encountered: set[str] = set()
    result = []
    for version in versions:
        version_only = strip_recent_marker(version)
        if version_only in encountered:
            continue
        encountered.add(version_only)
        result.append(version)
    return result


def version_exists(version: str, versions: Iterable[str]) -> bool:
    """Check if the requested version is in ``versions``."""
    return version in versions
