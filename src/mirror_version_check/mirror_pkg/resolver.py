"""Resolve "latest" style requests against a mirror."""

import logging
from typing import Optional

import httpx

from ..utils.constraints import NoMatchingVersionError, resolve_constraint
from .extractors import MinorPreReleaseExtractor, StableVersionExtractor
from .fetcher import fetch_mirror_page
from .listing import list_versions

logger = logging.getLogger(__name__)


async def latest_stable(
    mirror_url: str,
    client: Optional[httpx.AsyncClient] = None,
    sort_numerically: bool = False,
) -> Optional[str]:
    """Get the latest stable version published on a mirror.

    By default this is the first stable version on the index page, reading
    top to bottom. Mirrors list their newest release first, so no comparison
    is done. With ``sort_numerically`` the highest stable version is
    returned instead, wherever it appears on the page.

    Args:
        mirror_url: The mirror serving the release directory listing
        client: httpx AsyncClient to use for the request
        sort_numerically: Compare versions instead of trusting page order

    Returns:
        The version, or None if the page lists no stable version

    Raises:
        MirrorFetchError: If the index page cannot be fetched
    """
    body = await fetch_mirror_page(mirror_url, client)
    extractor = StableVersionExtractor()

    if not sort_numerically:
        return extractor.find_first(body)

    try:
        return resolve_constraint(">=0.0.0", extractor.extract(body))
    except NoMatchingVersionError:
        return None


async def latest_implicit(
    mirror_url: str,
    include_prerelease: bool,
    minor_version: str,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[str]:
    """Get the latest version within a minor line, e.g. 0.13 -> 0.13.7.

    ``minor_version`` must already be validated as ``major.minor``.

    With ``include_prerelease`` the first pre-release of that minor line on the
    index page is returned. Otherwise all stable versions are listed and the
    highest patch is picked with the ``~>`` constraint.

    Returns:
        The version, or None if no pre-release of the minor line is listed

    Raises:
        MirrorFetchError: If the index page cannot be fetched
        PatternCompileError: If ``minor_version`` corrupts the pre-release pattern
        NoMatchingVersionError: If no stable version of the minor line exists
    """
    if include_prerelease:
        extractor = MinorPreReleaseExtractor(minor_version)
        body = await fetch_mirror_page(mirror_url, client)
        return extractor.find_first(body)

    versions = await list_versions(mirror_url, include_prerelease=False, client=client)
    return resolve_constraint(f"~> {minor_version}", versions)
