"""User facing operations: resolve a request and print the resulting version."""

import logging
import sys
from typing import Optional, TextIO

import httpx

from ..utils.constraints import NoMatchingVersionError
from ..utils.validators import is_valid_minor_version, is_valid_version
from .errors import InvalidVersionFormatError, MirrorFetchError, VersionNotFoundError
from .listing import list_versions, remove_duplicate_versions, version_exists
from .resolver import latest_implicit, latest_stable
from .structs import ResolvedVersion, VersionListing

logger = logging.getLogger(__name__)

LIST_ALL_HINT = "Try `mirror-version-check --list-all` to see all available versions"


def _emit(text: str, out: Optional[TextIO]) -> None:
    print(text, file=out or sys.stdout)


def _emit_resolved(result: ResolvedVersion, as_json: bool, out: Optional[TextIO]) -> None:
    _emit(result.model_dump_json() if as_json else result.version, out)


async def show_latest_version(
    mirror_url: str,
    client: Optional[httpx.AsyncClient] = None,
    out: Optional[TextIO] = None,
    sort_numerically: bool = False,
    as_json: bool = False,
) -> None:
    """Print the latest stable version.

    Best effort: a fetch failure is logged and an empty line printed.
    """
    try:
        version = await latest_stable(mirror_url, client, sort_numerically=sort_numerically)
    except MirrorFetchError as e:
        logger.error("%s", e)
        version = None

    if as_json:
        _emit_resolved(ResolvedVersion(mirror_url=mirror_url, requested="latest", version=version), True, out)
    else:
        _emit(version or "", out)


async def show_latest_implicit_version(
    requested_version: str,
    mirror_url: str,
    include_prerelease: bool,
    client: Optional[httpx.AsyncClient] = None,
    out: Optional[TextIO] = None,
    as_json: bool = False,
) -> None:
    """Print the latest version of a minor line, e.g. ``0.13`` -> ``0.13.7``.

    Raises:
        InvalidVersionFormatError: If ``requested_version`` is not ``major.minor``;
            nothing is fetched in that case
        VersionNotFoundError: If the mirror has no version in that minor line
        MirrorFetchError: If the index page cannot be fetched
    """
    if not is_valid_minor_version(requested_version):
        raise InvalidVersionFormatError(requested_version, "major.minor (e.g. 0.13)")

    try:
        version = await latest_implicit(mirror_url, include_prerelease, requested_version, client)
    except NoMatchingVersionError as e:
        logger.debug("%s", e)
        version = None

    if not version:
        raise VersionNotFoundError(requested_version, LIST_ALL_HINT)

    _emit_resolved(
        ResolvedVersion(mirror_url=mirror_url, requested=requested_version, version=version),
        as_json,
        out,
    )


async def show_version(
    requested_version: str,
    mirror_url: str,
    include_prerelease: bool,
    client: Optional[httpx.AsyncClient] = None,
    out: Optional[TextIO] = None,
    as_json: bool = False,
) -> None:
    """Print ``requested_version`` if the mirror publishes it.

    Raises:
        InvalidVersionFormatError: If ``requested_version`` is not a full version
        VersionNotFoundError: If the mirror does not list it
        MirrorFetchError: If the index page cannot be fetched
    """
    if not is_valid_version(requested_version):
        raise InvalidVersionFormatError(requested_version, "major.minor.patch[-prerelease] (e.g. 0.13.1 or 0.13.0-rc1)")

    # A pre-release request can only be found in a listing that includes pre-releases
    include_prerelease = include_prerelease or "-" in requested_version
    versions = await list_versions(mirror_url, include_prerelease, client)
    if not version_exists(requested_version, versions):
        raise VersionNotFoundError(requested_version, LIST_ALL_HINT)

    _emit_resolved(
        ResolvedVersion(mirror_url=mirror_url, requested=requested_version, version=requested_version),
        as_json,
        out,
    )


async def show_version_list(
    mirror_url: str,
    include_prerelease: bool,
    client: Optional[httpx.AsyncClient] = None,
    out: Optional[TextIO] = None,
    as_json: bool = False,
) -> None:
    """Print every version on the mirror once, in page order.

    Raises:
        MirrorFetchError: If the index page cannot be fetched
    """
    versions = remove_duplicate_versions(await list_versions(mirror_url, include_prerelease, client))

    if as_json:
        listing = VersionListing(
            mirror_url=mirror_url, include_prerelease=include_prerelease, versions=versions
        )
        _emit(listing.model_dump_json(), out)
        return

    for version in versions:
        _emit(version, out)
