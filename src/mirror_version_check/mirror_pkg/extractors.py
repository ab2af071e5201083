"""Strategies for pulling version strings out of a mirror's HTML index.

Release mirrors list each version as a directory link, e.g.::

    <a href="/terraform/1.5.7/">terraform_1.5.7</a>

so a version is recognised by the ``/X.Y.Z/"`` (or ``/X.Y.Z"``) shape of the
link target. The closing quote is required; without it the stable pattern
would also match the prefix of pre-release directories such as
``/1.6.0-beta1/``.
"""

import logging
import re
from typing import Optional

from .errors import PatternCompileError

logger = logging.getLogger(__name__)

# Characters wrapped around a matched version: /X.X.X/" or /X.X.X"
_DELIMITERS = '/"'


class VersionExtractor:
    """Base class for regex based version extraction."""

    pattern: re.Pattern

    def extract(self, text: str) -> list[str]:
        """Return every version in ``text`` in document order, duplicates included."""
        versions = [_trim(match.group(0)) for match in self.pattern.finditer(text)]
        logger.debug("%s found %d versions", type(self).__name__, len(versions))
        return versions

    def find_first(self, text: str) -> Optional[str]:
        """Return the first version found scanning ``text`` line by line, top to bottom."""
        for line in text.split("\n"):
            match = self.pattern.search(line)
            if match:
                return _trim(match.group(0))
        return None


class StableVersionExtractor(VersionExtractor):
    """Matches /X.X.X/" where X is a number."""

    pattern = re.compile(r'(?<![\d.])/?(\d+\.\d+\.\d+)/?"')


class PreReleaseVersionExtractor(VersionExtractor):
    """Matches /X.X.X/" and /X.X.X-@/" where X is a number and @ is a word such as beta1."""

    pattern = re.compile(r'(?<![\d.])/?(\d+\.\d+\.\d+)(-[A-Za-z]+\d*)?/?"')


class MinorPreReleaseExtractor(VersionExtractor):
    """Matches pre-releases of a single minor line, e.g. /0.13.2-rc1/" for minor 0.13."""

    def __init__(self, minor_version: str):
        self.minor_version = minor_version
        # The minor must not be the tail of a longer number (0.13 vs 10.13)
        source = r'(?<![\d.])/?(%s\.\d+-[A-Za-z]+\d*)/?"' % re.escape(minor_version)
        try:
            self.pattern = re.compile(source)
        except re.error as e:
            raise PatternCompileError(source, str(e)) from e


def get_extractor(include_prerelease: bool) -> VersionExtractor:
    """Return the extraction strategy for stable-only or stable plus pre-release listings."""
    if include_prerelease:
        return PreReleaseVersionExtractor()
    return StableVersionExtractor()


def extract_versions(text: str, include_prerelease: bool) -> list[str]:
    """Extract version strings from a mirror index page.

    Args:
        text: The fetched page body
        include_prerelease: Whether -<letters><digits> pre-release versions are listed too

    Returns:
        Versions in document order; empty if nothing matched
    """
    return get_extractor(include_prerelease).extract(text)


def _trim(match: str) -> str:
    return match.strip(_DELIMITERS)
