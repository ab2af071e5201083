"""Shape checks for user supplied version strings."""

import re

# major.minor.patch with an optional -<letters><digits> prerelease, e.g. 0.1.2, 0.1.2-beta1, 0.1.2-alpha
VERSION_REGEX = re.compile(r"^(\d+\.\d+\.\d+)(-[A-Za-z]+\d*)?$")

# major.minor only, e.g. 0.1
MINOR_VERSION_REGEX = re.compile(r"^(\d+\.\d+)$")


def is_valid_version(version: str) -> bool:
    """Return True if ``version`` is a full version such as ``0.1.2`` or ``0.1.2-beta1``.

    ``a.1.2`` and ``0.1. 2`` are rejected.
    """
    return VERSION_REGEX.fullmatch(version) is not None


def is_valid_minor_version(version: str) -> bool:
    """Return True if ``version`` is a ``major.minor`` prefix such as ``0.1``."""
    return MINOR_VERSION_REGEX.fullmatch(version) is not None
