"""Runtime configuration read from the environment."""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 10.0


def parse_timeout(value: Optional[str]) -> float:
    """Parse a timeout in seconds, falling back to the default for missing or bad values."""
    if value is None or not value.strip():
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        logger.warning(
            "Ignoring invalid MIRROR_VERSION_CHECK_TIMEOUT_SECONDS %r, using %s seconds",
            value,
            DEFAULT_REQUEST_TIMEOUT,
        )
        return DEFAULT_REQUEST_TIMEOUT
    if not timeout > 0:
        logger.warning(
            "MIRROR_VERSION_CHECK_TIMEOUT_SECONDS must be positive, got %r; using %s seconds",
            value,
            DEFAULT_REQUEST_TIMEOUT,
        )
        return DEFAULT_REQUEST_TIMEOUT
    return timeout


# Mirror serving the release directory listing
DEFAULT_MIRROR_URL = os.environ.get(
    "MIRROR_VERSION_CHECK_MIRROR_URL", "https://releases.hashicorp.com/terraform"
)

# Default timeout: 10 seconds per request
REQUEST_TIMEOUT = parse_timeout(os.environ.get("MIRROR_VERSION_CHECK_TIMEOUT_SECONDS"))

LOG_LEVEL = os.environ.get("MIRROR_VERSION_CHECK_LOG_LEVEL", "WARNING").upper()

USER_AGENT = "mirror-version-check/1.0"
