"""Resolve version constraint expressions such as ``~> 0.12`` against a list of versions."""

import logging
import re
from typing import Iterable

import semantic_version

logger = logging.getLogger(__name__)


class InvalidConstraintError(ValueError):
    """Raised when a constraint expression cannot be parsed."""


class NoMatchingVersionError(ValueError):
    """Raised when no candidate satisfies a constraint expression."""

    def __init__(self, expression: str, candidate_count: int):
        self.expression = expression
        self.candidate_count = candidate_count
        super().__init__(
            f"No version matches constraint {expression!r} ({candidate_count} candidates)"
        )


# "~> 0.12" or "~> 0.12.3", optionally with a pre-release
_PESSIMISTIC = re.compile(r"^~>(\d+)\.(\d+)(?:\.(\d+))?(-[A-Za-z]+\d*)?$")

# A major.minor version not followed by a patch, e.g. the "0.13" in "<0.13"
_MINOR_ONLY = re.compile(r"(?<![\d.])(\d+\.\d+)(?![\d.])")


def normalize_constraint(expression: str) -> str:
    """Translate a constraint expression into SimpleSpec syntax.

    ``~> X.Y`` and ``~> X.Y.Z`` both pin major.minor and accept any later
    patch: ``~> 0.12.3`` becomes ``>=0.12.3,<0.13.0``. Minor-only versions are
    padded with a zero patch and a lone ``=`` becomes ``==``.

    Raises:
        InvalidConstraintError: If the expression is empty or a ``~>`` clause is malformed
    """
    compact = re.sub(r"\s+", "", expression or "")
    if not compact:
        raise InvalidConstraintError("Empty version constraint")

    clauses = []
    for clause in compact.split(","):
        if not clause:
            raise InvalidConstraintError(f"Empty clause in version constraint {expression!r}")

        if clause.startswith("~>"):
            match = _PESSIMISTIC.match(clause)
            if not match:
                raise InvalidConstraintError(
                    f"Pessimistic constraint needs major.minor[.patch]: {clause!r}"
                )
            major, minor, patch, pre = match.groups()
            clauses.append(f">={major}.{minor}.{patch or 0}{pre or ''}")
            clauses.append(f"<{major}.{int(minor) + 1}.0")
            continue

        if clause.startswith("=") and not clause.startswith("=="):
            clause = f"={clause}"
        clauses.append(_MINOR_ONLY.sub(r"\1.0", clause))

    return ",".join(clauses)


def parse_constraint(expression: str) -> semantic_version.SimpleSpec:
    """Parse a comma separated constraint expression.

    Args:
        expression: e.g. ``"~> 0.12"``, ``">= 0.12.1, < 0.13"`` or ``"1.2.3"``

    Raises:
        InvalidConstraintError: If the expression is malformed
    """
    normalized = normalize_constraint(expression)
    try:
        return semantic_version.SimpleSpec(normalized)
    except ValueError as e:
        raise InvalidConstraintError(f"Invalid version constraint {expression!r}: {e}") from e


def resolve_constraint(expression: str, candidates: Iterable[str]) -> str:
    """Return the highest candidate satisfying ``expression``.

    Pre-release candidates are only considered when the expression itself
    names a pre-release. Candidates that are not valid versions are skipped.

    Args:
        expression: The constraint expression, e.g. ``"~> 0.12"``
        candidates: Version strings, in any order

    Returns:
        The matching candidate exactly as it appeared in ``candidates``

    Raises:
        InvalidConstraintError: If the expression is malformed
        NoMatchingVersionError: If no candidate satisfies the expression
    """
    spec = parse_constraint(expression)
    include_prerelease = re.search(r"\d-[A-Za-z]", expression) is not None

    candidates = list(candidates)
    matching_versions = []
    for candidate in candidates:
        try:
            ver = semantic_version.Version(candidate.strip())
        except ValueError:
            logger.debug("Skipping unparseable version candidate %r", candidate)
            continue

        # Skip pre-releases unless explicitly allowed
        if ver.prerelease and not include_prerelease:
            continue
        if ver in spec:
            matching_versions.append((ver, candidate))

    if not matching_versions:
        raise NoMatchingVersionError(expression, len(candidates))

    # Sort and pick highest
    matching_versions.sort(key=lambda item: item[0], reverse=True)
    best = matching_versions[0][1]
    logger.debug("Constraint %r resolved to %s", expression, best)
    return best
