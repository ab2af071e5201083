from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from enum import IntEnum

from . import config
from .mirror_pkg.commands import (
    show_latest_implicit_version,
    show_latest_version,
    show_version,
    show_version_list,
)
from .mirror_pkg.errors import (
    InvalidVersionFormatError,
    MirrorFetchError,
    MirrorVersionError,
    VersionNotFoundError,
)
from .utils.constraints import InvalidConstraintError


class ExitCodes(IntEnum):
    SUCCESS = 0
    NOT_FOUND = 1
    USAGE_ERROR = 2
    FETCH_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mirror-version-check",
        description="Resolve a release version against a mirror's directory listing.",
    )
    parser.add_argument(
        "version",
        nargs="?",
        help="Full version (0.13.1, 0.13.0-rc1), or a minor version (0.13) with --latest-implicit",
    )
    parser.add_argument(
        "--mirror",
        "-m",
        default=config.DEFAULT_MIRROR_URL,
        help=f"Mirror URL serving the version listing (default: {config.DEFAULT_MIRROR_URL})",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--latest", "-u", action="store_true", help="Show the latest stable version")
    mode.add_argument(
        "--latest-implicit",
        "-s",
        action="store_true",
        help="Show the latest patch of the given minor version",
    )
    mode.add_argument("--list-all", "-l", action="store_true", help="List all available versions")

    parser.add_argument(
        "--pre-release",
        "-p",
        dest="include_prerelease",
        action="store_true",
        help="Include pre-release versions",
    )
    parser.add_argument(
        "--sort-numerically",
        action="store_true",
        help="With --latest, pick the highest version instead of the first one listed",
    )
    parser.add_argument("--json", dest="as_json", action="store_true", help="Print JSON output")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="Increase log verbosity")
    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def _dispatch(args: argparse.Namespace) -> None:
    if args.latest:
        await show_latest_version(
            args.mirror, sort_numerically=args.sort_numerically, as_json=args.as_json
        )
    elif args.list_all:
        await show_version_list(args.mirror, args.include_prerelease, as_json=args.as_json)
    elif args.latest_implicit:
        await show_latest_implicit_version(
            args.version, args.mirror, args.include_prerelease, as_json=args.as_json
        )
    else:
        await show_version(args.version, args.mirror, args.include_prerelease, as_json=args.as_json)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if (args.latest_implicit or not (args.latest or args.list_all)) and not args.version:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: a version argument is required", file=sys.stderr)
        return ExitCodes.USAGE_ERROR

    try:
        asyncio.run(_dispatch(args))
    except InvalidVersionFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitCodes.USAGE_ERROR
    except VersionNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitCodes.NOT_FOUND
    except MirrorFetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitCodes.FETCH_ERROR
    except (MirrorVersionError, InvalidConstraintError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitCodes.NOT_FOUND

    return ExitCodes.SUCCESS
