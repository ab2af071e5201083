"""Tests for the mirror-version-check command line."""

import json

import httpx
import pytest

from mirror_version_check.cli import ExitCodes, build_parser, main

MIRROR = ["--mirror", "https://mirror.test/terraform"]


@pytest.mark.parametrize(
    "argv,expected_stdout,test_description",
    [
        (["--latest"], "1.5.7\n", "Latest stable"),
        (["--latest-implicit", "1.5"], "1.5.7\n", "Latest patch of a minor"),
        (["--latest-implicit", "1.5", "--pre-release"], "1.5.0-rc2\n", "Latest pre-release of a minor"),
        (["1.4.6"], "1.4.6\n", "Exact version"),
        (["--list-all"], "1.5.7\n1.5.6\n1.4.6\n0.13.7\n0.12.31\n", "List stable versions"),
    ],
)
def test_main_success(patched_mirror_client, capsys, argv, expected_stdout, test_description):
    assert main(argv + MIRROR) == ExitCodes.SUCCESS, f"Failed: {test_description}"
    assert capsys.readouterr().out == expected_stdout, f"Failed: {test_description}"


def test_main_json(patched_mirror_client, capsys):
    assert main(["--latest-implicit", "0.12", "--json"] + MIRROR) == ExitCodes.SUCCESS
    assert json.loads(capsys.readouterr().out) == {
        "mirror_url": "https://mirror.test/terraform",
        "requested": "0.12",
        "version": "0.12.31",
    }


@pytest.mark.parametrize(
    "argv,expected_exit_code,expected_stderr,test_description",
    [
        (["--latest-implicit", "1.5.7"], ExitCodes.USAGE_ERROR, "Invalid version format", "Full version given as minor"),
        (["1.5"], ExitCodes.USAGE_ERROR, "Invalid version format", "Minor given as exact version"),
        (["--latest-implicit", "0.11"], ExitCodes.NOT_FOUND, "Requested version does not exist: '0.11'", "Unknown minor"),
        (["9.9.9"], ExitCodes.NOT_FOUND, "--list-all", "Unknown version with hint"),
    ],
)
def test_main_errors(patched_mirror_client, capsys, argv, expected_exit_code, expected_stderr, test_description):
    assert main(argv + MIRROR) == expected_exit_code, f"Failed: {test_description}"
    assert expected_stderr in capsys.readouterr().err, f"Failed: {test_description}"


def test_main_invalid_minor_does_not_fetch(patched_mirror_client):
    assert main(["--latest-implicit", "a.1"] + MIRROR) == ExitCodes.USAGE_ERROR
    assert patched_mirror_client.requests == []


@pytest.mark.parametrize("argv", [[], ["--latest-implicit"], ["--pre-release"]])
def test_main_requires_version(patched_mirror_client, capsys, argv):
    assert main(argv + MIRROR) == ExitCodes.USAGE_ERROR
    assert "a version argument is required" in capsys.readouterr().err
    assert patched_mirror_client.requests == []


def test_main_fetch_error(patched_mirror_client, capsys):
    patched_mirror_client.status_code = 503
    assert main(["--list-all"] + MIRROR) == ExitCodes.FETCH_ERROR
    assert "HTTP error 503" in capsys.readouterr().err


def test_main_latest_survives_fetch_error(patched_mirror_client, capsys):
    patched_mirror_client.error = httpx.ConnectError("connection refused")
    assert main(["--latest"] + MIRROR) == ExitCodes.SUCCESS
    assert capsys.readouterr().out == "\n"


def test_parser_rejects_conflicting_modes():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--latest", "--list-all"])
