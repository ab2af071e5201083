"""Shared fixtures: a canned mirror index served through httpx.MockTransport."""

import textwrap

import httpx
import pytest

# Newest first, the way release mirrors list their directories
MIRROR_BODY = textwrap.dedent(
    """\
    <!DOCTYPE html>
    <html>
    <body>
      <ul>
        <li><a href="../">../</a></li>
        <li><a href="/terraform/1.6.0-beta1/">terraform_1.6.0-beta1</a></li>
        <li><a href="/terraform/1.5.7/">terraform_1.5.7</a></li>
        <li><a href="/terraform/1.5.6/">terraform_1.5.6</a></li>
        <li><a href="/terraform/1.5.0-rc2/">terraform_1.5.0-rc2</a></li>
        <li><a href="/terraform/1.5.0-alpha20230405/">terraform_1.5.0-alpha20230405</a></li>
        <li><a href="/terraform/1.4.6/">terraform_1.4.6</a></li>
        <li><a href="/terraform/0.13.7/">terraform_0.13.7</a></li>
        <li><a href="/terraform/0.12.31/">terraform_0.12.31</a></li>
      </ul>
    </body>
    </html>
    """
)


class RecordingHandler:
    """MockTransport handler that serves a fixed response and records requests."""

    def __init__(self, status_code: int = 200, text: str = MIRROR_BODY, error: Exception | None = None):
        self.status_code = status_code
        self.text = text
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.text)


@pytest.fixture
def mirror_handler():
    return RecordingHandler()


@pytest.fixture
async def mirror_client(mirror_handler):
    """An httpx AsyncClient whose requests are answered by ``mirror_handler``."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(mirror_handler)) as client:
        yield client


@pytest.fixture
def patched_mirror_client(monkeypatch, mirror_handler):
    """Route clients created by the fetcher itself (as the CLI does) through ``mirror_handler``."""
    from mirror_version_check.mirror_pkg import fetcher

    def create_client(timeout: float = 10.0) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(mirror_handler), timeout=timeout)

    monkeypatch.setattr(fetcher, "create_mirror_client", create_client)
    return mirror_handler
