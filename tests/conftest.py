import json
from pathlib import Path
from typing import Any, List, Tuple, Union

import pytest

from opensea_v2 import Chain, OpenSeaApiConfig, OpenSeaV2Client

FIXTURES = Path(__file__).parent / "fixtures"

# (status, body) pair or an exception to raise from session.request
Canned = Union[Tuple[int, Union[str, bytes]], BaseException]


def _read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakeResponse:
    """Stands in for aiohttp.ClientResponse inside `async with session.request(...)`"""

    def __init__(self, status: int, body: Union[str, bytes]):
        self.status = status
        self._body = body.encode("utf-8") if isinstance(body, str) else body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> bool:
        return False


class FakeSession:
    """Replays canned responses (or raises canned exceptions) in order"""

    def __init__(self, *responses: Canned):
        self._responses = list(responses)
        self.calls: List[Tuple[str, str, dict]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((method, url, kwargs))
        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return FakeResponse(*response)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment variables out of the config under test."""
    for name in ("OPENSEA_API_KEY", "OPENSEA_CHAIN", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixture_text():
    """Read a response fixture as raw text."""
    return _read_fixture


@pytest.fixture
def fixture_json():
    """Read a response fixture as parsed JSON."""
    return lambda name: json.loads(_read_fixture(name))


@pytest.fixture
def config():
    """Mainnet config with an API key."""
    return OpenSeaApiConfig(api_key="test-key", chain=Chain.ETHEREUM)


@pytest.fixture
def make_client(config):
    """Build a client wired to a FakeSession replaying (status, body) pairs."""

    def _make(*responses: Canned, cfg: OpenSeaApiConfig = None):
        session = FakeSession(*responses)
        return OpenSeaV2Client(cfg or config, session=session), session

    return _make
