import httpx
import pytest

from meme_relay.shared import Config, load_config
from meme_relay.shared.config import Upstream

MEME_URL = "https://api.imgflip.com/get_memes"
KEY = "12345678901234567890123456789012"  # 32-byte key
IV = "1234567890123456"  # 16-byte IV


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


@pytest.fixture
def config() -> Config:
    base = load_config()
    return base.model_copy(update={"upstream": Upstream(url=MEME_URL)})


@pytest.fixture
def unconfigured() -> Config:
    base = load_config()
    return base.model_copy(update={"upstream": Upstream(url="")})
