import os
from collections.abc import Iterator

import pytest

from quotes.config import Config

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_config_cache() -> Iterator[None]:
    Config._cache = None  # noqa: SLF001
    yield
    Config._cache = None  # noqa: SLF001


@pytest.fixture
def config() -> Config:
    return Config(api_url="https://quotes.test/random", request_timeout=5.0)
