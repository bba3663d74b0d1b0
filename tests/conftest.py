"""
Test bootstrap:
- Make the helpers package importable as ``helpers``
- Provide a client wired to a scripted transport
"""
import sys
import pathlib

import pytest

TESTS_DIR = pathlib.Path(__file__).parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from helpers import MockTransport  # noqa: E402

from neis_client import ClientConfig, NeisClient  # noqa: E402

TEST_API_KEY = "test-key-123"


@pytest.fixture
def config():
    """Client configuration pointing at a fake base URL."""
    return ClientConfig(api_key=TEST_API_KEY, base_url="https://neis.test")


@pytest.fixture
def make_client(config):
    """Build a NeisClient over a MockTransport replaying ``responses``."""
    def _make(*responses):
        transport = MockTransport(responses)
        return NeisClient(config, transport=transport), transport
    return _make
