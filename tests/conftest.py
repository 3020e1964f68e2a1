import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Hypothesis configuration for property-based testing
from hypothesis import settings
from tests.helpers.fakes import FakeLyricsService, make_client

# Register Hypothesis profiles
settings.register_profile("fast", max_examples=50, deadline=None)
settings.register_profile("thorough", max_examples=1000, deadline=None)
settings.load_profile("fast")  # Default to fast profile


@pytest.fixture
def service():
    """Fake lyrics service; register responses with add_words / add_response."""
    return FakeLyricsService(invalid_tokens={"expired-token"})


@pytest.fixture
def client(service):
    lyrics_client = make_client(service)
    yield lyrics_client
    lyrics_client.client.close()


@pytest.fixture
def restore_root_logging():
    """Restores root logger handlers after tests that call setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
