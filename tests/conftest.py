import pytest
from monoweb.core import config

@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Setup test environment with fast retries and a known API key"""
    # Store original values
    original_use_mock = config.settings.USE_MOCK
    original_delay = config.settings.LLM_RETRY_DELAY_SECONDS
    original_retries = config.settings.LLM_MAX_RETRIES

    # Override settings for tests - real generator path, mocked at the call site
    config.settings.USE_MOCK = False
    config.settings.LLM_RETRY_DELAY_SECONDS = 0
    config.settings.LLM_MAX_RETRIES = 3
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")

    yield

    # Restore original values
    config.settings.USE_MOCK = original_use_mock
    config.settings.LLM_RETRY_DELAY_SECONDS = original_delay
    config.settings.LLM_MAX_RETRIES = original_retries

class FakeClock:
    """Records sleeps instead of waiting"""

    def __init__(self):
        self.sleeps = []

    @property
    def elapsed(self) -> float:
        return sum(self.sleeps)

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)

@pytest.fixture
def fake_clock():
    return FakeClock()
