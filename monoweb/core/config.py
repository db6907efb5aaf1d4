import os
from typing import Optional

class Settings:
    # Scraping
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36")

    # Development
    USE_MOCK: bool = os.getenv("USE_MOCK", "0").lower() in ("1", "true", "yes")

    # LLM model, retries and prompt size
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    LLM_MAX_RETRIES: int = int(os.getenv("LLM_MAX_RETRIES", "3"))
    LLM_RETRY_DELAY_SECONDS: float = float(os.getenv("LLM_RETRY_DELAY_SECONDS", "1.0"))
    LLM_MAX_INPUT_CHARS: int = int(os.getenv("LLM_MAX_INPUT_CHARS", "60000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def provider_api_key(self) -> Optional[str]:
        """Read the Gemini API key from the environment at call time."""
        return os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or None

settings = Settings()
