from dataclasses import dataclass
from typing import Optional

@dataclass
class FetchResult:
    url: str
    final_url: str
    status: int
    content_type: str
    body: str

class FetchError(Exception):
    """Upstream fetch failure carrying the HTTP status to report to the client."""

    def __init__(self, status_code: int, error: str, details: Optional[str] = None):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details
