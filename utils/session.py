"""
Default HTTP transport: a requests.Session with a timeout and User-Agent.
"""

import logging
import re

import requests


logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "alphavantage-fundamentals/1.0 (+https://www.alphavantage.co)"

_API_KEY_RE = re.compile(r"(apikey=)[^&\s'\"]*", re.IGNORECASE)


def redact_api_key(text: str) -> str:
    """Mask the apikey query value in a URL or an error message."""
    return _API_KEY_RE.sub(r"\1***", text)


class RequestSession:
    """Thin wrapper over requests.Session. No retries."""

    def __init__(self, timeout: int = 30, user_agent: str = DEFAULT_USER_AGENT):
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

    def get(self, url: str, **kwargs) -> requests.Response:
        """GET ``url``; ``timeout`` defaults to the session timeout."""
        kwargs.setdefault("timeout", self.timeout)
        logger.debug(f"GET {redact_api_key(url)}")
        return self.session.get(url, **kwargs)

    def close(self):
        self.session.close()
