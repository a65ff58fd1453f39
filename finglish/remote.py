"""
Client for the public behnevis.com conversion endpoint.

The endpoint takes the raw Finglish text as a text/plain body and answers
with a JSON object mapping each input word to its Farsi spelling.
"""

from __future__ import annotations

from typing import Optional

import httpx

DEFAULT_API_URL = "https://9mkhzfaym3.execute-api.us-east-1.amazonaws.com/production/convert"
DEFAULT_TIMEOUT = 15.0

# The endpoint is fronted by CORS rules tuned for the behnevis.com web page.
REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0 (X11; Linux x86_64; rv:102.0) Gecko/20100101 Firefox/102.0",
    "Accept": "*/*",
    "Accept-Language": "en-US,en;q=0.5",
    "Content-Type": "text/plain",
    "Origin": "https://behnevis.com",
    "Referer": "https://behnevis.com/",
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "cross-site",
}


class RemoteTransliterationError(Exception):
    """Raised when the remote conversion API cannot produce a result."""
    pass


class RemoteTransliterator:
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            api_url: Conversion endpoint.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (tests inject a MockTransport).
        """
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    def convert(self, finglish: str) -> str:
        """Send text to the endpoint and join the returned values in order."""
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                resp = client.post(
                    self.api_url,
                    content=finglish.encode("utf-8"),
                    headers=REQUEST_HEADERS,
                )
        except httpx.HTTPError as e:
            raise RemoteTransliterationError(f"err sending request: {e}") from e

        if resp.status_code // 100 != 2:
            raise RemoteTransliterationError(
                f"err sending request: unexpected status {resp.status_code}"
            )

        try:
            result = resp.json()
        except ValueError as e:
            raise RemoteTransliterationError(f"err unmarshaling response body: {e}") from e

        if not isinstance(result, dict) or not all(isinstance(v, str) for v in result.values()):
            raise RemoteTransliterationError(
                "err unmarshaling response body: expected an object of strings"
            )

        return "".join(result.values())
