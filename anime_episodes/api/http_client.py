from typing import Optional

import httpx
from loguru import logger

from ..config import get_config


class HttpClientError(Exception):
    """Raised when a GET request cannot be completed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SafeHttpClient:
    """
    Thin wrapper around a synchronous httpx client.

    This class handles:
    - Browser-like default headers
    - Timeouts from config
    - Turning transport and HTTP status failures into HttpClientError

    There is no retry logic here; a failed request fails once.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize the HTTP client.

        Args:
            timeout: Request timeout in seconds (defaults to config value)
            user_agent: User-Agent header (defaults to config value)
            transport: Optional httpx transport, mainly for tests
        """
        config = get_config()
        self.timeout = timeout if timeout is not None else config.request_timeout

        self.client = httpx.Client(
            timeout=self.timeout,
            follow_redirects=True,
            transport=transport,
            headers={
                'User-Agent': user_agent or config.user_agent,
                'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
                'Accept-Language': 'en-US,en;q=0.5',
            }
        )

        logger.debug(f"Initialized HTTP client (timeout: {self.timeout}s)")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - cleanup the HTTP client."""
        self.close()

    def close(self) -> None:
        self.client.close()

    def safe_get(self, url: str) -> httpx.Response:
        """
        Send a GET request and return the response with its body still unread.

        The caller owns the response and must close it.

        Args:
            url: Absolute URL to fetch

        Returns:
            Streaming httpx response with a 2xx or 3xx status

        Raises:
            HttpClientError: On transport errors or an error status
        """
        try:
            request = self.client.build_request('GET', url)
            response = self.client.send(request, stream=True)

        except (httpx.RequestError, httpx.InvalidURL) as e:
            error_msg = f"Network error while fetching {url}: {str(e)}"
            logger.error(error_msg)
            raise HttpClientError(error_msg) from e

        if response.is_error:
            status_code = response.status_code
            response.close()
            error_msg = f"HTTP error {status_code} while fetching {url}"
            logger.error(error_msg)
            raise HttpClientError(error_msg, status_code=status_code)

        logger.debug(f"GET {url} -> {response.status_code}")
        return response
