# dynamic_value/adapters/http/client.py

"""HTTP collaborator for fetching and posting text

An ``HttpClient`` is created by the caller and handed to whatever needs
network access; nothing in the package keeps a process-wide client.
"""

# Standard library imports
from logging import getLogger
from types import TracebackType
from typing import Self

# Third party imports
import requests

# Local imports
from dynamic_value.adapters.codecs.json_codec import parse_json
from dynamic_value.core.domain.coercion import to_text
from dynamic_value.core.domain.conversion import encode_json
from dynamic_value.core.domain.conversion import from_python
from dynamic_value.core.domain.value import Value
from dynamic_value.core.types.protocols import Headers
from dynamic_value.infrastructure.config import HttpConfig
from dynamic_value.infrastructure.config import get_config

logger = getLogger(__name__)


class HttpClient:
    """Thin wrapper around a ``requests.Session``

    URLs may be given as values; they are coerced with ``to_text``. Transport
    errors from requests propagate unchanged.
    """

    __slots__ = ("config", "session")

    def __init__(
        self, session: requests.Session | None = None, config: HttpConfig | None = None
    ) -> None:
        """Initialize the client

        Args:
            session: Session to send requests through, a new one if None
            config: HTTP settings, the configured defaults if None
        """
        self.config = config or get_config().http
        self.session = session or requests.Session()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _headers(self, headers: Headers | None) -> dict[str, str]:
        merged = {"User-Agent": self.config.user_agent}
        if headers:
            merged.update(headers)
        return merged

    def _send(
        self, method: str, url: Value | str, headers: Headers | None, body: str | None = None
    ) -> str:
        target = to_text(from_python(url))
        logger.debug(f"{method} {target}")
        response = self.session.request(
            method,
            target,
            headers=self._headers(headers),
            data=body.encode("utf-8") if body is not None else None,
            timeout=self.config.timeout,
        )
        if not response.ok:
            logger.warning(f"{method} {target} returned HTTP {response.status_code}")
            if self.config.raise_for_status:
                response.raise_for_status()
        # Bodies are decoded as UTF-8 regardless of the declared charset
        return response.content.decode("utf-8", errors="replace")

    def get(self, url: Value | str, headers: Headers | None = None) -> str:
        """GET a URL and return the response body as text"""
        return self._send("GET", url, headers)

    def post(self, url: Value | str, body: str, headers: Headers | None = None) -> str:
        """POST a text body and return the response body as text"""
        return self._send("POST", url, headers, body)

    def get_json(self, url: Value | str, headers: Headers | None = None) -> Value:
        """GET a URL and parse the response body as JSON

        Raises:
            ParseError: If the body is not valid JSON
        """
        return parse_json(self.get(url, headers))

    def post_json(self, url: Value | str, body: Value, headers: Headers | None = None) -> str:
        """POST a value as compact JSON and return the response body as text"""
        json_headers = {"Content-Type": "application/json"}
        if headers:
            json_headers.update(headers)
        return self.post(url, encode_json(body), json_headers)
