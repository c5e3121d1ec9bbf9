# xkcd_fetch/http_client.py
from __future__ import annotations
import sys, uuid
from typing import Optional
import httpx

from .errors import NetworkError

class HttpClient:
    """
    - Blocking HTTP client with:
      - optional base_url (absolute URLs bypass it)
      - one httpx timeout for connect/read/write/pool
      - non-2xx fail fast, no retries
      - httpx errors surfaced as NetworkError
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30,
        *,
        default_headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout)
        self.default_headers = dict(default_headers or {})
        self.transport = transport
        self._client: Optional[httpx.Client] = None

    def __enter__(self):
        try:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.default_headers,
                transport=self.transport,
                follow_redirects=True,
            )
        except httpx.InvalidURL as e:
            print(f"[fatal] invalid base URL {self.base_url!r}: {e}", file=sys.stderr)
            raise NetworkError(f"invalid base URL {self.base_url!r}: {e}") from e
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._client is not None:
            self._client.close()
            self._client = None

    def request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """
        Single request, body read eagerly.
        Each request tagged with X-Request-Id for traceability.
        """
        assert self._client is not None
        req_id = kwargs.pop("req_id", str(uuid.uuid4()))
        headers = kwargs.pop("headers", {})
        headers.setdefault("X-Request-Id", req_id)
        kwargs["headers"] = headers

        url = path if "://" in path else self.base_url + path # for logs

        try:
            resp = self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            print(f"[req#{req_id}] [fatal] {method} {url} timed out: {e}", file=sys.stderr)
            raise NetworkError(f"{method} {url} timed out after {self.timeout.read}s") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            print(f"[req#{req_id}] [fatal] {method} {url} failed: {e}", file=sys.stderr)
            raise NetworkError(f"{method} {url} failed: {e}") from e

        status = resp.status_code
        if not (200 <= status < 300):
            print(f"[req#{req_id}] [fatal] {method} {url} returned {status}", file=sys.stderr)
            raise NetworkError(f"{method} {url} returned HTTP {status}")
        return resp

    def get(self, path: str, **kwargs) -> httpx.Response:
        return self.request("GET", path, **kwargs)
