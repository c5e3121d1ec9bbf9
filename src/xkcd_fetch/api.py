"""
API wrapper around the xkcd JSON endpoints.

Provides a typed interface for:
- Fetching a comic's metadata, latest or by number (`get_comic`)
- Fetching the raw bytes of a comic image (`get_image`)

Metadata is decoded strictly into `models.ComicResponse`; a body that is not
a complete comic record raises ParseError after a stderr warning.
"""
from __future__ import annotations
import sys
from typing import Optional

from .errors import ParseError
from .http_client import HttpClient
from .models import ComicResponse, parse_comic_response
from .utils import comic_path

class XkcdAPI:

    def __init__(self, http: HttpClient):
        self.http = http

    def get_comic(self, num: Optional[int] = None) -> ComicResponse:
        resp = self.http.get(comic_path(num), headers={"Accept": "application/json"})
        try:
            return parse_comic_response(resp.text)
        except ParseError:
            label = "latest" if num is None else f"#{num}"
            print(f"[warn] unusable metadata for comic {label}: {resp.text[:200]!r}", file=sys.stderr)
            raise

    def get_image(self, url: str) -> bytes:
        return self.http.get(url).content
