from __future__ import annotations
from typing import Optional
from urllib.parse import urlsplit

from .errors import InvalidUrlError

INFO_FILE = "info.0.json"

def comic_path(num: Optional[int]) -> str:
    """Path of the metadata document; None selects the latest comic."""
    if num is None:
        return f"/{INFO_FILE}"
    return f"/{num}/{INFO_FILE}"

def compose_date(day: str, month: str, year: str) -> str:
    """Join the API's date parts as day-month-year, no calendar validation."""
    return f"{day}-{month}-{year}"

def image_filename(url: str) -> str:
    """
    Last path segment of an absolute image URL, kept percent-encoded.
    Raises InvalidUrlError for relative URLs and for paths that do not end
    in a usable file name.
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidUrlError(f"cannot parse image URL {url!r}: {e}") from e

    if not parts.scheme or not parts.netloc:
        raise InvalidUrlError(f"image URL is not absolute: {url!r}")

    name = parts.path.rsplit("/", 1)[-1]
    if name in ("", ".", ".."):
        raise InvalidUrlError(f"image URL has no file name: {url!r}")
    return name
