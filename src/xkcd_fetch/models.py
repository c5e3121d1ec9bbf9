"""
Typed models for the xkcd JSON API and the output shapes.

Includes:
- ComicResponse: raw record from /info.0.json and /{num}/info.0.json
- ComicPayload: JSON output shape of a Comic
- OutputFormat: the two supported output formats
- parse_comic_response: strict decoder from body text to ComicResponse

"""

from __future__ import annotations
import json
from enum import Enum
from typing import Any, Dict, TypedDict

from .errors import ParseError

# GET /info.0.json, GET /{num}/info.0.json
class ComicResponse(TypedDict):
    month: str
    num: int
    link: str
    year: str
    news: str
    safe_title: str
    transcript: str
    alt: str
    img: str                 # absolute image URL
    title: str
    day: str

# --output json
class ComicPayload(TypedDict):
    title: str
    num: int
    date: str                # "day-month-year"
    desc: str
    img_url: str

class OutputFormat(Enum):
    TEXT = "text"
    JSON = "json"

    def __str__(self) -> str:
        return self.value

STRING_FIELDS = ("month", "link", "year", "news", "safe_title", "transcript", "alt", "img", "title", "day")

def parse_comic_response(text: str) -> ComicResponse:
    """
    Decode a metadata body. Unknown keys are dropped; a missing or mistyped
    field raises ParseError.
    """
    try:
        data: Any = json.loads(text)
    except ValueError as e:
        raise ParseError(f"invalid JSON in comic metadata: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"expected a JSON object, got {type(data).__name__}")

    missing = [k for k in ("num", *STRING_FIELDS) if k not in data]
    if missing:
        raise ParseError(f"missing field(s) in comic metadata: {', '.join(missing)}")

    num = data["num"]
    # bool is an int subclass
    if isinstance(num, bool) or not isinstance(num, int) or num < 0:
        raise ParseError(f"field 'num' must be an unsigned integer, got {num!r}")

    record: Dict[str, Any] = {"num": num}
    for key in STRING_FIELDS:
        value = data[key]
        if not isinstance(value, str):
            raise ParseError(f"field '{key}' must be a string, got {type(value).__name__}")
        # json.loads accepts lone surrogate escapes such as "\ud83d"
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ParseError(f"field '{key}' is not valid unicode: {e}") from e
        record[key] = value
    return record  # type: ignore[return-value]
