from __future__ import annotations
import json, sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, TextIO

import httpx

from .api import XkcdAPI
from .config import Settings, USER_AGENT
from .errors import FileSystemError, SerializationError
from .http_client import HttpClient
from .models import ComicPayload, ComicResponse, OutputFormat
from .utils import compose_date, image_filename

@dataclass(frozen=True)
class Comic:
    title: str
    num: int
    date: str
    desc: str
    img_url: str

    def to_payload(self) -> ComicPayload:
        return {
            "title": self.title,
            "num": self.num,
            "date": self.date,
            "desc": self.desc,
            "img_url": self.img_url,
        }

def to_comic(record: ComicResponse) -> Comic:
    """Project the wire record onto the fields shown to the user."""
    return Comic(
        title=record["title"],
        num=record["num"],
        date=compose_date(record["day"], record["month"], record["year"]),
        desc=record["alt"],
        img_url=record["img"],
    )

def render_text(comic: Comic) -> str:
    return "\n".join([
        f"Title: {comic.title}",
        f"Comic No: {comic.num}",
        f"Date: {comic.date}",
        f"Description: {comic.desc}",
        f"Image: {comic.img_url}",
    ])

def render_json(comic: Comic) -> str:
    try:
        return json.dumps(comic.to_payload(), ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise SerializationError(f"cannot encode comic #{comic.num} as JSON: {e}") from e

RENDERERS: Dict[OutputFormat, Callable[[Comic], str]] = {
    OutputFormat.TEXT: render_text,
    OutputFormat.JSON: render_json,
}

def print_comic(comic: Comic, fmt: OutputFormat, out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    out.write(RENDERERS[fmt](comic) + "\n")
    out.flush()

def save_image(comic: Comic, api: XkcdAPI, dest_dir: Optional[Path] = None) -> Path:
    """
    Download the comic image into dest_dir (default: cwd), named after the
    last segment of its URL.
    The file is created before the download starts and is left behind,
    possibly empty or truncated, if a later step fails.
    """
    name = image_filename(comic.img_url)
    path = Path(dest_dir if dest_dir is not None else Path.cwd()) / name
    try:
        fh = path.open("wb")
    except OSError as e:
        raise FileSystemError(f"cannot create {path}: {e}") from e

    try:
        with fh:
            data = api.get_image(comic.img_url)
            fh.write(data)
            fh.flush()
    except OSError as e:
        raise FileSystemError(f"cannot write {path}: {e}") from e

    print(f"[info] saved {len(data)} bytes to {path}", file=sys.stderr)
    return path

def run(
    settings: Settings,
    *,
    transport: Optional[httpx.BaseTransport] = None,
    out: Optional[TextIO] = None,
    dest_dir: Optional[Path] = None,
) -> Comic:
    """
    Fetch one comic end to end:
        1. GET metadata (latest or --num)
        2. Decode and convert to Comic
        3. Optionally download the image
        4. Print in the requested format
    The first error aborts the run.
    """
    headers = {"User-Agent": USER_AGENT}
    with HttpClient(
        base_url=settings.base_url,
        timeout=settings.timeout,
        default_headers=headers,
        transport=transport,
    ) as http:
        record = XkcdAPI(http).get_comic(settings.num)
    comic = to_comic(record)

    if settings.save:
        # independent client for the image, same timeout as the metadata call
        with HttpClient(timeout=settings.timeout, default_headers=headers, transport=transport) as http:
            save_image(comic, XkcdAPI(http), dest_dir)

    print_comic(comic, settings.output, out)
    return comic
