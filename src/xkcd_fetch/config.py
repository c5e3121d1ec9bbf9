from __future__ import annotations
import argparse, os
from dataclasses import dataclass
from typing import List, Optional

from .models import OutputFormat

VERSION = "0.1.0"
USER_AGENT = f"xkcd-fetch/{VERSION}"
DEFAULT_BASE_URL = "https://xkcd.com"

@dataclass(frozen=True)
class Settings:
    timeout: int = 30
    output: OutputFormat = OutputFormat.TEXT
    num: Optional[int] = None  # None: latest comic
    save: bool = False
    base_url: str = DEFAULT_BASE_URL

def unsigned_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid unsigned integer: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {n}")
    return n

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="xkcd-fetch", description="A utility to grab XKCD comics")
    p.add_argument("-t", "--timeout", type=unsigned_int, default=os.getenv("XKCD_TIMEOUT", "30"),
                   help="request timeout in seconds (default: %(default)s)")
    p.add_argument("-o", "--output", type=OutputFormat, choices=list(OutputFormat),
                   default=os.getenv("XKCD_OUTPUT", "text"),
                   help="print output in a format (default: %(default)s)")
    p.add_argument("-n", "--num", type=unsigned_int, default=None,
                   help="the comic to load (default: latest)")
    p.add_argument("-s", "--save", action="store_true",
                   help="save image file to current directory")
    p.add_argument("--base-url", default=os.getenv("XKCD_BASE_URL", DEFAULT_BASE_URL))
    p.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return p

def parse_args(argv: Optional[List[str]] = None) -> Settings:
    ns = build_parser().parse_args(argv)
    return Settings(
        timeout=ns.timeout,
        output=ns.output,
        num=ns.num,
        save=ns.save,
        base_url=ns.base_url,
    )
