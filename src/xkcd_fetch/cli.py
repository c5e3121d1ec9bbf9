"""
Command-line entrypoint for xkcd-fetch.

- Parses CLI args and env defaults into Settings
- Runs the fetch: metadata, optional image download, output

Reports the first error on stderr and exits 1; Ctrl-C exits 130.
"""
from __future__ import annotations
import sys
from typing import List, Optional

from .config import parse_args
from .errors import XkcdError
from .pipeline import run

def main(argv: Optional[List[str]] = None) -> None:
    settings = parse_args(argv)
    try:
        run(settings)
    except XkcdError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("Aborted.", file=sys.stderr)
        sys.exit(130)
