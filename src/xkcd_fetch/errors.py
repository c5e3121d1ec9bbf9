"""
Error kinds raised while fetching, saving and printing a comic.

Every step of a run surfaces the first failure it meets as one of these;
the CLI maps them all to a non-zero exit status.
"""
from __future__ import annotations


class XkcdError(Exception):
    """Base class for all errors raised by xkcd_fetch."""


class NetworkError(XkcdError):
    """Connection, timeout, transport or non-2xx status on either request."""


class ParseError(XkcdError):
    """Metadata body is not valid JSON or misses required fields."""


class InvalidUrlError(XkcdError):
    """Image URL cannot be parsed or has no usable file name."""


class FileSystemError(XkcdError):
    """Image file could not be created or written."""


class SerializationError(XkcdError):
    """Comic could not be encoded for output."""
