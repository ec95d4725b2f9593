"""The two kinds of failure the library reports.

Each variant carries the originating library's exception unmodified so
callers can still inspect the underlying cause.
"""

from dataclasses import dataclass
from enum import StrEnum

import httpx
from pydantic import ValidationError


class ErrorKind(StrEnum):
    """Error variant tags."""

    NETWORK = "network"
    PARSE_JSON = "parse_json"


@dataclass(frozen=True)
class Network:
    """Any failure surfaced by the HTTP transport, including body reads."""

    inner: httpx.HTTPError | httpx.InvalidURL

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.NETWORK

    def __str__(self) -> str:
        return str(self.inner)


@dataclass(frozen=True)
class ParseJson:
    """Any failure surfaced by the JSON decoder."""

    inner: ValidationError

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.PARSE_JSON

    def __str__(self) -> str:
        return str(self.inner)


Error = Network | ParseJson
