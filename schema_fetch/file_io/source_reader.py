# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Uniform text reading from stdin, HTTP(S) URLs and local files.

An address is classified in a fixed order: the stdin sentinel ``-`` first,
then URL syntax, then existence on the local filesystem. Every failure while
opening or draining a source is normalized into :class:`MiscReadError`.
"""

import logging
import os
import re
import sys
from typing import Mapping, Optional, TextIO, Union
from urllib.parse import urlparse

import requests

from ..exceptions import DriverInputFileDoesNotExist, MiscReadError

logger = logging.getLogger(__name__)

STDIN_ADDRESS = "-"
UNKNOWN_ERROR_MESSAGE = "Unknown error"

_CHUNK_SIZE = 64 * 1024
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


class HTTPBodyStream:
    """Readable text view over a streamed ``requests`` response body."""

    def __init__(self, response: requests.Response):
        self._response = response

    @property
    def encoding(self) -> str:
        # Only trust the response encoding when the server declared a charset
        content_type = self._response.headers.get("content-type", "")
        if "charset" in content_type.lower() and self._response.encoding:
            return self._response.encoding
        return "utf-8"

    def read(self) -> str:
        body = b"".join(self._response.iter_content(chunk_size=_CHUNK_SIZE))
        return body.decode(self.encoding)

    def close(self) -> None:
        self._response.close()


class StdinStream:
    """UTF-8 view over standard input; closing it leaves stdin open."""

    def __init__(self, stdin: TextIO):
        self.stdin = stdin

    def read(self) -> str:
        buffer = getattr(self.stdin, "buffer", None)
        if buffer is None:
            return self.stdin.read()
        return buffer.read().decode("utf-8")

    def close(self) -> None:
        pass


Stream = Union[TextIO, HTTPBodyStream, StdinStream]


def is_url(address: str) -> bool:
    """Return True if the address looks like a URL (scheme and authority).

    This is a syntactic check only; a scheme-like string that is not reachable
    over HTTP is still classified as a URL and fails when fetched.
    """
    if not address or any(ch.isspace() for ch in address):
        return False

    try:
        parsed = urlparse(address)
    except ValueError:
        return False

    return bool(parsed.netloc) and bool(_SCHEME_RE.match(parsed.scheme))


def _error_message(exc: BaseException) -> str:
    message = str(exc)
    return message if message else UNKNOWN_ERROR_MESSAGE


def open_stream(address: str, headers: Optional[Mapping[str, str]] = None) -> Stream:
    """Open a readable text stream for the given address.

    Args:
        address: ``-`` for stdin, a URL, or a local file path
        headers: HTTP headers attached to URL requests

    Returns:
        A stream with ``read()`` and ``close()``

    Raises:
        DriverInputFileDoesNotExist: If the address matches no source kind
        MiscReadError: If opening the source fails
    """
    try:
        if address == STDIN_ADDRESS:
            logger.debug("Reading from standard input")
            return StdinStream(sys.stdin)

        if is_url(address):
            logger.debug(f"Fetching URL: {address}")
            response = requests.get(address, headers=dict(headers or {}), stream=True)
            try:
                response.raise_for_status()
            except requests.HTTPError:
                response.close()
                raise
            return HTTPBodyStream(response)

        if os.path.exists(address):
            logger.debug(f"Reading file: {address}")
            return open(address, "r", encoding="utf-8")
    except Exception as exc:
        raise MiscReadError(address, _error_message(exc)) from exc

    raise DriverInputFileDoesNotExist(address)


def read_text(address: str, headers: Optional[Mapping[str, str]] = None) -> str:
    """Read the full text content of an address.

    The stream is drained completely and closed before returning. Standard
    input is drained but left open.

    Raises:
        DriverInputFileDoesNotExist: If the address matches no source kind
        MiscReadError: If opening or reading the source fails
    """
    stream = open_stream(address, headers)
    try:
        return stream.read()
    except Exception as exc:
        raise MiscReadError(address, _error_message(exc)) from exc
    finally:
        stream.close()
