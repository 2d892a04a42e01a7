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

"""Schema stores that fetch JSON Schema documents by address."""

import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Protocol, runtime_checkable

from ..file_io.http_headers import parse_headers
from ..file_io.source_reader import read_text
from .json_parsing import parse_json

logger = logging.getLogger(__name__)

JSON_SCHEMA_DESCRIPTION = "JSON Schema"


@runtime_checkable
class SchemaStore(Protocol):
    """Anything that can return the schema document at an address."""

    def fetch(self, address: str) -> Any:
        ...


class FetchingSchemaStore:
    """Schema store reading documents from stdin, URLs or local files.

    Headers are parsed once at construction; a malformed header line aborts
    construction. Fetched documents are not cached.
    """

    def __init__(
        self,
        http_headers: Optional[Iterable[Optional[str]]] = None,
        description: str = JSON_SCHEMA_DESCRIPTION,
    ):
        """Initialize the store.

        Args:
            http_headers: ``"Name: Value"`` lines attached to URL requests
            description: Label used in JSON parse errors

        Raises:
            HeaderParseError: If a header line has no ``:`` separator
        """
        self._headers: Mapping[str, str] = MappingProxyType(parse_headers(http_headers))
        self.description = description

    @property
    def headers(self) -> Mapping[str, str]:
        return self._headers

    def fetch(self, address: str) -> Any:
        """Read and parse the JSON document at ``address``.

        Raises:
            DriverInputFileDoesNotExist: If the address matches no source kind
            MiscReadError: If the source cannot be opened or read
            MiscJSONParseError: If the content is not valid JSON
        """
        logger.debug(f"Fetching {self.description}: {address}")
        text = read_text(address, self._headers)
        return parse_json(text, self.description, address)
