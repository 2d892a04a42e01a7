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

"""Glue between schema stores and the ``referencing`` registry used by jsonschema.

The registry asks for one URI at a time while it follows ``$ref`` chains; each
request is forwarded to :meth:`SchemaStore.fetch`.
"""

from pathlib import Path
from typing import Callable, Optional
from urllib.parse import unquote, urlparse

from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

from ..exceptions import SchemaFetchError
from ..file_io.source_reader import STDIN_ADDRESS, is_url
from .schema_store import SchemaStore


def address_to_uri(address: str) -> Optional[str]:
    """Return the base URI of an address, or None for stdin."""
    if address == STDIN_ADDRESS:
        return None
    if is_url(address):
        return address
    return Path(address).resolve().as_uri()


def uri_to_address(uri: str) -> str:
    """Convert ``file://`` URIs back to local paths; other URIs are unchanged."""
    parsed = urlparse(uri)
    if parsed.scheme == "file":
        return unquote(parsed.path)
    return uri


def retrieve_from(store: SchemaStore) -> Callable[[str], Resource]:
    """Build a ``retrieve`` callable for :class:`referencing.Registry`."""

    def retrieve(uri: str) -> Resource:
        contents = store.fetch(uri_to_address(uri))
        return Resource.from_contents(contents, default_specification=DRAFT202012)

    return retrieve


def build_registry(store: SchemaStore) -> Registry:
    return Registry(retrieve=retrieve_from(store))


def find_fetch_error(exc: BaseException) -> Optional[SchemaFetchError]:
    """Find the SchemaFetchError behind a referencing/jsonschema error, if any."""
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, SchemaFetchError):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None
