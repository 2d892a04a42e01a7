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

"""Parsing of ``"Name: Value"`` HTTP header lines."""

from typing import Dict, Iterable, Optional

from ..exceptions import HeaderParseError


def parse_headers(http_headers: Optional[Iterable[Optional[str]]]) -> Dict[str, str]:
    """Build a header mapping from ``"Name: Value"`` lines.

    Lines are split on the first ``:`` and both sides are trimmed. Empty lines
    are skipped; a later line with the same name replaces an earlier one.

    Args:
        http_headers: Header lines, or None for no headers

    Returns:
        Mapping from header name to value

    Raises:
        HeaderParseError: If a non-empty line has no ``:`` separator
    """
    headers: Dict[str, str] = {}
    if http_headers is None:
        return headers

    for line in http_headers:
        if not line:
            continue

        name, sep, value = line.partition(":")
        if not sep:
            raise HeaderParseError(line)

        headers[name.strip()] = value.strip()

    return headers
