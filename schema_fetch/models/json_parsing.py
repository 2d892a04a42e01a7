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

"""JSON text parsing with labelled errors."""

import json
from typing import Any

from ..exceptions import MiscJSONParseError


def parse_json(text: str, description: str, address: str) -> Any:
    """Parse JSON text.

    Args:
        text: JSON text
        description: Human-readable label of the document (e.g. "JSON Schema")
        address: Address the text was read from

    Returns:
        The parsed document

    Raises:
        MiscJSONParseError: If the text is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MiscJSONParseError(
            address, description, f"{e.msg} (line {e.lineno} column {e.colno})"
        ) from e
