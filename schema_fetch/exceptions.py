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

"""Custom exceptions for schema_fetch.

Every error carries a ``kind`` identifier and a ``context`` mapping with the
structured fields callers need for diagnostics.
"""

from typing import Any, Dict


class SchemaFetchError(Exception):
    """Base exception for schema_fetch related errors."""

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    def context(self) -> Dict[str, Any]:
        return {}


class ConfigurationError(SchemaFetchError):
    """Exception raised for invalid configuration."""
    pass


class HeaderParseError(ConfigurationError):
    """Exception raised when an HTTP header line has no ``:`` separator."""

    def __init__(self, header: str):
        self.header = header
        super().__init__(f'Could not parse HTTP header "{header}".')

    @property
    def context(self) -> Dict[str, Any]:
        return {"header": self.header}


class DriverInputFileDoesNotExist(SchemaFetchError):
    """Exception raised when an address is neither stdin, a URL nor an existing path."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Input file {address} does not exist")

    @property
    def context(self) -> Dict[str, Any]:
        return {"address": self.address}


class MiscReadError(SchemaFetchError):
    """Exception raised when a source could not be opened or read."""

    def __init__(self, address: str, message: str):
        self.address = address
        self.message = message
        super().__init__(f"Cannot read from file or URL {address}: {message}")

    @property
    def context(self) -> Dict[str, Any]:
        return {"address": self.address, "message": self.message}


class MiscJSONParseError(SchemaFetchError):
    """Exception raised when fetched text is not valid JSON."""

    def __init__(self, address: str, description: str, message: str):
        self.address = address
        self.description = description
        self.message = message
        super().__init__(f"Syntax error in {description} {address}: {message}")

    @property
    def context(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "description": self.description,
            "message": self.message,
        }
