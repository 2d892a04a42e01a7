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

"""Configuration management for schema_fetch."""

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from .exceptions import ConfigurationError
from .models.schema_store import JSON_SCHEMA_DESCRIPTION, FetchingSchemaStore
from .utils.logging_utils import configure_logging


@dataclass
class FetchConfig:
    """Configuration for fetching schemas and instance documents."""
    log_level: str = "WARNING"
    print_level: str = "WARNING"
    http_headers: List[str] = field(default_factory=list)
    description: str = JSON_SCHEMA_DESCRIPTION

    @classmethod
    def from_env(cls) -> 'FetchConfig':
        """Create configuration from environment variables.

        ``SCHEMA_FETCH_HTTP_HEADERS`` holds one ``"Name: Value"`` line per header.
        """
        raw_headers = os.getenv('SCHEMA_FETCH_HTTP_HEADERS', '')
        return cls(
            log_level=os.getenv('SCHEMA_FETCH_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('SCHEMA_FETCH_PRINT_LEVEL', 'WARNING'),
            http_headers=[line for line in raw_headers.splitlines() if line],
            description=os.getenv('SCHEMA_FETCH_DESCRIPTION', JSON_SCHEMA_DESCRIPTION),
        )

    @classmethod
    def from_file(cls, file_path: Union[str, Path], base: Optional['FetchConfig'] = None) -> 'FetchConfig':
        """Load configuration from a YAML file, overriding ``base`` field by field.

        Raises:
            ConfigurationError: If the file cannot be read, is not a mapping,
                has unknown keys or values of the wrong type
        """
        path = Path(file_path)
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Failed to parse YAML file {path}: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        return (base or cls()).updated(data, source=str(path))

    def updated(self, values: Dict[str, Any], source: str = "configuration") -> 'FetchConfig':
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(map(str, set(values) - known))
        if unknown:
            raise ConfigurationError(f"Unknown keys in {source}: {', '.join(unknown)}")

        headers = values.get('http_headers', self.http_headers)
        if not isinstance(headers, list) or not all(isinstance(h, str) for h in headers):
            raise ConfigurationError(f"'http_headers' in {source} must be a list of strings")

        for key in ('log_level', 'print_level', 'description'):
            if key in values and not isinstance(values[key], str):
                raise ConfigurationError(f"'{key}' in {source} must be a string")

        return dataclasses.replace(self, **{**values, 'http_headers': list(headers)})

    def merged(
        self,
        *,
        log_level: Optional[str] = None,
        http_headers: Optional[Iterable[str]] = None,
    ) -> 'FetchConfig':
        """Overlay command-line values; extra headers are appended."""
        return dataclasses.replace(
            self,
            log_level=log_level or self.log_level,
            http_headers=self.http_headers + list(http_headers or []),
        )

    def set_logging(self, stdout_reserved: bool = False) -> logging.Logger:
        """Setup logging based on configuration.

        Args:
            stdout_reserved: Send every record to stderr because stdout carries
                command output
        """
        configure_logging(
            level=self.log_level,
            stderr_level=self.print_level,
            stdout_reserved=stdout_reserved,
        )
        return logging.getLogger('schema_fetch')

    def create_store(self) -> FetchingSchemaStore:
        return FetchingSchemaStore(self.http_headers, description=self.description)
