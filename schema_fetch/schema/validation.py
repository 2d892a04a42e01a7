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

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

import yaml
from jsonschema.exceptions import SchemaError
from jsonschema.validators import Draft202012Validator, validator_for
from referencing import Resource
from referencing.exceptions import Unresolvable
from referencing.jsonschema import DRAFT202012

from ..exceptions import MiscJSONParseError
from ..file_io.source_reader import read_text
from ..models.json_parsing import parse_json
from ..models.schema_registry import address_to_uri, build_registry, find_fetch_error
from ..models.schema_store import SchemaStore

logger = logging.getLogger(__name__)

JsonPointer = str

INSTANCE_DESCRIPTION = "instance document"


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    path: Optional[JsonPointer] = None


def _to_pointer(path) -> JsonPointer:
    return "/" + "/".join(str(p) for p in path) if path else ""


def load_instance(address: str, headers: Optional[Mapping[str, str]] = None) -> Any:
    """Read an instance document from any address.

    JSON is parsed as JSON; only text that is not valid JSON is read as YAML,
    since YAML 1.1 scalars (``1e5``) and tab indentation differ from JSON.
    """
    text = read_text(address, headers)
    try:
        return parse_json(text, INSTANCE_DESCRIPTION, address)
    except MiscJSONParseError:
        logger.debug(f"{address} is not JSON, reading it as YAML")

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MiscJSONParseError(address, INSTANCE_DESCRIPTION, str(exc)) from exc


def _build_validator(schema: Any, base_uri: Optional[str], store: SchemaStore, validator_cls):
    """Create a validator whose root schema lives at ``base_uri``.

    The root is registered under its own URI and entered through a ``$ref``,
    so relative references resolve next to the schema file without touching
    the schema itself.
    """
    registry = build_registry(store)
    if base_uri is None:
        return validator_cls(schema, registry=registry)

    resource = Resource.from_contents(schema, default_specification=DRAFT202012)
    registry = registry.with_resource(base_uri, resource)
    return validator_cls({"$ref": base_uri}, registry=registry)


def validate_document(instance: Any, schema_address: str, store: SchemaStore) -> List[SchemaIssue]:
    """Validate an instance against the schema at ``schema_address``.

    Referenced schemas are fetched lazily through ``store`` as the validator
    follows ``$ref``s.

    Args:
        instance: Parsed instance document
        schema_address: Address of the root schema
        store: Store used for the root schema and every referenced schema

    Returns:
        List of SchemaIssue objects, empty when the instance is valid

    Raises:
        SchemaFetchError: If the root schema cannot be fetched or parsed
    """
    schema = store.fetch(schema_address)
    validator_cls = validator_for(schema, default=Draft202012Validator)

    try:
        validator_cls.check_schema(schema)
    except SchemaError as e:
        return [SchemaIssue(message=f"Invalid schema {schema_address}: {e.message}", path="")]

    validator = _build_validator(schema, address_to_uri(schema_address), store, validator_cls)
    issues: List[SchemaIssue] = []
    try:
        errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.absolute_path])
        for error in errors:
            issues.append(SchemaIssue(message=error.message, path=_to_pointer(error.absolute_path)))
    except Unresolvable as e:
        ref = getattr(e, "ref", None)
        fetch_error = find_fetch_error(e)
        if fetch_error is not None:
            logger.debug(f"Reference {ref} failed with {fetch_error.kind}: {fetch_error.context}")
            message = f"Unresolvable reference {ref}: {fetch_error}"
        else:
            message = f"Unresolvable reference {ref}"
        issues.append(SchemaIssue(message=message, path=""))

    return issues
