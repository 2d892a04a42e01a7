import io
import sys
from unittest.mock import MagicMock

import pytest

from schema_fetch.exceptions import (
    DriverInputFileDoesNotExist,
    HeaderParseError,
    MiscJSONParseError,
    MiscReadError,
)
from schema_fetch.file_io import source_reader
from schema_fetch.models.json_parsing import parse_json
from schema_fetch.models.schema_store import FetchingSchemaStore, SchemaStore


def write_json(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


# ---------------------------------------------------------
# Test: construction
# ---------------------------------------------------------

def test_store_parses_headers_at_construction():
    store = FetchingSchemaStore(["Accept: application/schema+json", "", "X-Token : abc"])

    assert dict(store.headers) == {"Accept": "application/schema+json", "X-Token": "abc"}


def test_store_headers_are_read_only():
    store = FetchingSchemaStore(["Accept: */*"])

    with pytest.raises(TypeError):
        store.headers["Accept"] = "text/plain"


def test_malformed_header_aborts_construction(monkeypatch):
    get = MagicMock()
    monkeypatch.setattr(source_reader.requests, "get", get)

    with pytest.raises(HeaderParseError):
        FetchingSchemaStore(["Accept application/json"])

    get.assert_not_called()


def test_store_satisfies_schema_store_protocol():
    assert isinstance(FetchingSchemaStore(), SchemaStore)


# ---------------------------------------------------------
# Test: fetch
# ---------------------------------------------------------

def test_fetch_parses_local_file(tmp_path):
    address = write_json(tmp_path, "string.json", '{"type":"string"}')

    assert FetchingSchemaStore().fetch(address) == {"type": "string"}


def test_fetch_reports_invalid_json_as_parse_error(tmp_path):
    address = write_json(tmp_path, "broken.json", "{type:}")

    with pytest.raises(MiscJSONParseError) as excinfo:
        FetchingSchemaStore().fetch(address)

    assert not isinstance(excinfo.value, MiscReadError)
    assert excinfo.value.address == address
    assert excinfo.value.description == "JSON Schema"
    assert excinfo.value.kind == "MiscJSONParseError"


def test_fetch_uses_custom_description(tmp_path):
    address = write_json(tmp_path, "broken.json", "[1,")

    with pytest.raises(MiscJSONParseError, match="Syntax error in OpenAPI document"):
        FetchingSchemaStore(description="OpenAPI document").fetch(address)


def test_fetch_missing_address_keeps_exact_string():
    with pytest.raises(DriverInputFileDoesNotExist) as excinfo:
        FetchingSchemaStore().fetch("definitely/not/here.json")

    assert excinfo.value.address == "definitely/not/here.json"


def test_fetch_sends_stored_headers(monkeypatch, fake_response):
    get = MagicMock(return_value=fake_response([b'{"$id": "https://example.com/s"}']))
    monkeypatch.setattr(source_reader.requests, "get", get)
    store = FetchingSchemaStore(["Authorization: Bearer xyz"])

    document = store.fetch("https://example.com/s")

    assert document == {"$id": "https://example.com/s"}
    get.assert_called_once_with(
        "https://example.com/s", headers={"Authorization": "Bearer xyz"}, stream=True
    )


def test_fetch_from_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO('{"type": "integer"}'))

    assert FetchingSchemaStore().fetch("-") == {"type": "integer"}


def test_fetch_does_not_cache(tmp_path):
    path = tmp_path / "changing.json"
    path.write_text('{"type": "string"}', encoding="utf-8")
    store = FetchingSchemaStore()

    first = store.fetch(str(path))
    path.write_text('{"type": "number"}', encoding="utf-8")
    second = store.fetch(str(path))

    assert first == {"type": "string"}
    assert second == {"type": "number"}


# ---------------------------------------------------------
# Test: JSON parsing helper
# ---------------------------------------------------------

def test_parse_json_reports_position():
    with pytest.raises(MiscJSONParseError) as excinfo:
        parse_json('{"a": }', "JSON Schema", "inline")

    assert "line 1" in excinfo.value.message
    assert excinfo.value.context["address"] == "inline"
