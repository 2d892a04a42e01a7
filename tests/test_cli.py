import io
import json
import sys

import pytest

from schema_fetch.cli.run_fetch import main


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, restore_root_logging):
    for name in (
        "SCHEMA_FETCH_LOG_LEVEL",
        "SCHEMA_FETCH_PRINT_LEVEL",
        "SCHEMA_FETCH_HTTP_HEADERS",
        "SCHEMA_FETCH_DESCRIPTION",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def person_schema(tmp_path):
    path = tmp_path / "person.json"
    path.write_text(
        json.dumps({"type": "object", "properties": {"age": {"type": "integer"}}}),
        encoding="utf-8",
    )
    return path


def run(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


# ---------------------------------------------------------
# Test: fetch
# ---------------------------------------------------------

def test_fetch_prints_document(person_schema, capsys):
    assert run(["fetch", str(person_schema)]) == 0

    out = capsys.readouterr().out
    assert json.loads(out)["properties"] == {"age": {"type": "integer"}}


def test_fetch_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO('{"type": "string"}'))

    assert run(["fetch", "-", "--indent", "0"]) == 0
    assert json.loads(capsys.readouterr().out) == {"type": "string"}


def test_fetch_missing_address_exits_with_error(tmp_path, capsys):
    assert run(["fetch", str(tmp_path / "absent.json")]) == 1

    assert "DriverInputFileDoesNotExist" in capsys.readouterr().err


def test_fetch_malformed_header_exits_with_error(person_schema, capsys):
    assert run(["fetch", str(person_schema), "-H", "no separator"]) == 1

    assert "HeaderParseError" in capsys.readouterr().err


def test_fetch_invalid_json_exits_with_error(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{type:}", encoding="utf-8")

    assert run(["fetch", str(path)]) == 1

    assert "MiscJSONParseError" in capsys.readouterr().err


# ---------------------------------------------------------
# Test: validate
# ---------------------------------------------------------

def test_validate_valid_instance(person_schema, tmp_path, capsys):
    instance = tmp_path / "ada.yaml"
    instance.write_text("age: 36\n", encoding="utf-8")

    assert run(["validate", str(person_schema), str(instance)]) == 0
    assert "is valid against" in capsys.readouterr().out


def test_validate_invalid_instance_human(person_schema, tmp_path, capsys):
    instance = tmp_path / "ada.json"
    instance.write_text('{"age": "old"}', encoding="utf-8")

    assert run(["validate", str(person_schema), str(instance)]) == 1
    assert "ERROR at /age: 'old' is not of type 'integer'" in capsys.readouterr().out


def test_validate_invalid_instance_json(person_schema, tmp_path, capsys):
    instance = tmp_path / "ada.json"
    instance.write_text('{"age": 1.5}', encoding="utf-8")

    assert run(["validate", str(person_schema), str(instance), "--format", "json"]) == 1

    output = json.loads(capsys.readouterr().out)
    assert output["errors"] == 1
    assert output["issues"][0]["path"] == "/age"


def test_validate_rejects_stdin_twice():
    assert run(["validate", "-", "-"]) == 2


def test_config_file_headers_are_used(person_schema, tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text("http_headers:\n  - 'broken header'\n", encoding="utf-8")

    assert run(["--config", str(config), "fetch", str(person_schema)]) == 1
    assert "HeaderParseError" in capsys.readouterr().err


def test_fetch_debug_logging_keeps_stdout_parseable(person_schema, capsys):
    assert run(["--log-level", "debug", "fetch", str(person_schema)]) == 0

    captured = capsys.readouterr()
    assert json.loads(captured.out)["type"] == "object"
    assert "Fetching JSON Schema" in captured.err
