"""Tests for the Typer-based CLI interface."""

import json

import pytest
from typer.testing import CliRunner

from camelintent.cli.main import app

runner = CliRunner()

CORE = "Maven: org.apache.camel:camel-core:2.18.0"
FTP = "Maven: org.apache.camel:camel-ftp:2.18.0"


@pytest.fixture
def route_file(tmp_path):
    path = tmp_path / "route.xml"
    path.write_text('<route><from uri=""/><to uri="log:out"/></route>')
    return path


@pytest.fixture
def offset(route_file):
    return route_file.read_text().index('""') + 1


def test_no_subcommand_shows_help():
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "components" in result.output
    assert "insert" in result.output


def test_components_json(catalog_file):
    result = runner.invoke(app, ["components", "--json", "--consumer", "-c", str(catalog_file), "-l", CORE, "-l", FTP])
    assert result.exit_code == 0
    assert json.loads(result.stdout.strip().splitlines()[-1]) == ["ftp", "timer"]

    result = runner.invoke(app, ["components", "--json", "--producer", "-c", str(catalog_file), "-l", CORE, "-l", FTP])
    assert result.exit_code == 0
    assert json.loads(result.stdout.strip().splitlines()[-1]) == ["ftp", "log"]


def test_components_from_libraries_file(tmp_path, catalog_file, libraries):
    libraries_file = tmp_path / "libraries.txt"
    libraries_file.write_text("\n".join(libraries))

    result = runner.invoke(app, ["components", "--json", "-c", str(catalog_file), "-f", str(libraries_file)])
    assert result.exit_code == 0
    assert json.loads(result.stdout.strip().splitlines()[-1]) == ["ftp", "log"]


def test_components_table_uses_bundled_catalog():
    result = runner.invoke(app, ["components", "--consumer", "-l", CORE])
    assert result.exit_code == 0
    assert "timer" in result.output
    assert "components" in result.output


def test_components_empty(catalog_file):
    result = runner.invoke(app, ["components", "-c", str(catalog_file), "-l", "Maven: junit:junit:4.12"])
    assert result.exit_code == 0
    assert "No Camel components" in result.output


def test_components_bad_catalog(tmp_path):
    result = runner.invoke(app, ["components", "-c", str(tmp_path / "missing.json"), "-l", CORE])
    assert result.exit_code == 1
    assert "Catalog Error" in result.output


def test_artifacts(libraries):
    args = ["artifacts"]
    for library in libraries:
        args += ["-l", library]
    result = runner.invoke(app, args)
    assert result.exit_code == 0
    assert "camel-core" in result.output
    assert "camel-ftp" in result.output
    assert "junit" not in result.output


def test_insert_with_choice(route_file, offset, catalog_file):
    result = runner.invoke(
        app,
        ["insert", str(route_file), "--offset", str(offset), "-c", str(catalog_file), "-l", FTP, "--consumer", "--choice", "ftp"],
    )
    assert result.exit_code == 0
    assert '<from uri="ftp:"/>' in result.stdout
    # file untouched without --in-place
    assert 'uri=""' in route_file.read_text()


def test_insert_in_place(route_file, offset, catalog_file):
    result = runner.invoke(
        app,
        ["insert", str(route_file), "-o", str(offset), "-c", str(catalog_file), "-l", CORE, "--consumer", "--choice", "timer", "--in-place"],
    )
    assert result.exit_code == 0
    assert route_file.read_text() == '<route><from uri="timer:"/><to uri="log:out"/></route>'


def test_insert_prompt(route_file, offset, catalog_file):
    result = runner.invoke(
        app,
        ["insert", str(route_file), "-o", str(offset), "-c", str(catalog_file), "-l", CORE, "-l", FTP, "--consumer"],
        input="2\n",
    )
    assert result.exit_code == 0
    assert '<from uri="timer:"/>' in result.output


def test_insert_prompt_cancelled(route_file, offset, catalog_file):
    result = runner.invoke(
        app,
        ["insert", str(route_file), "-o", str(offset), "-c", str(catalog_file), "-l", FTP],
        input="\n",
    )
    assert result.exit_code == 0
    assert "Nothing inserted" in result.output


def test_insert_unknown_choice(route_file, offset, catalog_file):
    result = runner.invoke(
        app,
        ["insert", str(route_file), "-o", str(offset), "-c", str(catalog_file), "-l", FTP, "--choice", "jms"],
    )
    assert result.exit_code == 1
    assert "not one of the offered components" in result.output


def test_insert_offset_out_of_range(route_file, catalog_file):
    result = runner.invoke(
        app,
        ["insert", str(route_file), "-o", "999", "-c", str(catalog_file), "-l", FTP, "--choice", "ftp"],
    )
    assert result.exit_code == 1


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "camelintent version" in result.output


def test_components_skip_undecodable_schema(tmp_path):
    schemas = tmp_path / "schemas"
    schemas.mkdir()
    (schemas / "seda.json").write_text(json.dumps({"component": {"artifactId": "camel-core"}}))
    (schemas / "bad.json").write_bytes(b"\xff\xfe")

    result = runner.invoke(app, ["components", "--json", "-c", str(schemas), "-l", CORE])
    assert result.exit_code == 0
    assert json.loads(result.stdout.strip().splitlines()[-1]) == ["seda"]


def test_log_level_applies_to_library_logs(monkeypatch, catalog_file):
    monkeypatch.setenv("CAMELINTENT_LOG_LEVEL", "ERROR")
    result = runner.invoke(app, ["components", "--json", "-c", str(catalog_file), "-l", CORE])
    assert result.exit_code == 0
    assert "DEBUG" not in result.output
    assert "Loaded" not in result.output

    monkeypatch.setenv("CAMELINTENT_LOG_LEVEL", "DEBUG")
    result = runner.invoke(app, ["components", "--json", "-c", str(catalog_file), "-l", CORE])
    assert result.exit_code == 0
    assert "Resolved" in result.output


def test_undecodable_libraries_file(tmp_path, catalog_file):
    libraries_file = tmp_path / "libraries.txt"
    libraries_file.write_bytes(b"Maven: org.apache.camel:camel-core:2.18.0\n\xff\n")

    result = runner.invoke(app, ["components", "-c", str(catalog_file), "-f", str(libraries_file)])
    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_insert_undecodable_route_file(tmp_path, catalog_file):
    route_file = tmp_path / "route.xml"
    route_file.write_bytes(b'<from uri="\xff"/>')

    result = runner.invoke(app, ["insert", str(route_file), "-o", "11", "-c", str(catalog_file), "-l", FTP, "--choice", "ftp"])
    assert result.exit_code == 1
    assert "Cannot read" in result.output
