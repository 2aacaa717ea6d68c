"""
Test Configuration and Fixtures
=============================

This module provides pytest fixtures for testing camelintent.
"""

import json
from pathlib import Path

import pytest

from camelintent.catalog import JsonSchemaCatalog, MappingCatalog
from camelintent.models import ComponentDescriptor


def schema(artifact_id: str, consumer_only: str = "false", producer_only: str = "false") -> dict:
    """Build a minimal Camel component schema document."""
    return {
        "component": {
            "kind": "component",
            "artifactId": artifact_id,
            "consumerOnly": consumer_only,
            "producerOnly": producer_only,
        },
        "properties": {},
    }


@pytest.fixture
def component_schema():
    return schema


@pytest.fixture
def scenario_catalog() -> MappingCatalog:
    """ftp is consumer-only, http producer-only and log general purpose."""
    return MappingCatalog(
        [
            ComponentDescriptor(name="ftp", artifact_id="camel-ftp", consumer_only=True),
            ComponentDescriptor(name="http", artifact_id="camel-http", producer_only=True),
            ComponentDescriptor(name="log", artifact_id="camel-core"),
        ]
    )


@pytest.fixture
def scenario_artifacts() -> frozenset[str]:
    return frozenset({"camel-ftp", "camel-http", "camel-core"})


@pytest.fixture
def schema_catalog() -> JsonSchemaCatalog:
    """Catalog over raw schema text, including broken documents."""
    return JsonSchemaCatalog(
        {
            "timer": json.dumps(schema("camel-core", consumer_only="true")),
            "log": json.dumps(schema("camel-core", producer_only="true")),
            "direct": json.dumps(schema("camel-core")),
            "broken": "{not json",
            "headless": json.dumps({"properties": {}}),
            "weird": json.dumps(schema("camel-core", consumer_only="true", producer_only="true")),
        }
    )


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a small catalog file and return its path."""
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            {
                "ftp": schema("camel-ftp"),
                "timer": schema("camel-core", consumer_only="true"),
                "log": schema("camel-core", producer_only="true"),
                "jetty": schema("camel-jetty9", consumer_only="true"),
            }
        )
    )
    return path


@pytest.fixture
def libraries() -> list[str]:
    return [
        "Maven: org.apache.camel:camel-core:2.18.0",
        "Maven: org.apache.camel:camel-ftp:2.18.0",
        "Maven: junit:junit:4.12",
    ]
