"""
Component catalog providers.

A catalog maps component names (endpoint URI schemes) to their descriptors.
The JSON backed catalog reads the per-component schema documents that the
Camel catalog ships, e.g.:

    {"component": {"scheme": "ftp", "artifactId": "camel-ftp",
                   "consumerOnly": "false", "producerOnly": "false", ...},
     "properties": {...}}
"""

import json
from collections.abc import Iterable, Mapping
from importlib import resources
from pathlib import Path
from typing import Protocol, runtime_checkable

from loguru import logger
from pydantic import ValidationError

from camelintent.errors import CatalogLoadError, CatalogLookupFailure
from camelintent.models import ComponentDescriptor

BUNDLED_CATALOG = "components.json"


@runtime_checkable
class ComponentCatalog(Protocol):
    """Read-only source of component descriptors."""

    def component_names(self) -> Iterable[str]: ...

    def descriptor(self, name: str) -> ComponentDescriptor: ...


def parse_component_schema(name: str, schema: str | bytes) -> ComponentDescriptor:
    """Build a descriptor from a component's JSON schema text.

    Args:
        name: Component name the schema was registered under
        schema: JSON schema document, raw bytes are decoded as UTF-8

    Returns:
        ComponentDescriptor for the component

    Raises:
        CatalogLookupFailure: If the schema is malformed or the flags contradict
    """
    if isinstance(schema, bytes):
        try:
            schema = schema.decode("utf-8")
        except UnicodeDecodeError as error:
            raise CatalogLookupFailure(name, f"schema is not valid UTF-8: {error}")

    try:
        document = json.loads(schema)
    except (TypeError, ValueError) as error:
        raise CatalogLookupFailure(name, f"invalid JSON schema: {error}")

    component = document.get("component") if isinstance(document, dict) else None
    if not isinstance(component, dict):
        raise CatalogLookupFailure(name, "schema has no 'component' section")

    try:
        descriptor = ComponentDescriptor(
            name=name,
            artifactId=component.get("artifactId"),
            consumerOnly=component.get("consumerOnly", False),
            producerOnly=component.get("producerOnly", False),
        )
    except ValidationError as error:
        raise CatalogLookupFailure(name, f"invalid component section: {error.error_count()} error(s)")

    if descriptor.contradictory:
        raise CatalogLookupFailure(name, "component is marked both consumer-only and producer-only")
    return descriptor


class MappingCatalog:
    """In-memory catalog over ready-made descriptors."""

    def __init__(self, descriptors: Iterable[ComponentDescriptor]) -> None:
        self._descriptors = {descriptor.name: descriptor for descriptor in descriptors}

    def component_names(self) -> list[str]:
        return list(self._descriptors)

    def descriptor(self, name: str) -> ComponentDescriptor:
        try:
            return self._descriptors[name]
        except KeyError:
            raise CatalogLookupFailure(name, "not in catalog")

    def __len__(self) -> int:
        return len(self._descriptors)


class JsonSchemaCatalog:
    """Catalog over raw JSON schema documents keyed by component name.

    Schemas are decoded and parsed when a descriptor is requested, so one
    broken document only affects its own component.
    """

    def __init__(self, schemas: Mapping[str, str | bytes]) -> None:
        self._schemas = dict(schemas)

    @classmethod
    def from_file(cls, path: str | Path) -> "JsonSchemaCatalog":
        """Load a catalog from a JSON object mapping names to schema objects."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = json.load(f)
        except (OSError, ValueError) as error:
            raise CatalogLoadError(f"Failed to load catalog from {path}: {error}")

        if not isinstance(content, dict):
            raise CatalogLoadError(f"Catalog {path} must contain a JSON object")

        logger.info(f"Loaded {len(content)} component schemas from {path}")
        # entries may be schema objects or schema text
        return cls(
            {
                name: schema if isinstance(schema, str) else json.dumps(schema)
                for name, schema in content.items()
            }
        )

    @classmethod
    def from_directory(cls, directory: str | Path) -> "JsonSchemaCatalog":
        """Load a catalog from a directory holding one `<name>.json` per component."""
        directory = Path(directory)
        if not directory.is_dir():
            raise CatalogLoadError(f"Catalog directory {directory} does not exist")

        schemas = {}
        for schema_file in sorted(directory.glob("*.json")):
            try:
                schemas[schema_file.stem] = schema_file.read_bytes()
            except OSError as error:
                raise CatalogLoadError(f"Failed to read {schema_file}: {error}")

        logger.info(f"Loaded {len(schemas)} component schemas from {directory}")
        return cls(schemas)

    @classmethod
    def from_path(cls, path: str | Path) -> "JsonSchemaCatalog":
        path = Path(path)
        if path.is_dir():
            return cls.from_directory(path)
        return cls.from_file(path)

    def component_names(self) -> list[str]:
        return list(self._schemas)

    def component_json_schema(self, name: str) -> str | bytes | None:
        return self._schemas.get(name)

    def descriptor(self, name: str) -> ComponentDescriptor:
        schema = self._schemas.get(name)
        if schema is None:
            raise CatalogLookupFailure(name, "not in catalog")
        return parse_component_schema(name, schema)

    def __len__(self) -> int:
        return len(self._schemas)


def load_bundled_catalog() -> JsonSchemaCatalog:
    """Load the sample catalog shipped with the package."""
    bundled = resources.files("camelintent.data").joinpath(BUNDLED_CATALOG)
    with resources.as_file(bundled) as path:
        return JsonSchemaCatalog.from_file(path)


def load_catalog(path: str | Path | None = None) -> JsonSchemaCatalog:
    """Load the catalog at `path`, or the bundled one when no path is given."""
    if path is None:
        return load_bundled_catalog()
    return JsonSchemaCatalog.from_path(path)
