"""
camelintent - Camel endpoint component resolver
"""

from camelintent.catalog import (
    ComponentCatalog,
    JsonSchemaCatalog,
    MappingCatalog,
    load_bundled_catalog,
    load_catalog,
    parse_component_schema,
)
from camelintent.dependencies import LibraryNameParser, extract_artifact_ids
from camelintent.errors import (
    CamelIntentError,
    CatalogLoadError,
    CatalogLookupFailure,
    InvalidArtifactName,
    InvalidCaret,
    InvalidSelection,
)
from camelintent.intention import AddEndpointIntention, ComponentChooser
from camelintent.models import ComponentDescriptor, EditorContext, InsertionResult
from camelintent.resolver import ComponentCatalogResolver, resolve

__version__ = "0.1.0"
__all__ = [
    "AddEndpointIntention",
    "CamelIntentError",
    "CatalogLoadError",
    "CatalogLookupFailure",
    "ComponentCatalog",
    "ComponentCatalogResolver",
    "ComponentChooser",
    "ComponentDescriptor",
    "EditorContext",
    "InsertionResult",
    "InvalidArtifactName",
    "InvalidCaret",
    "InvalidSelection",
    "JsonSchemaCatalog",
    "LibraryNameParser",
    "MappingCatalog",
    "extract_artifact_ids",
    "load_bundled_catalog",
    "load_catalog",
    "parse_component_schema",
    "resolve",
]
