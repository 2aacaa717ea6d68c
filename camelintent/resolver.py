"""
Component Catalog Resolver.

Finds the Camel components whose artifact is available to the project and
whose role fits the caret position.
"""

from collections.abc import Callable, Iterable, Set

from loguru import logger

from camelintent.catalog import ComponentCatalog
from camelintent.dependencies import LibraryNameParser, extract_artifact_ids
from camelintent.errors import CatalogLookupFailure
from camelintent.models import ComponentDescriptor


def role_matches(descriptor: ComponentDescriptor, consumer_context: bool) -> bool:
    """Check whether a component may be used in the given role.

    General purpose components always match. Otherwise a consumer context
    accepts consumer-only components and a producer context accepts
    producer-only ones. A component flagged as both never matches.
    """
    if descriptor.general_purpose:
        return True
    if consumer_context:
        return descriptor.consumer_only and not descriptor.producer_only
    return descriptor.producer_only and not descriptor.consumer_only


def resolve(
    artifact_ids: Set[str], consumer_context: bool, catalog: ComponentCatalog
) -> list[str]:
    """Return the sorted component names usable at the caret.

    Args:
        artifact_ids: Artifact ids available to the project
        consumer_context: True if only consumer endpoints are accepted
        catalog: Source of component descriptors

    Returns:
        Component names in ascending code point order, possibly empty
    """
    if not artifact_ids:
        return []

    names = []
    for name in catalog.component_names():
        try:
            descriptor = catalog.descriptor(name)
        except CatalogLookupFailure as error:
            logger.warning(f"Skipping component: {error.message}")
            continue

        if descriptor.artifact_id not in artifact_ids:
            continue
        if role_matches(descriptor, consumer_context):
            names.append(name)

    names.sort()
    logger.debug(
        f"Resolved {len(names)} components for {len(artifact_ids)} artifacts "
        f"(consumer_context={consumer_context})"
    )
    return names


class ComponentCatalogResolver:
    """
    Resolver bound to its collaborators.

    `enumerator` returns the library display names of the project, e.g.
    `["Maven: org.apache.camel:camel-ftp:2.18.0"]`.
    """

    def __init__(
        self,
        catalog: ComponentCatalog,
        enumerator: Callable[[], Iterable[str | None]],
        parser: LibraryNameParser | None = None,
    ) -> None:
        self.catalog = catalog
        self.enumerator = enumerator
        self.parser = parser or LibraryNameParser()

    def available_artifacts(self) -> frozenset[str]:
        return extract_artifact_ids(self.enumerator(), self.parser)

    def components(self, consumer_context: bool) -> list[str]:
        return resolve(self.available_artifacts(), consumer_context, self.catalog)
