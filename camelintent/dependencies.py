"""
Artifact identifier extraction.

Turns library display names, as an IDE lists them on a module classpath, into
bare Maven artifact ids:

    Maven: org.apache.camel:camel-ftp:2.18.0  ->  camel-ftp

Names from other groups or with an unexpected shape are skipped.
"""

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from camelintent.errors import InvalidArtifactName

DEFAULT_GROUP_ID = "org.apache.camel"
DEFAULT_LIBRARY_PREFIX = "Maven"


class LibraryNameParser:
    """Parses `<prefix>: <groupId>:<artifactId>[:<version>...]` library names."""

    def __init__(
        self, group_id: str = DEFAULT_GROUP_ID, prefix: str = DEFAULT_LIBRARY_PREFIX
    ) -> None:
        self.group_id = group_id
        self.prefix = prefix

    def parse(self, library_name: str) -> str:
        """Return the artifact id encoded in a library display name.

        Args:
            library_name: Display name of the library

        Returns:
            The artifact id, e.g. "camel-ftp"

        Raises:
            InvalidArtifactName: If the name does not match the convention
        """
        tokens = [token.strip() for token in library_name.split(":")]
        if len(tokens) < 3:
            raise InvalidArtifactName(library_name, "expected '<prefix>: <group>:<artifact>'")
        prefix, group_id, artifact_id = tokens[:3]
        if prefix != self.prefix:
            raise InvalidArtifactName(library_name, f"prefix is not '{self.prefix}'")
        if group_id != self.group_id:
            raise InvalidArtifactName(library_name, f"group is not '{self.group_id}'")
        if not artifact_id:
            raise InvalidArtifactName(library_name, "empty artifact id")
        return artifact_id


def extract_artifact_ids(
    library_names: Iterable[str | None], parser: LibraryNameParser | None = None
) -> frozenset[str]:
    """Collect the artifact ids of all recognized libraries.

    Args:
        library_names: Library display names, `None` entries allowed
        parser: Parser to use, defaults to the Camel group convention

    Returns:
        Set of artifact ids
    """
    parser = parser or LibraryNameParser()
    artifacts: set[str] = set()
    for library_name in library_names:
        if library_name is None:
            continue
        try:
            artifacts.add(parser.parse(library_name))
        except InvalidArtifactName as error:
            logger.debug(f"Skipping library: {error.message}")
    return frozenset(artifacts)


def read_library_names(path: str | Path) -> list[str]:
    """Read one library name per line, ignoring blank lines and '#' comments."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.strip().startswith("#")]
