"""
Add Camel endpoint intention.

The workflow is split in two phases: `candidates` computes which component
names may be inserted, and `apply_selection` performs the text insertion for
the name the user picked. `invoke` chains both through a chooser.
"""

from collections.abc import Sequence
from typing import Protocol

from loguru import logger

from camelintent.errors import InvalidCaret, InvalidSelection
from camelintent.models import EditorContext, InsertionResult
from camelintent.resolver import ComponentCatalogResolver

POLL_ENRICH_TAG = "pollEnrich"


class ComponentChooser(Protocol):
    """Presents component names and returns the chosen one, or None on cancel."""

    def choose(self, names: Sequence[str], title: str, ad_text: str) -> str | None: ...


class AddEndpointIntention:
    text = "Add camel endpoint"
    family_name = "Apache Camel"
    popup_title = "Add Camel Endpoint"

    def __init__(self, resolver: ComponentCatalogResolver) -> None:
        self.resolver = resolver

    def is_available(self, context: EditorContext) -> bool:
        """Check whether an endpoint can be added at the caret.

        Endpoints go into empty string literals or empty XML attribute values.
        Inside `pollEnrich` the endpoint sits on the child expression node, so
        the text there does not matter.
        """
        if not context.camel_present:
            return False
        if context.parent_tag == POLL_ENRICH_TAG:
            return True
        return context.element_text is not None and not context.element_text.strip()

    def candidates(self, context: EditorContext) -> list[str]:
        return self.resolver.components(context.consumer_context)

    @staticmethod
    def ad_text(names: Sequence[str]) -> str:
        return f"{len(names)} components"

    @staticmethod
    def apply_selection(document: str, caret: int, name: str) -> InsertionResult:
        """Insert `<name>:` at the caret and move the caret after it.

        Args:
            document: Current document text
            caret: Caret offset in the document
            name: Chosen component name

        Returns:
            InsertionResult with the new text and caret. Nothing is inserted
            when the caret is at the very start of the document.

        Raises:
            InvalidCaret: If the caret lies past the end of the document
        """
        if caret > len(document):
            raise InvalidCaret(f"Caret {caret} is past the end of the document ({len(document)})")
        if caret <= 0:
            return InsertionResult(text=document, caret=caret)

        inserted = f"{name}:"
        text = document[:caret] + inserted + document[caret:]
        return InsertionResult(text=text, caret=caret + len(inserted), inserted=inserted)

    def invoke(
        self,
        context: EditorContext,
        document: str,
        caret: int,
        chooser: ComponentChooser,
    ) -> InsertionResult | None:
        """Run the whole intention: resolve, let the user choose, insert.

        Returns:
            The insertion result, or None if there was nothing to choose
            from or the user cancelled
        """
        names = self.candidates(context)
        if not names:
            logger.info("No Camel components available at caret")
            return None

        choice = chooser.choose(names, title=self.popup_title, ad_text=self.ad_text(names))
        if choice is None:
            logger.debug("Component selection cancelled")
            return None
        if choice not in names:
            raise InvalidSelection(f"'{choice}' is not one of the offered components")

        return self.apply_selection(document, caret, choice)
