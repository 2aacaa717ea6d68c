from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _flag(value: Any) -> bool:
    # Camel schemas carry flags as the strings "true"/"false"
    if isinstance(value, bool):
        return value
    return value == "true"


class ComponentDescriptor(BaseModel):
    """
    Describes one endpoint scheme component from the Camel catalog.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Component scheme, e.g. 'ftp'")
    artifact_id: str = Field(..., alias="artifactId", description="Owning Maven artifact")
    consumer_only: bool = Field(False, alias="consumerOnly")
    producer_only: bool = Field(False, alias="producerOnly")

    @field_validator("consumer_only", "producer_only", mode="before")
    @classmethod
    def _parse_flag(cls, value: Any) -> bool:
        return _flag(value)

    @property
    def general_purpose(self) -> bool:
        """True when the component can be used both as consumer and producer."""
        return not self.consumer_only and not self.producer_only

    @property
    def contradictory(self) -> bool:
        return self.consumer_only and self.producer_only

    def __str__(self) -> str:
        return f"Component: {self.name} (Artifact: {self.artifact_id})"


class EditorContext(BaseModel):
    """What the host editor knows about the element under the caret."""

    element_text: str | None = Field(None, description="Text of the element at the caret")
    parent_tag: str | None = Field(
        None, description="Local name of the parent of the enclosing XML tag"
    )
    camel_present: bool = Field(True, description="Whether the project uses Camel at all")
    consumer_context: bool = Field(
        False, description="Whether only consumer endpoints are accepted at the caret"
    )


class InsertionResult(BaseModel):
    """Outcome of inserting an endpoint prefix into a document."""

    text: str
    caret: int
    inserted: str = ""

    @property
    def changed(self) -> bool:
        return bool(self.inserted)
