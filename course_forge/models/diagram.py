"""
Diagram domain models and schemas.

Two visualisation capabilities exist and are kept apart:
- the pipeline's plain-text diagram, an opaque string on GenerationResult
- rendered diagrams returned by the Eraser API, modelled here and collected
  per node in a DiagramMap

Dependencies: pydantic
System role: Diagram API contracts
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from course_forge.core.generation_pipeline.pipeline_schema import GenerationResult


class DiagramType(str, Enum):
    """Diagram styles accepted by the rendering service."""

    CLOUD_ARCHITECTURE = "cloud-architecture-diagram"
    CONCEPT_MAP = "concept-map"
    MIND_MAP = "mind-map"
    FLOWCHART = "flowchart"
    SEQUENCE = "sequence-diagram"
    ENTITY_RELATIONSHIP = "entity-relationship-diagram"
    BPMN = "bpmn-diagram"


DEFAULT_DIAGRAM_TYPE = DiagramType.CLOUD_ARCHITECTURE
DEFAULT_THEME = "light"
DEFAULT_MODE = "standard"


class CamelModel(BaseModel):
    """Base model with camelCase wire aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DiagramSource(CamelModel):
    """Source code of one rendered diagram."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    diagram_type: str | None = None
    code: str | None = None


class DiagramResponse(CamelModel):
    """Rendered diagram as returned by the Eraser API.

    Unknown fields are kept so the service's body survives persistence unchanged.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    image_url: str = Field(description="URL of the rendered image")
    create_eraser_file_url: str | None = Field(
        default=None,
        description="Link that opens the diagram as an editable Eraser file",
    )
    diagrams: list[DiagramSource] = Field(
        default_factory=list,
        description="Underlying diagram source/type pairs",
    )


DiagramMap = dict[str, DiagramResponse]


class DiagramRequest(CamelModel):
    """Request schema for a single diagram render.

    ``text`` is typed loosely so presence/type checks map to a 400 response.
    """

    text: Any = Field(default=None, description="What to diagram")
    diagram_type: str = Field(default=DEFAULT_DIAGRAM_TYPE.value, description="Diagram style")
    theme: str = Field(default=DEFAULT_THEME, description="Rendering theme")
    mode: str = Field(default=DEFAULT_MODE, description="Rendering mode")


class NodeDiagramsRequest(CamelModel):
    """Request schema for rendering diagrams for many result nodes."""

    result: GenerationResult
    keys: list[str] | None = Field(
        default=None,
        description="Node keys to render; every node when omitted",
    )
    theme: str = Field(default=DEFAULT_THEME)
    mode: str = Field(default=DEFAULT_MODE)


class NodeDiagramsResponse(CamelModel):
    """Per-node render outcome: diagrams by key and error messages by key."""

    diagrams: DiagramMap = Field(default_factory=dict)
    failures: dict[str, str] = Field(default_factory=dict)
