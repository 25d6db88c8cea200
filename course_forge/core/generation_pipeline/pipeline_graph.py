"""LangGraph definition for the generation pipeline.

Builds and compiles a stateful graph that orchestrates:
1. Outline generation
2. Interview question generation
3. Long-form content generation
4. Plain-text diagram generation (conditional)

Dependencies: langgraph, pipeline_schema
System role: Graph orchestration for the generation pipeline
"""

import logging
from typing import Any, Awaitable, Callable

from langgraph.graph import END, StateGraph

from course_forge.core.generation_pipeline.pipeline_schema import GenerationState

logger = logging.getLogger(__name__)

NodeFn = Callable[[GenerationState], Awaitable[dict[str, Any]]]


def _route_after_content(state: GenerationState) -> str:
    """Send the run to the diagram node only when it was requested."""
    return "diagram" if state.get("include_diagram") else END


def create_generation_graph(
    outline_node: NodeFn,
    questions_node: NodeFn,
    content_node: NodeFn,
    diagram_node: NodeFn,
):
    """Create LangGraph for the generation pipeline.

    Builds stateful graph with three sequential nodes followed by an
    optional fourth:
    1. outline: Subject -> Outline
    2. questions: Outline -> QuestionSet
    3. content: Outline -> ContentBundle
    4. diagram: Outline -> plain-text diagram, only if include_diagram

    Args:
        outline_node: Async node producing {"outline": ...}
        questions_node: Async node producing {"question_set": ...}
        content_node: Async node producing {"content_bundle": ...}
        diagram_node: Async node producing {"diagram": ...}

    Returns:
        CompiledGraph: Compiled and runnable graph
    """
    logger.debug(f"{__name__}:create_generation_graph - Building graph")

    graph = StateGraph(GenerationState)

    graph.add_node("outline", outline_node)
    graph.add_node("questions", questions_node)
    graph.add_node("content", content_node)
    graph.add_node("diagram", diagram_node)

    graph.set_entry_point("outline")
    graph.add_edge("outline", "questions")
    graph.add_edge("questions", "content")
    graph.add_conditional_edges(
        "content",
        _route_after_content,
        {"diagram": "diagram", END: END},
    )
    graph.add_edge("diagram", END)

    compiled = graph.compile()
    logger.debug(f"{__name__}:create_generation_graph - Graph compiled")
    return compiled
