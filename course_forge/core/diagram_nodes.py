"""
Diagram node enumeration for a generation result.

Every displayable unit of a GenerationResult (overview, topic, interview
questions, question group, chapter, subtopic) is a node that can be
rendered as a diagram on demand. Each node has a stable string key that
scopes its diagram inside a DiagramMap:

    overview, topic-<i>, interview-questions, question-<i>,
    chapter-<i>, subtopic-<i>-<j>

Indices are 0-based positions in the result's lists, so keys are unique by
construction: 1 + N + 1 + M + K + sum(s_i) nodes for N topics, M question
groups and K chapters with s_i subtopics each.

Dependencies: dataclasses, pipeline_schema, diagram models
System role: Node/key scheme for per-node diagram rendering
"""

from dataclasses import dataclass
from enum import Enum

from course_forge.core.generation_pipeline.pipeline_schema import GenerationResult
from course_forge.models.diagram import DiagramType

OVERVIEW_KEY = "overview"
INTERVIEW_QUESTIONS_KEY = "interview-questions"


class NodeKind(str, Enum):
    OVERVIEW = "overview"
    TOPIC = "topic"
    INTERVIEW_QUESTIONS = "interview-questions"
    QUESTION_GROUP = "question"
    CHAPTER = "chapter"
    SUBTOPIC = "subtopic"


DEFAULT_NODE_DIAGRAM_TYPES: dict[NodeKind, DiagramType] = {
    NodeKind.OVERVIEW: DiagramType.MIND_MAP,
    NodeKind.TOPIC: DiagramType.CONCEPT_MAP,
    NodeKind.INTERVIEW_QUESTIONS: DiagramType.MIND_MAP,
    NodeKind.QUESTION_GROUP: DiagramType.MIND_MAP,
    NodeKind.CHAPTER: DiagramType.FLOWCHART,
    NodeKind.SUBTOPIC: DiagramType.CONCEPT_MAP,
}


@dataclass(frozen=True)
class DiagramNode:
    """A renderable node: its key, kind, title and the prompt text sent to the renderer."""

    key: str
    kind: NodeKind
    title: str
    text: str
    diagram_type: DiagramType


def topic_key(index: int) -> str:
    return f"topic-{index}"


def question_key(index: int) -> str:
    return f"question-{index}"


def chapter_key(index: int) -> str:
    return f"chapter-{index}"


def subtopic_key(chapter_index: int, subtopic_index: int) -> str:
    return f"subtopic-{chapter_index}-{subtopic_index}"


def build_diagram_prompt(title: str, content: str = "", limit: int = 200) -> str:
    """Node title followed by the first ``limit`` characters of its content."""
    excerpt = content[:limit].strip() if limit > 0 else ""
    if not excerpt:
        return title
    return f"{title}: {excerpt}"


def _node(key: str, kind: NodeKind, title: str, content: str, limit: int) -> DiagramNode:
    return DiagramNode(
        key=key,
        kind=kind,
        title=title,
        text=build_diagram_prompt(title, content, limit),
        diagram_type=DEFAULT_NODE_DIAGRAM_TYPES[kind],
    )


def enumerate_diagram_nodes(result: GenerationResult, excerpt_chars: int = 200) -> list[DiagramNode]:
    """
    List every diagrammable node of a result, in display order.

    Args:
        result: Completed generation result
        excerpt_chars: Characters of node content included in the prompt text

    Returns:
        list[DiagramNode]: Nodes with unique keys
    """
    outline = result.outline
    nodes = [
        _node(
            OVERVIEW_KEY,
            NodeKind.OVERVIEW,
            outline.title,
            ", ".join(topic.title for topic in outline.topics),
            excerpt_chars,
        )
    ]

    for i, topic in enumerate(outline.topics):
        nodes.append(
            _node(topic_key(i), NodeKind.TOPIC, topic.title, ", ".join(topic.subtopics), excerpt_chars)
        )

    groups = result.question_set.questions
    nodes.append(
        _node(
            INTERVIEW_QUESTIONS_KEY,
            NodeKind.INTERVIEW_QUESTIONS,
            f"Interview Questions: {outline.title}",
            ", ".join(group.subtopic for group in groups),
            excerpt_chars,
        )
    )
    for i, group in enumerate(groups):
        nodes.append(
            _node(question_key(i), NodeKind.QUESTION_GROUP, group.subtopic, " ".join(group.questions), excerpt_chars)
        )

    for i, section in enumerate(result.content_bundle.sections):
        nodes.append(
            _node(chapter_key(i), NodeKind.CHAPTER, section.chapter_title, section.chapter_content, excerpt_chars)
        )
        for j, subtopic in enumerate(section.subtopics):
            nodes.append(
                _node(subtopic_key(i, j), NodeKind.SUBTOPIC, subtopic.title, subtopic.content, excerpt_chars)
            )

    return nodes
