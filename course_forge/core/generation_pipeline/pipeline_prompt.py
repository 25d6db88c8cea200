"""Stage prompt templates for the generation pipeline.

One ChatPromptTemplate (system + human) per LLM stage. Stages 2-4 receive
the serialized Outline as the {outline} variable, so every stage is an
independent call given the previous stage's output.

Supports Langfuse prompt registry integration.

Dependencies: langchain_core.prompts, course_forge.observability.prompt_registry
System role: Prompt builder for the generation pipeline
"""

import json
import logging

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from course_forge.core.generation_pipeline.pipeline_schema import STAGE_SCHEMAS, Outline, PipelineStage
from course_forge.observability.prompt_registry.models import ModelConfig
from course_forge.observability.prompt_registry.registry import PromptRegistry

logger = logging.getLogger(__name__)

ARCHITECT_SYSTEM_PROMPT = """You are an expert educational content architect specializing in creating well-structured learning materials.

Your task is to:
  1. Analyze the given subject matter deeply
  2. Create a logical and comprehensive chapter structure
  3. Break down each chapter into meaningful subtopics
  4. Ensure each chapter and subtopic builds upon previous knowledge
  5. Include both foundational and advanced concepts
  6. Balance theoretical knowledge with practical applications
  7. Consider the learner's progression from basics to mastery
  8. Make chapter and subtopic titles clear, descriptive, and engaging
  9. Maintain consistent naming and formatting conventions"""

OUTLINE_EXAMPLE = json.dumps(
    {
        "title": "Main Subject",
        "topics": [
            {
                "title": "Chapter 1: Introduction to [Topic]",
                "subtopics": [
                    "1.1 Understanding the Basics",
                    "1.2 Historical Context",
                    "1.3 Key Principles",
                ],
            },
            {
                "title": "Chapter 2: Fundamentals of [Topic]",
                "subtopics": [
                    "2.1 Core Concepts",
                    "2.2 Building Blocks",
                    "2.3 Essential Components",
                    "2.4 Best Practices",
                ],
            },
        ],
    },
    indent=2,
)

OUTLINE_PROMPT = ChatPromptTemplate.from_messages([
    ("system", ARCHITECT_SYSTEM_PROMPT),
    (
        "human",
        """Based on this syllabus or topic: "{subject}", create a comprehensive structure for a book or course.

Instructions:
1. Analyze the main subject matter thoroughly
2. Break it down into 4-8 major topics (chapters)
3. For each topic, create 3-6 detailed subtopics
4. Ensure logical flow and progression of concepts
5. Include both theoretical and practical aspects

Example format:
{outline_example}

Make sure each chapter and subtopic title is clear, descriptive, and the progression makes sense for learning.""",
    ),
]).partial(outline_example=OUTLINE_EXAMPLE)

INTERVIEWER_SYSTEM_PROMPT = """You are an expert interviewer specializing in creating comprehensive interview questions for educational content.

Your task is to:
  1. Create 10 interview questions for each subtopic
  2. Ensure each question is clear, concise, and relevant to the subtopic
  3. Make the questions challenging and thought-provoking
  4. Include both theoretical and practical aspects
  5. Use a variety of question types
  6. Ensure the questions are aligned with the learning objectives of the subtopic
  7. Use a mix of easy and difficult questions
  8. Use each subtopic name exactly as it appears in the outline"""

QUESTIONS_PROMPT = ChatPromptTemplate.from_messages([
    ("system", INTERVIEWER_SYSTEM_PROMPT),
    (
        "human",
        """Create 10 interview questions for each subtopic of this outline. Return one group per subtopic, in outline order.

Outline:
{outline}""",
    ),
])

CONTENT_SYSTEM_PROMPT = """You are an expert educational content architect specializing in creating well-structured learning materials.

Create content that is extremely detailed and thorough, and flows logically from basic to advanced concepts.
Include plenty of examples and illustrations, and connect theory to real-world practice.
Make it clear, engaging, and professional.
Cover both fundamentals and edge cases.
Address common misconceptions and provide actionable insights.

Content for each subtopic should be at least 2000 words."""

CONTENT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", CONTENT_SYSTEM_PROMPT),
    (
        "human",
        """Create extremely detailed content for each chapter and its subtopics from this structure:
{outline}

Instructions:
1. Produce exactly one section per chapter and one subtopic entry per subtopic, using the titles from the structure.
2. For each chapter and subtopic, provide:
   - A comprehensive 4-5 paragraph introduction
   - Detailed explanation of key concepts and principles
   - In-depth theoretical background
   - Multiple real-world examples and case studies
   - Step-by-step tutorials or walkthroughs
   - Practical exercises and applications
   - Common pitfalls and how to avoid them
   - Best practices and industry standards
   - Summary of key points
   - Review questions and discussion topics
3. Format the content with a clear hierarchical structure, bullet points for key concepts,
   numbered steps for procedures, code examples where appropriate, and further reading suggestions.""",
    ),
])

DIAGRAM_SYSTEM_PROMPT = """You draw plain-text diagrams of course structures.
Use only basic characters: lines (- | + /), boxes built from those lines, and arrows (-> v).
Return only the diagram, with no explanation and no code fences."""

DIAGRAM_PROMPT = ChatPromptTemplate.from_messages([
    ("system", DIAGRAM_SYSTEM_PROMPT),
    (
        "human",
        """Draw a hierarchical diagram of this course: the title at the top, each chapter below it, and each chapter's subtopics beneath the chapter.

Outline:
{outline}""",
    ),
])

STAGE_PROMPTS: dict[PipelineStage, ChatPromptTemplate] = {
    PipelineStage.OUTLINE: OUTLINE_PROMPT,
    PipelineStage.QUESTIONS: QUESTIONS_PROMPT,
    PipelineStage.CONTENT: CONTENT_PROMPT,
    PipelineStage.DIAGRAM: DIAGRAM_PROMPT,
}

STAGE_PROMPT_NAMES: dict[PipelineStage, str] = {
    stage: f"course-forge-{stage.value}" for stage in STAGE_PROMPTS
}


def serialize_outline(outline: Outline) -> str:
    """Serialize an Outline into the stable JSON embedded in later prompts."""
    return outline.model_dump_json(by_alias=True, indent=2)


def register_stage_prompts(
    model_id: str,
    temperature: float,
    labels: list[str] | None = None,
) -> None:
    """
    Register every stage prompt with Langfuse.

    Args:
        model_id: Model the prompts are tuned for
        temperature: Model temperature
        labels: Optional labels (e.g., ["production", "staging"])
    """
    registry = PromptRegistry()
    if not registry.is_enabled:
        logger.debug("Prompt registry disabled, skipping registration")
        return

    for stage, template in STAGE_PROMPTS.items():
        config = ModelConfig(
            model=model_id,
            temperature=temperature,
            stage=stage.value,
            structured_output=stage in STAGE_SCHEMAS,
        )
        registry.register_prompt(
            name=STAGE_PROMPT_NAMES[stage],
            template=template,
            config=config,
            labels=labels or ["development"],
        )
    logger.info("Registered %d stage prompts", len(STAGE_PROMPTS))


def get_stage_prompt(
    stage: PipelineStage,
    use_registry: bool = False,
    label: str | None = None,
) -> ChatPromptTemplate:
    """
    Get the prompt template for a stage.

    Args:
        stage: Pipeline stage that needs a prompt
        use_registry: Whether to fetch from Langfuse registry
        label: Optional label filter when using registry

    Returns:
        ChatPromptTemplate: Registry version when available, else the local template

    Raises:
        KeyError: If the stage has no prompt (terminal states)
    """
    local = STAGE_PROMPTS[stage]
    if use_registry:
        registry = PromptRegistry()
        if registry.is_enabled:
            prompt = registry.get_langchain_prompt(STAGE_PROMPT_NAMES[stage], label=label)
            if prompt is not None:
                logger.debug("Using prompt from registry: name=%s", STAGE_PROMPT_NAMES[stage])
                if "outline_example" in prompt.input_variables:
                    prompt = prompt.partial(outline_example=OUTLINE_EXAMPLE)
                return prompt
            logger.debug("Prompt not found in registry, using local template")
    return local


def build_stage_messages(
    stage: PipelineStage,
    subject: str | None = None,
    outline: Outline | None = None,
    use_registry: bool = False,
    label: str | None = None,
) -> list[BaseMessage]:
    """
    Build the (system, human) messages for one stage.

    Stage 1 needs the subject; stages 2-4 need the validated Outline.

    Raises:
        ValueError: If the stage's required input is missing
    """
    prompt = get_stage_prompt(stage, use_registry=use_registry, label=label)
    if stage is PipelineStage.OUTLINE:
        if subject is None:
            raise ValueError("subject is required for the outline stage")
        return prompt.format_messages(subject=subject)
    if outline is None:
        raise ValueError(f"outline is required for the {stage.value} stage")
    return prompt.format_messages(outline=serialize_outline(outline))
