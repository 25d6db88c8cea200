"""Cross-stage reconciliation.

Matches QuestionSet groups and ContentBundle sections back to the Outline
by normalised name. Mismatches are reported, never corrected: the schemas
do not require the later stages to echo the outline, only the prompts ask
for it.

Dependencies: dataclasses, re, pipeline_schema
System role: Diagnostic check between generation stages
"""

import re
from dataclasses import dataclass

from course_forge.core.generation_pipeline.pipeline_schema import (
    ContentBundle,
    Outline,
    QuestionSet,
)

_NUMBERING = re.compile(r"^\s*(?:chapter\s+)?\d+(?:\.\d+)*(?:[:.)\-]\s*|\s+)", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class ReconciliationIssue:
    """One mismatch between a later stage and the outline."""

    kind: str
    location: str
    name: str

    def __str__(self) -> str:
        return f"{self.kind} at {self.location}: {self.name!r}"


def normalize_name(name: str) -> str:
    """Lowercase, drop leading numbering ("1.2", "Chapter 3:") and collapse whitespace."""
    stripped = _NUMBERING.sub("", name)
    return _WHITESPACE.sub(" ", stripped).strip().lower()


def reconcile_questions(outline: Outline, question_set: QuestionSet) -> list[ReconciliationIssue]:
    """Report outline subtopics without a question group, and groups naming no subtopic."""
    expected = {
        normalize_name(subtopic): subtopic
        for topic in outline.topics
        for subtopic in topic.subtopics
    }
    seen: set[str] = set()
    issues: list[ReconciliationIssue] = []

    for index, group in enumerate(question_set.questions):
        key = normalize_name(group.subtopic)
        if key not in expected:
            issues.append(ReconciliationIssue("unknown_question_group", f"question-{index}", group.subtopic))
        seen.add(key)

    for key, subtopic in expected.items():
        if key not in seen:
            issues.append(ReconciliationIssue("missing_question_group", "questions", subtopic))
    return issues


def reconcile_content(outline: Outline, content_bundle: ContentBundle) -> list[ReconciliationIssue]:
    """Report section count mismatches and subtopics missing from or unknown to each chapter."""
    issues: list[ReconciliationIssue] = []
    sections = content_bundle.sections

    if len(sections) != len(outline.topics):
        issues.append(
            ReconciliationIssue(
                "section_count_mismatch",
                "content",
                f"{len(sections)} sections for {len(outline.topics)} topics",
            )
        )

    for index, (topic, section) in enumerate(zip(outline.topics, sections)):
        if normalize_name(topic.title) != normalize_name(section.chapter_title):
            issues.append(ReconciliationIssue("chapter_title_mismatch", f"chapter-{index}", section.chapter_title))

        expected = {normalize_name(s): s for s in topic.subtopics}
        produced = {normalize_name(s.title): s.title for s in section.subtopics}
        for key, title in produced.items():
            if key not in expected:
                issues.append(ReconciliationIssue("unknown_subtopic", f"chapter-{index}", title))
        for key, subtopic in expected.items():
            if key not in produced:
                issues.append(ReconciliationIssue("missing_subtopic", f"chapter-{index}", subtopic))
    return issues


def reconcile_bundle(
    outline: Outline,
    question_set: QuestionSet,
    content_bundle: ContentBundle,
) -> list[ReconciliationIssue]:
    """All issues for a completed bundle, questions first."""
    return reconcile_questions(outline, question_set) + reconcile_content(outline, content_bundle)
