"""Tests for cross-stage reconciliation."""

import pytest

from course_forge.core.generation_pipeline.pipeline_schema import (
    validate_content,
    validate_outline,
    validate_questions,
)
from course_forge.core.generation_pipeline.reconciliation import (
    ReconciliationIssue,
    normalize_name,
    reconcile_bundle,
    reconcile_content,
    reconcile_questions,
)


class TestNormalizeName:
    """Tests for name normalization."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1.2 Dot Product", "dot product"),
            ("Chapter 3: Matrices", "matrices"),
            ("2) Eigenvalues", "eigenvalues"),
            ("  Vector   Addition ", "vector addition"),
            ("2D Graphics", "2d graphics"),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_name(raw) == expected


class TestReconcile:
    """Tests for bundle reconciliation."""

    def test_consistent_bundle_has_no_issues(self, outline_raw, questions_raw, content_raw) -> None:
        issues = reconcile_bundle(
            validate_outline(outline_raw),
            validate_questions(questions_raw),
            validate_content(content_raw),
        )
        assert issues == []

    def test_numbered_names_still_match(self, outline_raw, questions_raw) -> None:
        questions_raw["questions"][1]["subtopic"] = "1.2 Dot Product"
        assert reconcile_questions(validate_outline(outline_raw), validate_questions(questions_raw)) == []

    def test_missing_and_unknown_question_groups(self, outline_raw, questions_raw) -> None:
        questions_raw["questions"][2]["subtopic"] = "Determinants"

        issues = reconcile_questions(validate_outline(outline_raw), validate_questions(questions_raw))

        assert ReconciliationIssue("unknown_question_group", "question-2", "Determinants") in issues
        assert ReconciliationIssue("missing_question_group", "questions", "Matrix Multiplication") in issues

    def test_section_count_mismatch(self, outline_raw, content_raw) -> None:
        content_raw["sections"] = content_raw["sections"][:1]

        issues = reconcile_content(validate_outline(outline_raw), validate_content(content_raw))

        assert [issue.kind for issue in issues] == ["section_count_mismatch"]

    def test_chapter_and_subtopic_mismatches(self, outline_raw, content_raw) -> None:
        section = content_raw["sections"][0]
        section["chapterTitle"] = "Scalars"
        section["subtopics"][1]["title"] = "Cross Product"

        issues = reconcile_content(validate_outline(outline_raw), validate_content(content_raw))

        kinds = {(issue.kind, issue.location) for issue in issues}
        assert kinds == {
            ("chapter_title_mismatch", "chapter-0"),
            ("unknown_subtopic", "chapter-0"),
            ("missing_subtopic", "chapter-0"),
        }

    def test_issue_string_names_kind_and_location(self) -> None:
        issue = ReconciliationIssue("missing_subtopic", "chapter-1", "Rank")
        assert str(issue) == "missing_subtopic at chapter-1: 'Rank'"
