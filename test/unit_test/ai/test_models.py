"""Unit tests for the structured LLM output models."""

import pytest
from pydantic import ValidationError

from skillvouch.ai.models import GeneratedQuestion, GeneratedQuiz, Roadmap


class TestGeneratedQuestion:
    def test_accepts_camel_case_payload(self):
        question = GeneratedQuestion.model_validate(
            {"question": "2 + 2?", "options": ["3", "4"], "correctAnswer": 1, "explanation": "Arithmetic"}
        )

        assert question.correct_answer == 1
        assert question.model_dump(by_alias=True)["correctAnswer"] == 1

    def test_needs_two_options(self):
        with pytest.raises(ValidationError, match="at least two options"):
            GeneratedQuestion(question="?", options=["only"], correct_answer=0)

    @pytest.mark.parametrize("index", [-1, 2, 5])
    def test_answer_index_must_be_inside_options(self, index):
        with pytest.raises(ValidationError, match="outside"):
            GeneratedQuestion(question="?", options=["a", "b"], correct_answer=index)


class TestGeneratedQuiz:
    def test_requires_questions(self):
        with pytest.raises(ValidationError):
            GeneratedQuiz(title="Empty", questions=[])

    def test_invalid_nested_question_rejects_quiz(self):
        with pytest.raises(ValidationError):
            GeneratedQuiz.model_validate(
                {"title": "Q", "questions": [{"question": "?", "options": ["a", "b"], "correctAnswer": 3}]}
            )


def test_roadmap_requires_milestones():
    with pytest.raises(ValidationError):
        Roadmap(skill="Go", milestones=[])
