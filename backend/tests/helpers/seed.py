"""Test seed helpers for building CSV input and stored content."""

import uuid
from typing import Any

from sqlalchemy.orm import Session

from gujlearn.models.content import Quiz

QUIZ_HEADER = "Title,Type,Description,Question Gujarati,Question English,A,B,C,D,Correct"
VOCABULARY_HEADER = "English,Gujarati,Transliteration,Difficulty"
DIALOGUE_HEADER = "Title,Speaker,English,Gujarati,Transliteration"


def csv_text(header: str, *rows: str) -> str:
    """Join a header and data rows into CSV text."""
    return "\n".join([header, *rows])


def quiz_row(
    title: str = "Greetings",
    primary: str = "કેમ છો?",
    secondary: str = "How are you?",
    options: tuple[str, str, str, str] = ("Fine", "Bad", "Tired", "Hungry"),
    correct: str = "Fine",
) -> str:
    """Build one quiz CSV row in template column order."""
    return ",".join([title, "mcq", "", primary, secondary, *options, correct])


def create_quiz(
    db: Session,
    owner_id: uuid.UUID,
    title: str = "Numbers",
    questions: list[dict[str, Any]] | None = None,
    time_limit: int | None = 15,
) -> Quiz:
    """
    Create a stored quiz.

    Args:
        db: Database session
        owner_id: Author of the quiz
        title: Quiz title
        questions: Question documents; defaults to two simple questions
        time_limit: Time limit in minutes

    Returns:
        Created Quiz instance
    """
    if questions is None:
        questions = [
            {"question": "એક / One", "options": ["1", "2", "3"], "correct_answer": "1"},
            {"question": "બે / Two", "options": ["1", "2", "3"], "correct_answer": "2"},
        ]
    quiz = Quiz(
        title=title,
        description=f"{title} quiz",
        quiz_type="game",
        difficulty_level=1,
        time_limit=time_limit,
        questions=questions,
        created_by=owner_id,
    )
    db.add(quiz)
    db.commit()
    db.refresh(quiz)
    return quiz
