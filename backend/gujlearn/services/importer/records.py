"""Typed records and aggregates produced by the bulk importer.

Each persistable unit (a grouped aggregate, or a standalone vocabulary entry)
knows which collection it belongs to, how to find an existing copy of itself,
and what values to write on insert or update.
"""

import re
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from gujlearn.core.config import settings

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5

_LEADING_INT = re.compile(r"[+-]?\d+")


def parse_difficulty(raw: str | None) -> int:
    """
    Parse a difficulty cell into the 1-5 range.

    Reads the leading integer of the cell (so "3 - medium" is 3). Empty,
    unparsable and zero values fall back to the minimum.
    """
    if not raw:
        return MIN_DIFFICULTY
    match = _LEADING_INT.match(raw.strip())
    if not match:
        return MIN_DIFFICULTY
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, int(match.group())))


@dataclass
class QuizQuestion:
    """One bilingual multiple-choice question."""

    prompt_primary: str
    options: list[str]
    correct_answer: str
    prompt_secondary: str | None = None

    @classmethod
    def from_fields(cls, fields: dict[str, str]) -> "QuizQuestion":
        options = [
            fields.get(name, "")
            for name in ("option_a", "option_b", "option_c", "option_d")
        ]
        return cls(
            prompt_primary=fields["prompt_primary"],
            prompt_secondary=fields.get("prompt_secondary") or None,
            options=[opt for opt in options if opt],
            correct_answer=fields.get("correct_answer", ""),
        )

    def to_document(self) -> dict[str, Any]:
        """Shape stored in ``quizzes.questions`` and read by the quiz player."""
        question = self.prompt_primary
        if self.prompt_secondary:
            question = f"{self.prompt_primary} / {self.prompt_secondary}"
        return {
            "question": question,
            "question_gujarati": self.prompt_primary,
            "question_english": self.prompt_secondary or "",
            "options": list(self.options),
            "correct_answer": self.correct_answer,
            "explanation": "",
        }


@dataclass
class DialogueTurn:
    """One line of a practice conversation."""

    speaker: str
    english: str
    gujarati: str
    transliteration: str = ""

    @classmethod
    def from_fields(cls, fields: dict[str, str]) -> "DialogueTurn":
        return cls(
            speaker=fields["speaker"],
            english=fields["english"],
            gujarati=fields["gujarati"],
            transliteration=fields.get("transliteration", ""),
        )

    def to_document(self) -> dict[str, str]:
        return {
            "speaker": self.speaker,
            "english": self.english,
            "gujarati": self.gujarati,
            "transliteration": self.transliteration,
        }


@dataclass
class VocabularyEntry:
    """A word pair; persisted on its own, without a parent aggregate."""

    source_word: str
    target_word: str
    transliteration: str = ""
    difficulty: int = MIN_DIFFICULTY

    collection = "vocabulary"

    @classmethod
    def from_fields(cls, fields: dict[str, str]) -> "VocabularyEntry":
        return cls(
            source_word=fields["source_word"],
            target_word=fields["target_word"],
            transliteration=fields.get("transliteration", ""),
            difficulty=parse_difficulty(fields.get("difficulty")),
        )

    @property
    def label(self) -> str:
        return f"{self.source_word} / {self.target_word}"

    @property
    def dedup_key(self) -> tuple[str, str]:
        return (self.source_word, self.target_word)

    def lookup_filter(self, owner_id: UUID) -> dict[str, Any]:
        # Word pairs are shared across authors
        return {"english_word": self.source_word, "gujarati_word": self.target_word}

    def insert_values(self, owner_id: UUID) -> dict[str, Any]:
        return {
            "english_word": self.source_word,
            "gujarati_word": self.target_word,
            "gujarati_transliteration": self.transliteration,
            "difficulty_level": self.difficulty,
            "created_by": owner_id,
        }

    def update_values(self) -> dict[str, Any]:
        return {
            "gujarati_transliteration": self.transliteration,
            "difficulty_level": self.difficulty,
        }


@dataclass
class QuizAggregate:
    """All questions sharing a quiz title."""

    title: str
    questions: list[QuizQuestion] = field(default_factory=list)

    collection = "quizzes"

    @property
    def label(self) -> str:
        return self.title

    def __len__(self) -> int:
        return len(self.questions)

    def add(self, question: QuizQuestion) -> None:
        self.questions.append(question)

    def lookup_filter(self, owner_id: UUID) -> dict[str, Any]:
        return {"title": self.title, "created_by": owner_id}

    def insert_values(self, owner_id: UUID) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": (
                f"{self.title} - Imported from CSV with {len(self.questions)} questions"
            ),
            "quiz_type": settings.IMPORT_QUIZ_TYPE,
            "difficulty_level": settings.IMPORT_QUIZ_DIFFICULTY,
            "time_limit": settings.IMPORT_QUIZ_TIME_LIMIT_MINUTES,
            "questions": [q.to_document() for q in self.questions],
            "created_by": owner_id,
        }

    def update_values(self) -> dict[str, Any]:
        return {
            "questions": [q.to_document() for q in self.questions],
            "description": (
                f"Updated {self.title} - Imported from CSV with {len(self.questions)} questions"
            ),
        }


@dataclass
class DialogueAggregate:
    """All turns sharing a dialogue title, in file order."""

    title: str
    turns: list[DialogueTurn] = field(default_factory=list)

    collection = "dialogues"

    @property
    def label(self) -> str:
        return self.title

    def __len__(self) -> int:
        return len(self.turns)

    def add(self, turn: DialogueTurn) -> None:
        self.turns.append(turn)

    def lookup_filter(self, owner_id: UUID) -> dict[str, Any]:
        return {"title": self.title, "created_by": owner_id}

    def insert_values(self, owner_id: UUID) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": f"{self.title} - Imported from CSV with {len(self.turns)} steps",
            "scenario": settings.IMPORT_DIALOGUE_SCENARIO,
            "dialogue_data": [t.to_document() for t in self.turns],
            "difficulty_level": settings.IMPORT_DIALOGUE_DIFFICULTY,
            "created_by": owner_id,
        }

    def update_values(self) -> dict[str, Any]:
        return {
            "dialogue_data": [t.to_document() for t in self.turns],
            "description": (
                f"Updated {self.title} - Imported from CSV with {len(self.turns)} steps"
            ),
        }
