"""Positional column layouts for each importable content kind.

The CSV templates shown to content authors are positional: the header row is
ignored and every field is read from a fixed column index. This table is the
single place those positions are defined, so adding a content kind means adding
an entry here rather than a new parsing path.
"""

from dataclasses import dataclass
from enum import Enum as PyEnum
from typing import Any, Callable

from gujlearn.services.importer.records import (
    DialogueAggregate,
    DialogueTurn,
    QuizAggregate,
    QuizQuestion,
    VocabularyEntry,
)


class ContentKind(str, PyEnum):
    """Content kinds accepted by the bulk importer."""

    QUIZ = "quiz"
    VOCABULARY = "vocabulary"
    DIALOGUE = "dialogue"


@dataclass(frozen=True)
class ColumnLayout:
    """Column contract for one content kind."""

    kind: ContentKind
    columns: dict[str, int]  # field name -> 0-based column index
    min_cells: int
    required: tuple[str, ...]
    headers: tuple[str, ...]  # template header labels, in column order
    record_factory: Callable[[dict[str, str]], Any]
    aggregate_factory: Callable[[str], Any] | None = None
    default_title: str | None = None

    @property
    def groups_by_title(self) -> bool:
        """Whether rows are grouped into a parent aggregate keyed by title."""
        return self.aggregate_factory is not None

    def template_header(self) -> str:
        """Comma-separated header line for a downloadable CSV template."""
        return ",".join(self.headers)


COLUMN_LAYOUTS: dict[ContentKind, ColumnLayout] = {
    ContentKind.QUIZ: ColumnLayout(
        kind=ContentKind.QUIZ,
        columns={
            "title": 0,
            "quiz_type": 1,
            "description": 2,
            "prompt_primary": 3,
            "prompt_secondary": 4,
            "option_a": 5,
            "option_b": 6,
            "option_c": 7,
            "option_d": 8,
            "correct_answer": 9,
        },
        min_cells=10,
        required=("prompt_primary", "prompt_secondary"),
        headers=(
            "Quiz Title",
            "Type",
            "Description",
            "Question (Gujarati)",
            "Question (English)",
            "Option A",
            "Option B",
            "Option C",
            "Option D",
            "Correct Answer",
        ),
        record_factory=QuizQuestion.from_fields,
        aggregate_factory=QuizAggregate,
        default_title="Imported Quiz",
    ),
    ContentKind.VOCABULARY: ColumnLayout(
        kind=ContentKind.VOCABULARY,
        columns={
            "source_word": 0,
            "target_word": 1,
            "transliteration": 2,
            "difficulty": 3,
        },
        min_cells=3,
        required=("source_word", "target_word"),
        headers=("English Word", "Gujarati Word", "Transliteration", "Difficulty Level"),
        record_factory=VocabularyEntry.from_fields,
    ),
    ContentKind.DIALOGUE: ColumnLayout(
        kind=ContentKind.DIALOGUE,
        columns={
            "title": 0,
            "speaker": 1,
            "english": 2,
            "gujarati": 3,
            "transliteration": 4,
        },
        min_cells=5,
        required=("speaker", "english", "gujarati"),
        headers=("Dialogue Title", "Speaker", "English Text", "Gujarati Text", "Transliteration"),
        record_factory=DialogueTurn.from_fields,
        aggregate_factory=DialogueAggregate,
        default_title="Imported Dialogue",
    ),
}


def get_layout(kind: ContentKind | str) -> ColumnLayout:
    """
    Look up the column layout for a content kind.

    Raises:
        ValueError: If the kind is unknown
    """
    return COLUMN_LAYOUTS[ContentKind(kind)]
