"""End-to-end tests for the content importer."""

from typing import Any

import pytest
from sqlalchemy.orm import Session

from gujlearn.models.content import Dialogue, Quiz, VocabularyWord
from gujlearn.services.importer import (
    ContentImporter,
    ContentKind,
    EmptyInputError,
    SQLAlchemyContentStore,
    import_content,
)
from tests.helpers.seed import (
    DIALOGUE_HEADER,
    QUIZ_HEADER,
    VOCABULARY_HEADER,
    csv_text,
    quiz_row,
)


class RecordingStore:
    """Store that records calls and holds nothing."""

    def __init__(self):
        self.calls: list[tuple[str, str]] = []

    def select_one(self, collection: str, filters: dict[str, Any]):
        self.calls.append(("select_one", collection))
        return None

    def insert(self, collection: str, values: dict[str, Any]):
        self.calls.append(("insert", collection))
        return values

    def update_by_id(self, collection: str, record_id: Any, values: dict[str, Any]):
        self.calls.append(("update_by_id", collection))
        return values


def test_header_only_input_fails_before_any_store_call(owner_id):
    store = RecordingStore()

    with pytest.raises(EmptyInputError, match="header row and one data row"):
        ContentImporter(store, owner_id).run(QUIZ_HEADER, ContentKind.QUIZ)

    assert store.calls == []


def test_unknown_kind_is_rejected(owner_id):
    with pytest.raises(ValueError):
        ContentImporter(RecordingStore(), owner_id).run(csv_text(QUIZ_HEADER, quiz_row()), "games")


def test_quiz_import_example(db: Session, owner_id):
    result = import_content(
        db, csv_text(QUIZ_HEADER, "Title,Type,Desc,Q1-guj,Q1-eng,A,B,C,D,A"), "quiz", owner_id
    )

    assert (result.created_count, result.updated_count) == (1, 0)
    quiz = db.query(Quiz).one()
    assert quiz.title == "Title"
    assert quiz.questions == [
        {
            "question": "Q1-guj / Q1-eng",
            "question_gujarati": "Q1-guj",
            "question_english": "Q1-eng",
            "options": ["A", "B", "C", "D"],
            "correct_answer": "A",
            "explanation": "",
        }
    ]


def test_reimport_updates_instead_of_creating(db: Session, owner_id):
    text = csv_text(
        QUIZ_HEADER,
        quiz_row(title="Colours"),
        quiz_row(title="Colours"),
        quiz_row(title="Numbers"),
    )

    first = import_content(db, text, ContentKind.QUIZ, owner_id)
    second = import_content(db, text, ContentKind.QUIZ, owner_id)

    assert (first.created_count, first.updated_count) == (2, 0)
    assert (second.created_count, second.updated_count) == (0, 2)
    assert db.query(Quiz).count() == 2
    assert second.summary_message() == "0 new quizzes created, 2 existing quizzes updated"


def test_rows_missing_required_fields_are_left_out(db: Session, owner_id):
    text = csv_text(
        QUIZ_HEADER,
        quiz_row(title="Family", primary="માતા", secondary="Mother"),
        quiz_row(title="Family", primary="", secondary="Father"),
        "Family,short,row",
    )

    result = import_content(db, text, ContentKind.QUIZ, owner_id)

    assert result.created_count == 1
    quiz = db.query(Quiz).one()
    assert [q["question_english"] for q in quiz.questions] == ["Mother"]


def test_quoted_cells_are_unquoted(db: Session, owner_id):
    text = csv_text(QUIZ_HEADER, '"Quoted","mcq","","ગુજ","Eng","A","B","C","D","B"')

    import_content(db, text, ContentKind.QUIZ, owner_id)

    quiz = db.query(Quiz).one()
    assert quiz.title == "Quoted"
    assert quiz.questions[0]["correct_answer"] == "B"


def test_vocabulary_import_and_reimport(db: Session, owner_id):
    text = csv_text(VOCABULARY_HEADER, "water,પાણી,paani,1", "fire,આગ,aag,x", "broken,,")

    first = import_content(db, text, ContentKind.VOCABULARY, owner_id)
    second = import_content(db, text, ContentKind.VOCABULARY, owner_id)

    assert (first.created_count, first.updated_count) == (2, 0)
    assert (second.created_count, second.updated_count) == (0, 2)
    words = {w.english_word: w for w in db.query(VocabularyWord).all()}
    assert set(words) == {"water", "fire"}
    assert words["fire"].difficulty_level == 1
    assert words["water"].gujarati_transliteration == "paani"


def test_dialogue_import_groups_turns(db: Session, owner_id):
    text = csv_text(
        DIALOGUE_HEADER,
        "Greeting,Asha,Hello,નમસ્તે,namaste",
        "Greeting,Ravi,How are you?,કેમ છો?,kem cho?",
        "Farewell,Asha,Goodbye,આવજો,aavjo",
    )

    result = import_content(db, text, ContentKind.DIALOGUE, owner_id)

    assert result.created_count == 2
    greeting = db.query(Dialogue).filter_by(title="Greeting").one()
    assert [turn["english"] for turn in greeting.dialogue_data] == ["Hello", "How are you?"]
    assert result.summary_message() == "2 new dialogues created, 0 existing dialogues updated"


def test_import_with_only_invalid_rows_writes_nothing(db: Session, owner_id):
    result = import_content(db, csv_text(DIALOGUE_HEADER, "a,b", ",,,"), "dialogue", owner_id)

    assert (result.created_count, result.updated_count) == (0, 0)
    assert db.query(Dialogue).count() == 0


def test_import_defaults_follow_settings(db: Session, owner_id, monkeypatch):
    from gujlearn.core.config import settings

    monkeypatch.setattr(settings, "IMPORT_QUIZ_TIME_LIMIT_MINUTES", 30)
    monkeypatch.setattr(settings, "IMPORT_QUIZ_DIFFICULTY", 4)

    ContentImporter(SQLAlchemyContentStore(db), owner_id).run(
        csv_text(QUIZ_HEADER, quiz_row()), ContentKind.QUIZ
    )

    quiz = db.query(Quiz).one()
    assert quiz.time_limit == 30
    assert quiz.difficulty_level == 4


def test_word_pair_repeated_in_one_file_is_created_once(db: Session, owner_id):
    text = csv_text(VOCABULARY_HEADER, "water,પાણી,pani,1", "water,પાણી,paani,2")

    result = import_content(db, text, ContentKind.VOCABULARY, owner_id)

    assert (result.created_count, result.updated_count) == (1, 0)
    word = db.query(VocabularyWord).one()
    assert (word.gujarati_transliteration, word.difficulty_level) == ("paani", 2)
