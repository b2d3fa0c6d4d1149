"""Tests for grouping mapped rows into aggregates."""

from gujlearn.services.importer.aggregator import AggregateBuilder
from gujlearn.services.importer.columns import ContentKind, get_layout
from gujlearn.services.importer.csv_parser import CSVTokenizer
from gujlearn.services.importer.records import DialogueAggregate, QuizAggregate, VocabularyEntry
from gujlearn.services.importer.row_mapper import RowMapper
from tests.helpers.seed import (
    DIALOGUE_HEADER,
    QUIZ_HEADER,
    VOCABULARY_HEADER,
    csv_text,
    quiz_row,
)


def build(kind: ContentKind, text: str) -> list:
    layout = get_layout(kind)
    parsed = CSVTokenizer().tokenize(text)
    return AggregateBuilder(layout).build(RowMapper(layout).map_rows(parsed.rows))


def test_quiz_rows_grouped_by_title_in_first_seen_order():
    text = csv_text(
        QUIZ_HEADER,
        quiz_row(title="Colours", primary="લાલ"),
        quiz_row(title="Animals", primary="કૂતરો"),
        quiz_row(title="Colours", primary="લીલો"),
    )

    aggregates = build(ContentKind.QUIZ, text)

    assert [agg.title for agg in aggregates] == ["Colours", "Animals"]
    assert all(isinstance(agg, QuizAggregate) for agg in aggregates)
    assert [q.prompt_primary for q in aggregates[0].questions] == ["લાલ", "લીલો"]
    assert len(aggregates[1]) == 1


def test_question_count_matches_valid_rows():
    text = csv_text(
        QUIZ_HEADER,
        quiz_row(title="Food"),
        quiz_row(title="Food", primary=""),
        quiz_row(title="Food", secondary=""),
        quiz_row(title="Food"),
    )

    aggregates = build(ContentKind.QUIZ, text)

    assert len(aggregates) == 1
    assert len(aggregates[0].questions) == 2


def test_title_with_only_invalid_rows_produces_no_aggregate():
    text = csv_text(
        QUIZ_HEADER,
        quiz_row(title="Valid"),
        quiz_row(title="Broken", primary=""),
    )

    aggregates = build(ContentKind.QUIZ, text)

    assert [agg.title for agg in aggregates] == ["Valid"]


def test_single_row_example():
    aggregates = build(
        ContentKind.QUIZ, csv_text(QUIZ_HEADER, "Title,Type,Desc,Q1-guj,Q1-eng,A,B,C,D,A")
    )

    assert len(aggregates) == 1
    assert aggregates[0].title == "Title"
    assert len(aggregates[0].questions) == 1
    question = aggregates[0].questions[0]
    assert question.correct_answer == "A"
    assert question.options == ["A", "B", "C", "D"]


def test_dialogue_turns_keep_file_order():
    text = csv_text(
        DIALOGUE_HEADER,
        "Shop,Seller,Hello,નમસ્તે,namaste",
        "Shop,Buyer,How much?,કેટલા?,ketla?",
        "Shop,Seller,Ten rupees,દસ રૂપિયા,das rupiya",
    )

    aggregates = build(ContentKind.DIALOGUE, text)

    assert len(aggregates) == 1
    assert isinstance(aggregates[0], DialogueAggregate)
    assert [t.speaker for t in aggregates[0].turns] == ["Seller", "Buyer", "Seller"]


def test_vocabulary_entries_are_not_grouped():
    text = csv_text(VOCABULARY_HEADER, "water,પાણી,paani,1", "fire,આગ,aag,2")

    units = build(ContentKind.VOCABULARY, text)

    assert [type(u) for u in units] == [VocabularyEntry, VocabularyEntry]
    assert [u.source_word for u in units] == ["water", "fire"]


def test_no_valid_rows_builds_nothing():
    assert build(ContentKind.DIALOGUE, csv_text(DIALOGUE_HEADER, "x,y")) == []


def test_repeated_word_pair_collapses_to_last_values():
    text = csv_text(
        VOCABULARY_HEADER,
        "water,પાણી,pani,1",
        "fire,આગ,aag,2",
        "water,પાણી,paani,3",
    )

    units = build(ContentKind.VOCABULARY, text)

    assert [u.source_word for u in units] == ["water", "fire"]
    assert (units[0].transliteration, units[0].difficulty) == ("paani", 3)
