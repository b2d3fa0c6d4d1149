"""Learning content models: quizzes, vocabulary and dialogues."""

import uuid

from sqlalchemy import Column, DateTime, Index, Integer, String, Text, Uuid
from sqlalchemy.sql import func

from gujlearn.db.base import Base
from gujlearn.db.types import JSONDocument


class Quiz(Base):
    """A quiz whose questions live in a JSON document."""

    __tablename__ = "quizzes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=True)
    quiz_type = Column(String(50), nullable=False)
    difficulty_level = Column(Integer, nullable=True, default=1)
    time_limit = Column(Integer, nullable=True)  # minutes
    # [{question, question_gujarati, question_english, options, correct_answer, explanation}]
    questions = Column(JSONDocument, nullable=False, default=list)
    category_id = Column(Uuid, nullable=True)

    created_by = Column(Uuid, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_quizzes_title_created_by", "title", "created_by"),
    )


class VocabularyWord(Base):
    """A single English/Gujarati word pair."""

    __tablename__ = "vocabulary"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    english_word = Column(String(200), nullable=False)
    gujarati_word = Column(String(200), nullable=False)
    gujarati_transliteration = Column(String(200), nullable=True)
    difficulty_level = Column(Integer, nullable=True, default=1)
    audio_url = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    category_id = Column(Uuid, nullable=True)

    created_by = Column(Uuid, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_vocabulary_word_pair", "english_word", "gujarati_word"),
    )


class Dialogue(Base):
    """A practice conversation made of speaker turns."""

    __tablename__ = "dialogues"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=True)
    scenario = Column(Text, nullable=False)
    # [{speaker, english, gujarati, transliteration}]
    dialogue_data = Column(JSONDocument, nullable=False, default=list)
    difficulty_level = Column(Integer, nullable=True, default=1)

    created_by = Column(Uuid, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_dialogues_title_created_by", "title", "created_by"),
    )
