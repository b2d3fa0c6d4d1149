"""Database models."""

# Import all models here so metadata.create_all sees every table
from gujlearn.models.content import Dialogue, Quiz, VocabularyWord
from gujlearn.models.progress import AppUsageSession, QuizAttempt

__all__ = [
    "Quiz",
    "VocabularyWord",
    "Dialogue",
    "QuizAttempt",
    "AppUsageSession",
]
