"""Upsert coordinator for the bulk importer."""

import logging
from dataclasses import dataclass
from enum import Enum as PyEnum
from typing import Any, Iterable
from uuid import UUID

from gujlearn.services.importer.columns import ContentKind
from gujlearn.services.importer.store import ContentStore, ContentStoreError

logger = logging.getLogger(__name__)


class UpsertOutcome(str, PyEnum):
    CREATED = "created"
    UPDATED = "updated"


_SUMMARY_TEMPLATES = {
    ContentKind.QUIZ: "{created} new quizzes created, {updated} existing quizzes updated",
    ContentKind.VOCABULARY: "{created} new vocabulary words added, {updated} existing words updated",
    ContentKind.DIALOGUE: "{created} new dialogues created, {updated} existing dialogues updated",
}


@dataclass
class ImportResult:
    """Tally of one import run."""

    kind: ContentKind
    created_count: int = 0
    updated_count: int = 0

    def summary_message(self) -> str:
        """User-facing summary shown after an upload."""
        template = _SUMMARY_TEMPLATES.get(
            self.kind, "{created} items created, {updated} items updated"
        )
        return template.format(created=self.created_count, updated=self.updated_count)


class ContentWriter:
    """Create-or-update each unit against the store, one at a time."""

    def __init__(self, store: ContentStore, owner_id: UUID):
        """
        Initialize writer.

        Args:
            store: Content store to read and write
            owner_id: User the imported content belongs to
        """
        self.store = store
        self.owner_id = owner_id

    def upsert(self, unit: Any) -> UpsertOutcome:
        """
        Update the unit's existing record, or insert a new one.

        Raises:
            ContentStoreError: If the lookup or write fails
        """
        existing = self.store.select_one(unit.collection, unit.lookup_filter(self.owner_id))
        if existing is not None:
            self.store.update_by_id(unit.collection, existing["id"], unit.update_values())
            return UpsertOutcome.UPDATED

        self.store.insert(unit.collection, unit.insert_values(self.owner_id))
        return UpsertOutcome.CREATED

    def write(self, units: Iterable[Any], kind: ContentKind) -> ImportResult:
        """
        Persist all units sequentially.

        A store failure skips that unit only; it is logged and not counted.

        Args:
            units: Aggregates or standalone records from the aggregate builder
            kind: Content kind, for the result summary

        Returns:
            Created/updated tally
        """
        result = ImportResult(kind=kind)
        for unit in units:
            try:
                outcome = self.upsert(unit)
            except ContentStoreError as e:
                logger.warning(
                    "Skipping unit after store failure",
                    extra={"collection": unit.collection, "unit": unit.label, "error": str(e)},
                )
                continue

            if outcome is UpsertOutcome.CREATED:
                result.created_count += 1
            else:
                result.updated_count += 1
        return result
