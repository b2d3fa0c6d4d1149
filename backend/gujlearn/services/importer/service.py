"""Bulk content import: tokenize, classify, group, upsert."""

import logging
from uuid import UUID

from sqlalchemy.orm import Session

from gujlearn.services.importer.aggregator import AggregateBuilder
from gujlearn.services.importer.columns import ContentKind, get_layout
from gujlearn.services.importer.csv_parser import CSVTokenizer
from gujlearn.services.importer.row_mapper import RowMapper
from gujlearn.services.importer.store import ContentStore, SQLAlchemyContentStore
from gujlearn.services.importer.writer import ContentWriter, ImportResult

logger = logging.getLogger(__name__)


class ContentImporter:
    """Run one CSV import for one owner."""

    def __init__(
        self,
        store: ContentStore,
        owner_id: UUID,
        tokenizer: CSVTokenizer | None = None,
    ):
        self.store = store
        self.owner_id = owner_id
        self.tokenizer = tokenizer or CSVTokenizer()

    def run(self, text: str, kind: ContentKind | str) -> ImportResult:
        """
        Import CSV text as the given content kind.

        Args:
            text: CSV text with a header line
            kind: Content kind selecting the column layout

        Returns:
            Created/updated tally

        Raises:
            EmptyInputError: If the text has no data rows; nothing is written
            ValueError: If the kind is unknown
        """
        layout = get_layout(kind)
        parsed = self.tokenizer.tokenize(text)

        mapped = RowMapper(layout).map_rows(parsed.rows)
        units = AggregateBuilder(layout).build(mapped)

        logger.info(
            "Starting content import",
            extra={
                "kind": layout.kind.value,
                "owner_id": str(self.owner_id),
                "data_rows": len(parsed),
                "accepted_rows": len(mapped),
                "units": len(units),
            },
        )

        result = ContentWriter(self.store, self.owner_id).write(units, layout.kind)

        logger.info(
            "Content import finished",
            extra={
                "kind": layout.kind.value,
                "owner_id": str(self.owner_id),
                "created_count": result.created_count,
                "updated_count": result.updated_count,
                "skipped_units": len(units) - result.created_count - result.updated_count,
            },
        )
        return result


def import_content(db: Session, text: str, kind: ContentKind | str, owner_id: UUID) -> ImportResult:
    """Import CSV text into the application database."""
    return ContentImporter(SQLAlchemyContentStore(db), owner_id).run(text, kind)
