"""Import engine for bulk content uploads."""

from gujlearn.services.importer.aggregator import AggregateBuilder
from gujlearn.services.importer.columns import COLUMN_LAYOUTS, ColumnLayout, ContentKind, get_layout
from gujlearn.services.importer.csv_parser import CSVParseError, CSVTokenizer, EmptyInputError
from gujlearn.services.importer.row_mapper import RowMapper
from gujlearn.services.importer.service import ContentImporter, import_content
from gujlearn.services.importer.store import ContentStore, ContentStoreError, SQLAlchemyContentStore
from gujlearn.services.importer.writer import ContentWriter, ImportResult

__all__ = [
    "AggregateBuilder",
    "COLUMN_LAYOUTS",
    "ColumnLayout",
    "ContentKind",
    "get_layout",
    "CSVParseError",
    "CSVTokenizer",
    "EmptyInputError",
    "RowMapper",
    "ContentImporter",
    "import_content",
    "ContentStore",
    "ContentStoreError",
    "SQLAlchemyContentStore",
    "ContentWriter",
    "ImportResult",
]
