"""CSV tokenizer for the bulk importer.

The templates authors fill in are plain comma-separated text. Cells are split on
every comma; quoted cells with embedded commas are not supported and will be
split like any other cell.
"""

from dataclasses import dataclass, field

QUOTE_CHAR = '"'
DEFAULT_ENCODING = "utf-8-sig"  # tolerate the BOM spreadsheet apps prepend

ImportRow = list[str]


class CSVParseError(Exception):
    """CSV content could not be read."""

    pass


class EmptyInputError(CSVParseError):
    """CSV has no data rows after the header."""

    def __init__(self, message: str = "CSV must have at least a header row and one data row"):
        super().__init__(message)


@dataclass
class ParsedCSV:
    """Header cells plus the data rows with their 1-based line numbers."""

    header: ImportRow
    rows: list[tuple[int, ImportRow]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)


def split_cells(line: str) -> ImportRow:
    """Split one line into trimmed cells with surrounding quotes removed."""
    return [cell.strip().strip(QUOTE_CHAR).strip() for cell in line.split(",")]


class CSVTokenizer:
    """Split raw CSV text into header and data rows."""

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        self.encoding = encoding

    def decode(self, file_content: bytes) -> str:
        """
        Decode uploaded file bytes.

        Raises:
            CSVParseError: If the bytes are not valid in the configured encoding
        """
        try:
            return file_content.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise CSVParseError(f"Failed to decode file with encoding {self.encoding}: {e}") from e

    def tokenize(self, text: str) -> ParsedCSV:
        """
        Tokenize CSV text.

        Args:
            text: Raw CSV text; the first line is a header

        Returns:
            Parsed header and data rows (line 1 is the header, data starts at 2)

        Raises:
            EmptyInputError: If there are fewer than two lines
        """
        lines = text.strip().split("\n")
        if len(lines) < 2:
            raise EmptyInputError()

        return ParsedCSV(
            header=split_cells(lines[0]),
            rows=[(line_no, split_cells(line)) for line_no, line in enumerate(lines[1:], start=2)],
        )
