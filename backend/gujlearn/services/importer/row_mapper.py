"""Row classifier for the bulk importer."""

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from gujlearn.services.importer.columns import ColumnLayout
from gujlearn.services.importer.csv_parser import ImportRow

logger = logging.getLogger(__name__)


@dataclass
class MappedRow:
    """A row that passed validation, with its grouping key if the kind has one."""

    line_no: int
    record: Any
    title: str | None = None


class RowMapper:
    """Map positional CSV rows to typed records according to a column layout."""

    def __init__(self, layout: ColumnLayout):
        """
        Initialize row mapper.

        Args:
            layout: Column layout for the content kind being imported
        """
        self.layout = layout

    def extract_fields(self, row: ImportRow) -> dict[str, str]:
        """Read every configured field by position; missing trailing cells are ''."""
        return {
            name: row[index] if index < len(row) else ""
            for name, index in self.layout.columns.items()
        }

    def map_row(self, row: ImportRow, line_no: int = 0) -> MappedRow | None:
        """
        Map one data row.

        Rows that are too short or have an empty required field are rejected by
        returning None; nothing is raised.

        Args:
            row: Tokenized cells
            line_no: Line number in the source file, for logging

        Returns:
            Mapped row, or None if the row was rejected
        """
        if len(row) < self.layout.min_cells:
            logger.debug(
                "Skipping short row",
                extra={"line_no": line_no, "cells": len(row), "kind": self.layout.kind.value},
            )
            return None

        fields = self.extract_fields(row)
        missing = [name for name in self.layout.required if not fields.get(name)]
        if missing:
            logger.debug(
                "Skipping row with missing required fields",
                extra={"line_no": line_no, "missing": missing, "kind": self.layout.kind.value},
            )
            return None

        title = None
        if self.layout.groups_by_title:
            title = fields.get("title") or self.layout.default_title

        return MappedRow(line_no=line_no, record=self.layout.record_factory(fields), title=title)

    def map_rows(self, rows: Iterable[tuple[int, ImportRow]]) -> list[MappedRow]:
        """Map all data rows, keeping only accepted ones in file order."""
        mapped = []
        for line_no, row in rows:
            result = self.map_row(row, line_no)
            if result is not None:
                mapped.append(result)
        return mapped
