"""Group accepted rows into persistable units."""

from typing import Any, Iterable

from gujlearn.services.importer.columns import ColumnLayout
from gujlearn.services.importer.row_mapper import MappedRow


class AggregateBuilder:
    """Build aggregates keyed by title, or pass records through for ungrouped kinds."""

    def __init__(self, layout: ColumnLayout):
        self.layout = layout

    def build(self, mapped_rows: Iterable[MappedRow]) -> list[Any]:
        """
        Build persistable units from mapped rows.

        Keys keep first-seen order, and records keep file order within a key.
        Aggregates that end up with no records are dropped. Standalone records
        that repeat the same key collapse into one.

        Args:
            mapped_rows: Rows accepted by the row mapper

        Returns:
            Aggregates for grouped kinds, otherwise the records themselves
        """
        if not self.layout.groups_by_title:
            # a repeated word pair keeps its first position and its last values
            records: dict[Any, Any] = {}
            for row in mapped_rows:
                records[row.record.dedup_key] = row.record
            return list(records.values())

        # dicts preserve insertion order
        aggregates: dict[str, Any] = {}
        for row in mapped_rows:
            aggregate = aggregates.get(row.title)
            if aggregate is None:
                aggregate = self.layout.aggregate_factory(row.title)
                aggregates[row.title] = aggregate
            aggregate.add(row.record)

        return [agg for agg in aggregates.values() if len(agg) > 0]
