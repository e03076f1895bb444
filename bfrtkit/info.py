"""The BF Runtime schema of a loaded program: its tables and learn filters."""

import json
from dataclasses import dataclass, field

from .errors import UnknownLearnFilterError, UnknownTableError, UnknownTableIdError
from .learn_filter import LearnFilter
from .table import BfrtTable


@dataclass
class BfrtInfo:
    """Schema of a program: tables and, optionally, learn filters."""

    tables: list[BfrtTable] = field(default_factory=list)
    learn_filters: list[LearnFilter] | None = None

    @classmethod
    def from_dict(cls, data):
        filters = data.get("learn_filters")
        return cls(
            tables=[BfrtTable.from_dict(t) for t in data["tables"]],
            learn_filters=(
                [LearnFilter.from_dict(f) for f in filters] if filters is not None else None
            ),
        )

    @classmethod
    def from_json(cls, raw):
        """Parse a schema from JSON text or bytes."""
        return cls.from_dict(json.loads(raw))

    def table(self, name):
        """Return the table called ``name`` or ``pipe.<name>``."""
        qualified = f"pipe.{name}"
        for tbl in self.tables:
            if tbl.name in (qualified, name):
                return tbl
        raise UnknownTableError(name)

    def table_by_id(self, table_id):
        """Return the table with the given id."""
        for tbl in self.tables:
            if tbl.id == table_id:
                return tbl
        raise UnknownTableIdError(table_id)

    def add_table(self, table):
        """Append a table to the schema."""
        self.tables.append(table)

    def learn_filter(self, filter_id):
        """Return the learn filter with the given id."""
        for flt in self.learn_filters or ():
            if flt.id == filter_id:
                return flt
        raise UnknownLearnFilterError(filter_id)