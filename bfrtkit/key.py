"""Key fields of a table."""

from dataclasses import dataclass

from .types import FieldType, TableMatchType


@dataclass(frozen=True)
class TableKey:
    """A key field of a table and how it is matched."""

    id: int
    name: str
    mandatory: bool
    match_type: TableMatchType
    field_type: FieldType
    repeated: bool | None = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data["id"],
            name=data["name"],
            mandatory=data["mandatory"],
            match_type=TableMatchType(data["match_type"]),
            field_type=FieldType.from_dict(data["type"]),
            repeated=data.get("repeated"),
        )