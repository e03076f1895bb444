"""Singleton data fields of a table."""

from dataclasses import dataclass

from .types import FieldType


@dataclass(frozen=True)
class BfrtSingleton:
    """A data field that is not bound to an action."""

    id: int
    name: str
    field_type: FieldType | None = None
    repeated: bool | None = None

    @classmethod
    def from_dict(cls, data):
        raw_type = data.get("type")
        return cls(
            id=data["id"],
            name=data["name"],
            field_type=FieldType.from_dict(raw_type) if raw_type is not None else None,
            repeated=data.get("repeated"),
        )


@dataclass(frozen=True)
class BfrtData:
    """An entry of a table's data list, wrapping a singleton."""

    mandatory: bool
    read_only: bool
    singleton: BfrtSingleton

    @classmethod
    def from_dict(cls, data):
        return cls(
            mandatory=data["mandatory"],
            read_only=data["read_only"],
            singleton=BfrtSingleton.from_dict(data["singleton"]),
        )