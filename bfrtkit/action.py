"""Actions of a table and the data fields they take."""

from dataclasses import dataclass, field
from enum import Enum

from .errors import UnknownActionDataIdError, UnknownActionDataNameError
from .types import FieldType


class ActionScope(Enum):
    """Where an action may be used."""

    TABLE_AND_DEFAULT = "TableAndDefault"
    DEFAULT_ONLY = "DefaultOnly"


@dataclass(frozen=True)
class ActionData:
    """A parameter of an action."""

    id: int = 0
    name: str = "Unknown name"
    repeated: bool | None = None
    mandatory: bool | None = None
    read_only: bool | None = None
    field_type: FieldType | None = None

    @classmethod
    def from_dict(cls, data):
        raw_type = data.get("type")
        return cls(
            id=data.get("id", 0),
            name=data.get("name", "Unknown name"),
            repeated=data.get("repeated"),
            mandatory=data.get("mandatory"),
            read_only=data.get("read_only"),
            field_type=FieldType.from_dict(raw_type) if raw_type is not None else None,
        )


@dataclass(frozen=True)
class BfrtAction:
    """An action of a table as described by the schema."""

    id: int
    name: str
    action_scope: ActionScope | None = None
    data: tuple[ActionData, ...] | None = field(default=None)

    @classmethod
    def from_dict(cls, data):
        scope = data.get("action_scope")
        params = data.get("data")
        return cls(
            id=data["id"],
            name=data["name"],
            action_scope=ActionScope(scope) if scope is not None else None,
            data=tuple(ActionData.from_dict(p) for p in params) if params is not None else None,
        )

    def action_data_by_id(self, data_id):
        """Return the parameter with the given id."""
        for param in self.data or ():
            if param.id == data_id:
                return param
        raise UnknownActionDataIdError(data_id, self.name)

    def action_data_by_name(self, name):
        """Return the parameter with the given name."""
        for param in self.data or ():
            if param.name == name:
                return param
        raise UnknownActionDataNameError(name, self.name)

    def action_data_type(self, name):
        """Return the field type of the named parameter."""
        param = self.action_data_by_name(name)
        if param.field_type is None:
            raise ValueError(f"Action data {name} on action {self.name} has no type")
        return param.field_type

    def action_data_width(self, name):
        """Return the width in bits of the named parameter."""
        return self.action_data_type(name).bit_width()