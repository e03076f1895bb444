"""Tables of a BF Runtime schema and lookups of their keys, actions and data."""

from dataclasses import dataclass

from .action import BfrtAction
from .data import BfrtData
from .errors import (
    UnknownActionDataIdError,
    UnknownActionIdError,
    UnknownActionNameError,
    UnknownKeyIdError,
    UnknownKeyNameError,
    UnknownSingletonIdError,
    UnknownSingletonNameError,
)
from .key import TableKey
from .types import TableType, parse_table_type


@dataclass(frozen=True)
class BfrtTable:
    """A table as described by the schema."""

    name: str
    id: int
    table_type: TableType
    size: int
    key: tuple[TableKey, ...]
    has_const_default_action: bool | None = None
    action_specs: tuple[BfrtAction, ...] | None = None
    data: tuple[BfrtData, ...] | None = None

    @classmethod
    def from_dict(cls, data):
        actions = data.get("action_specs")
        fields = data.get("data")
        return cls(
            name=data["name"],
            id=data["id"],
            table_type=parse_table_type(data["table_type"]),
            size=data["size"],
            key=tuple(TableKey.from_dict(k) for k in data["key"]),
            has_const_default_action=data.get("has_const_default_action"),
            action_specs=(
                tuple(BfrtAction.from_dict(a) for a in actions) if actions is not None else None
            ),
            data=tuple(BfrtData.from_dict(d) for d in fields) if fields is not None else None,
        )

    def _singletons(self):
        return (entry.singleton for entry in self.data or ())

    def action_by_id(self, action_id):
        """Return the action with the given id."""
        for action in self.action_specs or ():
            if action.id == action_id:
                return action
        raise UnknownActionIdError(action_id)

    def action_by_name(self, name):
        """Return the action with the given name."""
        for action in self.action_specs or ():
            if action.name == name:
                return action
        raise UnknownActionNameError(name)

    def singleton_by_name(self, name):
        """Return the singleton data field with the given name."""
        for singleton in self._singletons():
            if singleton.name == name:
                return singleton
        raise UnknownSingletonNameError(name)

    def singleton_by_id(self, singleton_id):
        """Return the singleton data field with the given id."""
        for singleton in self._singletons():
            if singleton.id == singleton_id:
                return singleton
        raise UnknownSingletonIdError(singleton_id)

    def action_param_name(self, action_id, field_id):
        """Name of a data field of an entry, given its action id and field id.

        For direct match-action tables the action's parameters are searched
        first and the table's singletons second; other tables only have
        singletons.
        """
        if self.table_type is TableType.MATCH_ACTION_DIRECT:
            action = self.action_by_id(action_id)
            try:
                return action.action_data_by_id(field_id).name
            except UnknownActionDataIdError as err:
                try:
                    return self.singleton_by_id(field_id).name
                except UnknownSingletonIdError:
                    raise err from None
        return self.singleton_by_id(field_id).name

    def key_by_id(self, key_id):
        """Return the key field with the given id."""
        for key in self.key:
            if key.id == key_id:
                return key
        raise UnknownKeyIdError(key_id, self.name)

    def key_by_name(self, name):
        """Return the key field with the given name."""
        for key in self.key:
            if key.name == name:
                return key
        raise UnknownKeyNameError(name, self.name)