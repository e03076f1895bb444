"""Learn filters that describe digests sent by the switch."""

from dataclasses import dataclass

from .errors import UnknownLearnFilterFieldError


@dataclass(frozen=True)
class LearnFilterField:
    """A field carried in a digest."""

    name: str
    id: int

    @classmethod
    def from_dict(cls, data):
        return cls(name=data["name"], id=data["id"])


@dataclass(frozen=True)
class LearnFilter:
    """A learn filter and the fields of its digests."""

    name: str
    id: int
    fields: tuple[LearnFilterField, ...]

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data["name"],
            id=data["id"],
            fields=tuple(LearnFilterField.from_dict(f) for f in data["fields"]),
        )

    def field_name_by_id(self, field_id):
        """Return the name of the field with the given id."""
        for fld in self.fields:
            if fld.id == field_id:
                return fld.name
        raise UnknownLearnFilterFieldError(field_id)