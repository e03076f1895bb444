"""Field and table types described by a BF Runtime schema."""

from dataclasses import dataclass
from enum import Enum


class TableMatchType(Enum):
    """How a table key field is matched."""

    LPM = "LPM"
    EXACT = "Exact"
    RANGE = "Range"
    TERNARY = "Ternary"


class TableType(Enum):
    """Kind of a table in the schema."""

    MATCH_ACTION_DIRECT = "MatchActionDirect"
    REGISTER = "Register"
    METER = "Meter"
    SNAPSHOT_CFG = "SnapshotCfg"
    SNAPSHOT_TRIGGER = "SnapshotTrigger"
    SNAPSHOT_DATA = "SnapshotData"
    SNAPSHOT_LIVENESS = "SnapshotLiveness"
    PORT_METADATA = "PortMetadata"
    PRE_MGID = "PreMgid"
    PRE_NODE = "PreNode"
    PRE_ECMP = "PreEcmp"
    PRE_LAG = "PreLag"
    PRE_PRUNE = "PrePrune"
    PRE_PORT = "PrePort"
    PORT_CONFIGURE = "PortConfigure"
    PORT_STAT = "PortStat"
    PORT_HDL_INFO = "PortHdlInfo"
    PKTGEN_APP_CFG = "PktgenAppCfg"
    PKTGEN_PKT_BUFFER_CFG = "PktgenPktBufferCfg"
    UNKNOWN = "Unknown"


_TABLE_TYPE_ALIASES = {"MatchAction_Direct": TableType.MATCH_ACTION_DIRECT}


def parse_table_type(value):
    """Map a schema table type string to a TableType; unknown names give UNKNOWN."""
    if value in _TABLE_TYPE_ALIASES:
        return _TABLE_TYPE_ALIASES[value]
    try:
        return TableType(value)
    except ValueError:
        return TableType.UNKNOWN


_FIXED_WIDTHS = {
    "uint64": 64,
    "uint32": 32,
    "uint16": 16,
    "uint8": 8,
    "bool": 1,
    # strings are encoded separately; this width is nominal
    "string": 32,
}


@dataclass(frozen=True)
class FieldType:
    """Type of a key or data field: a type name and, for bytes, a width in bits."""

    kind: str
    width: int | None = None

    @classmethod
    def from_dict(cls, data):
        return cls(kind=data["type"], width=data.get("width"))

    def bit_width(self):
        """Width of the field in bits."""
        if self.kind == "bytes":
            if self.width is None:
                raise ValueError("bytes field type has no width")
            return self.width
        try:
            return _FIXED_WIDTHS[self.kind]
        except KeyError:
            raise ValueError(f"Unknown width type: {self.kind}") from None