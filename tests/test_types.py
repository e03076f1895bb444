import pytest

from bfrtkit.types import FieldType, TableMatchType, TableType, parse_table_type


@pytest.mark.parametrize(
    "kind, width",
    [("uint64", 64), ("uint32", 32), ("uint16", 16), ("uint8", 8), ("bool", 1), ("string", 32)],
)
def test_fixed_widths(kind, width):
    assert FieldType(kind).bit_width() == width


def test_bytes_width_from_schema():
    field = FieldType.from_dict({"type": "bytes", "width": 48})
    assert field.bit_width() == 48
    assert field.kind == "bytes"


def test_bytes_without_width_fails():
    with pytest.raises(ValueError):
        FieldType.from_dict({"type": "bytes"}).bit_width()


def test_unknown_kind_fails():
    with pytest.raises(ValueError, match="Unknown width type: float"):
        FieldType("float").bit_width()


def test_from_dict_requires_type():
    with pytest.raises(KeyError):
        FieldType.from_dict({"width": 8})


def test_table_type_alias():
    assert parse_table_type("MatchAction_Direct") is TableType.MATCH_ACTION_DIRECT
    assert parse_table_type("MatchActionDirect") is TableType.MATCH_ACTION_DIRECT


def test_table_type_round_trip():
    for member in TableType:
        assert parse_table_type(member.value) is member


def test_unknown_table_type():
    assert parse_table_type("SelectorGetMember") is TableType.UNKNOWN


def test_match_type_values():
    assert TableMatchType("Exact") is TableMatchType.EXACT
    assert TableMatchType("LPM") is TableMatchType.LPM