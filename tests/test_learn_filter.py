import pytest

from bfrtkit.errors import UnknownLearnFilterFieldError
from bfrtkit.learn_filter import LearnFilter, LearnFilterField

FILTER = {
    "name": "pipe.SwitchIngressDeparser.digest",
    "id": 40,
    "annotations": [],
    "fields": [
        {"id": 1, "name": "src_addr", "repeated": False, "type": {"type": "bytes", "width": 48}},
        {"id": 2, "name": "ingress_port", "repeated": False, "type": {"type": "bytes", "width": 9}},
    ],
}


@pytest.fixture
def learn_filter():
    return LearnFilter.from_dict(FILTER)


def test_parse(learn_filter):
    assert learn_filter.name == "pipe.SwitchIngressDeparser.digest"
    assert learn_filter.id == 40
    assert learn_filter.fields == (
        LearnFilterField("src_addr", 1),
        LearnFilterField("ingress_port", 2),
    )


def test_field_name_by_id(learn_filter):
    for fld in learn_filter.fields:
        assert learn_filter.field_name_by_id(fld.id) == fld.name


def test_unknown_field(learn_filter):
    with pytest.raises(UnknownLearnFilterFieldError) as info:
        learn_filter.field_name_by_id(9)
    assert info.value.field_id == 9


def test_empty_filter():
    empty = LearnFilter.from_dict({"name": "f", "id": 1, "fields": []})
    with pytest.raises(UnknownLearnFilterFieldError):
        empty.field_name_by_id(1)


def test_missing_fields_rejected():
    with pytest.raises(KeyError):
        LearnFilter.from_dict({"name": "f", "id": 1})