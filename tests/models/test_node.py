# tests/models/test_node.py

import pytest
from pydantic import ValidationError

from nodecounter.models.node import U64_MAX, Node, Resources, parse_u64

WIRE_NODE = {
    "nodeID": 7,
    "farmID": 1,
    "created": 1650000000,
    "resourcesTotal": {"cru": "24", "hru": 4000000000000, "mru": "202802839552", "sru": 1024},
}


def test_parse_u64_accepts_string_and_number():
    assert parse_u64("123") == 123
    assert parse_u64(123) == 123
    assert parse_u64("123") == parse_u64(123)


def test_parse_u64_accepts_full_u64_range():
    assert parse_u64(str(U64_MAX)) == U64_MAX
    assert parse_u64(0) == 0


@pytest.mark.parametrize("value", ["abc", -5, 12.5, True, None, "-5", "12.5", "", " 12", 12.0, [1], {"v": 1}])
def test_parse_u64_rejects_invalid_values(value):
    with pytest.raises(ValueError):
        parse_u64(value)


def test_parse_u64_rejects_overflow():
    with pytest.raises(ValueError):
        parse_u64(U64_MAX + 1)
    with pytest.raises(ValueError):
        parse_u64(str(U64_MAX + 1))


def test_resources_normalizes_mixed_wire_values():
    resources = Resources.model_validate({"cru": "8", "mru": 16, "sru": "0", "hru": 4})
    assert resources == Resources(cru=8, mru=16, sru=0, hru=4)


def test_resources_rejects_invalid_counter():
    with pytest.raises(ValidationError):
        Resources.model_validate({"cru": "abc", "mru": 1, "sru": 1, "hru": 1})
    with pytest.raises(ValidationError):
        Resources.model_validate({"cru": 1, "mru": None, "sru": 1, "hru": 1})


def test_resources_addition_is_elementwise():
    total = Resources(cru=1, mru=2, sru=3, hru=4) + Resources(cru=10, mru=20, sru=30, hru=40)
    assert total == Resources(cru=11, mru=22, sru=33, hru=44)
    assert Resources.zero() + total == total


def test_node_from_wire_format():
    node = Node.model_validate(WIRE_NODE)
    assert node.node_id == 7
    assert node.farm_id == 1
    assert node.created == 1650000000
    assert node.resources.cru == 24
    assert node.resources.mru == 202802839552
    assert node.resources.hru == 4000000000000


def test_node_is_immutable():
    node = Node.model_validate(WIRE_NODE)
    with pytest.raises(ValidationError):
        node.farm_id = 2


def test_node_missing_field_is_rejected():
    broken = {k: v for k, v in WIRE_NODE.items() if k != "farmID"}
    with pytest.raises(ValidationError):
        Node.model_validate(broken)


def test_node_ids_must_be_integers():
    with pytest.raises(ValidationError):
        Node.model_validate({**WIRE_NODE, "nodeID": "7"})
    with pytest.raises(ValidationError):
        Node.model_validate({**WIRE_NODE, "created": 1650000000.5})


def test_resources_sum_may_exceed_u64():
    total = Resources(cru=U64_MAX, mru=0, sru=0, hru=0) + Resources(cru=1, mru=0, sru=0, hru=0)
    assert total.cru == U64_MAX + 1
