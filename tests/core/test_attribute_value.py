"""Attribute Value — tests for decoding JSON-like values into the tagged variant.

Tests cover:
    - strings, ints and floats decode to scalar kinds
    - homogeneous lists decode to sequence kinds, order preserved
    - objects, booleans, null, mixed lists and nested lists are rejected
    - non-finite numbers are rejected, alone or inside a list
    - to_json returns plain JSON values
"""

import pytest

from inventory.core.attribute_value import AttributeValue, decode_attribute_value
from inventory.core.domain_types import AttributeValueKind
from inventory.core.errors import ErrorContext, InvalidAttributeValueError


# ─── accepted shapes ─────────────────────────────────────────────

def test_string_decodes_to_string_kind():
    value = decode_attribute_value("00:00:00:01")
    assert value.kind == AttributeValueKind.STRING
    assert value.data == "00:00:00:01"


@pytest.mark.parametrize("raw", [0, 123, -7, 123.2, 1e-9])
def test_numbers_decode_to_number_kind(raw):
    value = decode_attribute_value(raw)
    assert value.kind == AttributeValueKind.NUMBER
    assert value.data == raw


def test_string_list_decodes_in_order():
    value = decode_attribute_value(["00:00:00:01", "00"])
    assert value.kind == AttributeValueKind.STRING_SEQUENCE
    assert value.data == ("00:00:00:01", "00")


def test_number_list_mixing_int_and_float_is_homogeneous():
    value = decode_attribute_value([1, 2.5, 3])
    assert value.kind == AttributeValueKind.NUMBER_SEQUENCE
    assert value.data == (1, 2.5, 3)


def test_empty_list_decodes_as_string_sequence():
    value = decode_attribute_value([])
    assert value.kind == AttributeValueKind.STRING_SEQUENCE
    assert value.data == ()


def test_empty_string_is_a_valid_value():
    assert decode_attribute_value("").kind == AttributeValueKind.STRING


# ─── rejected shapes ─────────────────────────────────────────────

@pytest.mark.parametrize("raw", [
    {"nested": "object"},
    True,
    False,
    None,
    ["asd", 123],
    [123, "asd"],
    [["nested"]],
    [[1, 2]],
    [True, False],
    [1, True],
    ["a", None],
    float("inf"),
    float("-inf"),
    float("nan"),
    [1.5, float("inf")],
])
def test_invalid_shapes_rejected(raw):
    with pytest.raises(InvalidAttributeValueError) as exc_info:
        decode_attribute_value(raw)
    assert exc_info.value.message == "invalid attribute value provided"
    assert exc_info.value.http_status == 400


def test_rejection_carries_context():
    context = ErrorContext(device_id="id-0001", attribute_name="mac")
    with pytest.raises(InvalidAttributeValueError) as exc_info:
        decode_attribute_value({}, context)
    assert exc_info.value.context.device_id == "id-0001"
    assert exc_info.value.context.attribute_name == "mac"


# ─── to_json ─────────────────────────────────────────────────────

def test_to_json_returns_list_for_sequences():
    value = decode_attribute_value(["a", "b"])
    assert value.to_json() == ["a", "b"]
    assert value.is_sequence


def test_to_json_returns_scalar_unchanged():
    assert decode_attribute_value(42).to_json() == 42
    assert not decode_attribute_value("x").is_sequence


def test_decoded_values_are_hashable_and_comparable():
    first = decode_attribute_value([1, 2])
    second = AttributeValue(AttributeValueKind.NUMBER_SEQUENCE, (1, 2))
    assert first == second
    assert hash(first) == hash(second)
