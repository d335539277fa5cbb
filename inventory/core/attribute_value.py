"""Attribute Value — tagged variant for a device attribute's payload.

Invariants:
    - Only four shapes exist: string, number, list of strings, list of numbers
    - Sequences are homogeneous and flat (no nesting, no mixing)
    - bool is never a number, even though Python treats it as an int
    - Numbers are finite: literals that overflow to infinity are rejected
    - An empty list decodes as STRING_SEQUENCE

Design Decisions:
    - Frozen dataclass + kind enum: illegal states unrepresentable after decoding
    - Sequences stored as tuples so AttributeValue stays hashable and immutable
"""

import math
from dataclasses import dataclass
from typing import Any, Union

from inventory.core.domain_types import AttributeValueKind
from inventory.core.errors import ErrorContext, InvalidAttributeValueError

Number = Union[int, float]
AttributeData = Union[str, Number, tuple[str, ...], tuple[Number, ...]]

_SEQUENCE_KINDS = (
    AttributeValueKind.STRING_SEQUENCE, AttributeValueKind.NUMBER_SEQUENCE,
)


@dataclass(frozen=True)
class AttributeValue:
    """One decoded attribute value."""
    kind: AttributeValueKind
    data: AttributeData

    @property
    def is_sequence(self) -> bool:
        return self.kind in _SEQUENCE_KINDS

    def to_json(self) -> Any:
        """Plain JSON representation (lists for sequences)."""
        if self.is_sequence:
            return list(self.data)
        return self.data


def _is_number(raw: Any) -> bool:
    if isinstance(raw, bool):
        return False
    if isinstance(raw, float):
        return math.isfinite(raw)
    return isinstance(raw, int)


def decode_attribute_value(
    raw: Any, context: ErrorContext | None = None,
) -> AttributeValue:
    """Decode a JSON-like value into an AttributeValue.

    Raises InvalidAttributeValueError for objects, booleans, null,
    non-finite numbers, mixed-type lists and nested lists.
    """
    if isinstance(raw, str):
        return AttributeValue(AttributeValueKind.STRING, raw)
    if _is_number(raw):
        return AttributeValue(AttributeValueKind.NUMBER, raw)
    if isinstance(raw, list):
        if all(isinstance(item, str) for item in raw):
            return AttributeValue(AttributeValueKind.STRING_SEQUENCE, tuple(raw))
        if all(_is_number(item) for item in raw):
            return AttributeValue(AttributeValueKind.NUMBER_SEQUENCE, tuple(raw))
    raise InvalidAttributeValueError(context)
