"""Domain Types — identity types and attribute value kinds.

Invariants:
    - DeviceId is opaque and non-empty once it leaves the decoder
    - GroupId is never accepted from the registration payload
    - AttributeValueKind enumerates every legal attribute value shape

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for kinds: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DeviceId = NewType("DeviceId", str)
GroupId = NewType("GroupId", str)


# ─── Enums ───────────────────────────────────────────────────────

class AttributeValueKind(str, Enum):
    """Shape of an attribute value after decoding."""
    STRING = "string"
    NUMBER = "number"
    STRING_SEQUENCE = "string_sequence"
    NUMBER_SEQUENCE = "number_sequence"
