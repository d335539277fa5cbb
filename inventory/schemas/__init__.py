"""Pydantic Schemas — shape validation for inbound payloads.

Invariants:
    - Schemas check shape only (types, nesting); required-field and value
      rules live in core/decode_device.py so their error messages stay exact

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, dataclasses are domain
"""
