"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Decoding and projection are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the route reads bytes,
      the core turns them into a Device or raises, the shell persists
"""
