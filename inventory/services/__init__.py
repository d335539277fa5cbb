"""Services Layer — orchestration between pure core and injected capabilities.

Invariants:
    - Services never build HTTP responses; they return or raise InventoryError
"""
