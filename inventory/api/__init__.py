"""API Layer — FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses are {"error": message}

Design Decisions:
    - Thin routes delegate to services
"""
