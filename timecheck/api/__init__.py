"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Errors leave the API as structured JSON envelopes

Design Decisions:
    - Thin routes delegate to core/ (no business logic in handlers)
"""
