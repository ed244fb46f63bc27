"""Core Layer — domain logic, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Analytics functions are pure and deterministic given a reference "now"
    - TimestampStore is the only stateful object, and it owns its lock

Design Decisions:
    - Functional core separated from the HTTP shell: routes only translate
      requests into calls on core/ and results back into responses
"""
