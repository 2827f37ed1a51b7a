"""Core Layer — pure validation logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or config
    - The one schema import allowed is schemas.cluster: its frozen models are the
      value snapshots the rules read; schemas.admission (protocol) stays out
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
    - Rules typed against the frozen resource models rather than parallel core
      dataclasses: one decoded snapshot, no copy step between decode and validate
"""
