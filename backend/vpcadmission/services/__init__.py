"""Services Layer — imperative shell around the pure validation core.

Invariants:
    - Services log; core does not
    - Services raise AdmissionError subclasses; routes translate them

Design Decisions:
    - Handler (resource semantics) split from review service (protocol semantics)
"""
