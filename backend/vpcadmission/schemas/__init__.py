"""Pydantic Schemas — resource and AdmissionReview models for the webhook boundary.

Invariants:
    - Schemas validate at system boundary (API server payloads)
    - Domain enums from core/ used for enum fields

Design Decisions:
    - cluster.py models the resource; admission.py models the review envelope
      (ADR: resource shape evolves independently of the admission protocol)
"""
