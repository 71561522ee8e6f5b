"""Pydantic Schemas: upstream envelopes and request/response models.

Invariants:
    - Schemas validate at system boundaries (upstream payloads, client input)
"""
