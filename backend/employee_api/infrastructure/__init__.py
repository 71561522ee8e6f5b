"""Infrastructure Layer: upstream HTTP client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every upstream call is wrapped with failure classification
"""
