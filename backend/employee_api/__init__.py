"""Employee API Package: backend-for-frontend over the upstream employee API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
