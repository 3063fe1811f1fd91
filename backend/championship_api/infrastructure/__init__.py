"""Infrastructure Layer - database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Driver errors are mapped to core error types before leaving this layer
"""
