"""Core Layer - error hierarchy and pure validation.

Invariants:
    - Core never imports from infrastructure/, services/ or api/
    - Functions here perform no IO
"""
