"""Infrastructure Layer — database sessions, external API clients, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All external failures mapped to AppError subclasses (core/errors.py)
"""
