"""Repositories — SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - One repository per aggregate, bound to one AsyncSession
    - Repositories never raise domain errors; "not found" is the service's call
"""
