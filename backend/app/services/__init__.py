"""Services Layer — not-found and pagination policy over repositories.

Invariants:
    - Services are the only place that raise ResourceNotFoundError / PageOutOfRangeError
    - Services receive repositories by constructor injection
"""
