"""Constants — database engines accepted by configuration.

Invariants:
    - Every allowed engine maps to an async SQLAlchemy driver name
"""

# engine type -> async SQLAlchemy drivername
DB_DRIVERS: dict[str, str] = {
    "postgres": "postgresql+asyncpg",
    "cockroachdb": "cockroachdb+asyncpg",
    "aurora-postgres": "postgresql+asyncpg",
    "mysql": "mysql+aiomysql",
    "mariadb": "mysql+aiomysql",
    "aurora-mysql": "mysql+aiomysql",
    "mssql": "mssql+aioodbc",
    "oracle": "oracle+oracledb_async",
    "sqlite": "sqlite+aiosqlite",
}

ALLOWED_DB_TYPES: tuple[str, ...] = tuple(DB_DRIVERS)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# users.id is a 32-bit INTEGER column
MAX_USER_ID = 2**31 - 1
