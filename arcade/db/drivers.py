"""SQL dialect specific behavior needed by the storage layer.

SQLAlchemy renders parameter placeholders per dialect, so the only thing a
driver has to know is how its database reports constraint violations.
"""

from __future__ import annotations

from sqlalchemy.engine import Connection, Engine


class Driver:
    """Classifies DBAPI errors raised by a database."""

    name = "generic"

    def is_foreign_key_violation(self, err: BaseException | None) -> bool:
        return False

    def is_unique_violation(self, err: BaseException | None) -> bool:
        return False


class PostgresDriver(Driver):
    """Postgres reports SQLSTATE codes on the DBAPI error."""

    name = "postgresql"

    FOREIGN_KEY_VIOLATION = "23503"
    UNIQUE_VIOLATION = "23505"

    def is_foreign_key_violation(self, err: BaseException | None) -> bool:
        return _sqlstate(err) == self.FOREIGN_KEY_VIOLATION

    def is_unique_violation(self, err: BaseException | None) -> bool:
        return _sqlstate(err) == self.UNIQUE_VIOLATION


class CockroachDriver(PostgresDriver):
    """Cockroach speaks the Postgres wire protocol and its error codes."""

    name = "cockroachdb"

    FOREIGN_KEY_VIOLATION = "23503"
    UNIQUE_VIOLATION = "23505"


class SqliteDriver(Driver):
    """SQLite only reports extended error names (Python 3.11+) and messages."""

    name = "sqlite"

    FOREIGN_KEY_VIOLATION = "SQLITE_CONSTRAINT_FOREIGNKEY"
    UNIQUE_VIOLATION = "SQLITE_CONSTRAINT_UNIQUE"

    def is_foreign_key_violation(self, err: BaseException | None) -> bool:
        return self._matches(err, self.FOREIGN_KEY_VIOLATION, "FOREIGN KEY constraint failed")

    def is_unique_violation(self, err: BaseException | None) -> bool:
        return self._matches(err, self.UNIQUE_VIOLATION, "UNIQUE constraint failed")

    @staticmethod
    def _matches(err: BaseException | None, errorname: str, message: str) -> bool:
        if err is None:
            return False
        name = getattr(err, "sqlite_errorname", None)
        if name is not None:
            return name == errorname
        return str(err).startswith(message)


def _sqlstate(err: BaseException | None) -> str | None:
    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    if err is None:
        return None
    return getattr(err, "pgcode", None) or getattr(err, "sqlstate", None)


_DRIVERS: dict[str, type[Driver]] = {
    PostgresDriver.name: PostgresDriver,
    CockroachDriver.name: CockroachDriver,
    SqliteDriver.name: SqliteDriver,
}


def get_driver(engine: Engine | Connection) -> Driver:
    """Driver for the dialect of an engine or connection."""
    try:
        return _DRIVERS[engine.dialect.name]()
    except KeyError:
        raise ValueError(f"unsupported database dialect: {engine.dialect.name}") from None
