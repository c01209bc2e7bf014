"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
All SQL queries related to the `testing.users` table live here.
"""

import psycopg2
from psycopg2 import extras
from psycopg2.extensions import connection as Connection

from errors import NotFound, QueryError
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)

TABLE = "testing.users"

# Column list and named placeholders both come from User.FIELDS.
INSERT_SQL = (
    f"INSERT INTO {TABLE} ({', '.join(User.FIELDS)}) "
    f"VALUES ({', '.join(f'%({name})s' for name in User.FIELDS)}) "
    f"RETURNING {User.sql_table_fields()};"
)
SELECT_ALL_SQL = f"SELECT {User.sql_table_fields()} FROM {TABLE} ORDER BY id;"
SELECT_BY_ID_SQL = (
    f"SELECT {User.sql_table_fields()} FROM {TABLE} "
    f"WHERE id = %(id)s ORDER BY id LIMIT 1;"
)


class UserRepository:
    """
    Repository for the users table.

    Every method borrows ``conn`` from the caller and never closes or
    returns it; the caller's pool scope governs release.
    """

    # ── CREATE ────────────────────────────────────────────

    def add(self, conn: Connection, user: User) -> User:
        """
        Insert a new user and return the stored row.

        Raises:
            NotFound: If the INSERT returned no row.
            QueryError: If the statement failed.
            MappingError: If the returned row does not fit the record.
        """
        rows = self._query(conn, INSERT_SQL, user.params(), "create user")
        if not rows:
            raise NotFound("insert returned no row")
        created = User.from_row(rows[0])
        logger.info(f"Created user {created}")
        return created

    # ── READ ──────────────────────────────────────────────

    def get_all(self, conn: Connection) -> list[User]:
        """Fetch every user ordered by id; an empty table yields []."""
        rows = self._query(conn, SELECT_ALL_SQL, None, "list users")
        return [User.from_row(r) for r in rows]

    def get_by_id(self, conn: Connection, user_id: int) -> User:
        """
        Fetch a single user by primary key.

        Raises:
            NotFound: If no row has this id.
            QueryError: If the statement failed.
        """
        rows = self._query(conn, SELECT_BY_ID_SQL, {"id": user_id}, f"get user #{user_id}")
        if not rows:
            logger.info(f"User #{user_id} not found")
            raise NotFound(f"user {user_id} not found")
        return User.from_row(rows[0])

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _query(conn: Connection, sql: str, params, action: str) -> list:
        """Run one statement and fetch all rows as column-name mappings."""
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                return cur.fetchall()
        except psycopg2.Error as e:
            logger.error(f"Failed to {action}: {e}")
            raise QueryError(f"failed to {action}") from e
