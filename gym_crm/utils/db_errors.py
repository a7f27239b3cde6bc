from sqlalchemy.exc import IntegrityError

# SQLSTATE for unique_violation on Postgres
PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError, column: str) -> bool:
    """
    True when the integrity error is a unique constraint on `column`.
    Understands psycopg2 (pgcode + constraint/key detail) and sqlite3 messages.
    """
    orig = error.orig
    message = str(orig).lower()
    pgcode = getattr(orig, "pgcode", None)
    if pgcode is not None:
        return pgcode == PG_UNIQUE_VIOLATION and column in message
    return "unique" in message and column in message
