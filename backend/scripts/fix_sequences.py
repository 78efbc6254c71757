"""Reset PostgreSQL serial sequences to max(id) + 1.

Needed after rows were inserted with explicit ids (restores, manual imports),
otherwise the next insert collides on the primary key.
"""
import sys

from sqlalchemy import text

from liftlog.db import engine

TABLES = ("workout_exercises", "sets", "exercises", "workouts")


def main() -> int:
    if engine.dialect.name != "postgresql":
        print(f"Sequences only exist on PostgreSQL (got {engine.dialect.name}); nothing to do.")
        return 0

    print("Fixing PostgreSQL sequences...")
    try:
        with engine.begin() as conn:
            for table in TABLES:
                # table names come from the fixed tuple above, never from input
                conn.execute(text(
                    f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                    f"COALESCE((SELECT MAX(id) FROM {table}), 0) + 1, false)"
                ))
                print(f"  {table} sequence fixed")
    except Exception as e:
        print(f"Sequence fix failed: {e}", file=sys.stderr)
        return 1
    print("All sequences fixed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
