"""Print every exercise in the catalog."""
import sys

from liftlog.db import SessionLocal
from liftlog.repositories.exercise_repo import ExerciseRepository


def main() -> int:
    try:
        with SessionLocal() as db:
            exercises = ExerciseRepository(db).list_all()
    except Exception as e:
        print(f"List failed: {e}", file=sys.stderr)
        return 1

    if not exercises:
        print("No exercises found in the database.")
        return 0
    print(f"Found {len(exercises)} exercises:\n")
    for ex in exercises:
        print(f"ID: {ex.id} - {ex.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
