"""Seed the shared exercise catalog with common lifts (skipped if not empty)."""
import sys

from liftlog.db import SessionLocal
from liftlog.repositories.exercise_repo import DEFAULT_EXERCISES, ExerciseRepository


def main() -> int:
    print("Seeding exercises...")
    try:
        with SessionLocal() as db:
            repo = ExerciseRepository(db)
            existing = repo.count()
            if existing:
                print(f"Database already has {existing} exercises. Skipping seed.")
                return 0
            added = repo.seed_defaults(DEFAULT_EXERCISES)
    except Exception as e:
        print(f"Seed failed: {e}", file=sys.stderr)
        return 1
    print(f"Successfully seeded {added} exercises!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
