#!/usr/bin/env python3
"""
Seed the learning-path catalog (replaces whatever is there).

Run: python scripts/seed_learning_paths.py
     python scripts/seed_learning_paths.py --file paths.json --keep
     python scripts/seed_learning_paths.py --reset-db

Uses DATABASE_URL from the environment / .env, like the server.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

_project_root = Path(__file__).resolve().parent.parent
for _p in (_project_root, _project_root / "src"):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed learning paths and modules.")
    parser.add_argument("--file", "-f", default=None, help="JSON file with a list of learning paths (default: built-in catalog)")
    parser.add_argument("--keep", action="store_true", help="Keep existing paths instead of clearing them first")
    parser.add_argument("--reset-db", action="store_true", help="Drop and recreate every table (wipes users and progress)")
    args = parser.parse_args()

    from portal.config import SessionLocal, create_db, reset_db
    from portal.seed_data import LEARNING_PATHS
    from portal.services.catalog_service import CatalogService

    paths = LEARNING_PATHS
    if args.file:
        paths = json.loads(Path(args.file).read_text(encoding="utf-8"))
        if not isinstance(paths, list):
            print("Seed file must contain a JSON list of learning paths", file=sys.stderr)
            return 1

    if args.reset_db:
        reset_db()
    else:
        create_db()
    db = SessionLocal()
    try:
        written = CatalogService(db).seed(paths, replace=not args.keep)
    finally:
        db.close()

    print(f"Seeded {len(paths)} learning paths ({written} modules).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
