# seed_dev.py
"""
Create the schema (if missing) and load the demo roster, reports and mappings.

Usage:
    python scripts/seed_dev.py
    python scripts/seed_dev.py --reset   # drop every table first
"""

import argparse

from mapping_dashboard.db.base import Base
from mapping_dashboard.db.sample_data import load_sample_data
from mapping_dashboard.db.session import SessionLocal, engine
from mapping_dashboard.db.store import MappingStore


def main():
    parser = argparse.ArgumentParser(description="Seed the mapping dashboard database")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate all tables first")
    args = parser.parse_args()

    if args.reset:
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        store = MappingStore(db)
        if not store.is_empty():
            print("Store already has data; use --reset to reload it.")
            return
        load_sample_data(db)
        db.commit()

        print("Seeded:")
        print(f"  employees:         {len(store.list_employees())}")
        print(f"  reports:           {len(store.list_reports())}")
        print(f"  mapping records:   {len(store.list_mapping_records())}")
        print(f"  employee mappings: {len(store.list_employee_mappings())}")
    finally:
        db.close()

if __name__ == "__main__":
    main()
