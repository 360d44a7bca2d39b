#!/usr/bin/env python3
"""
FixIt - database initialization script
Creates the tables, seeds the initial accounts and, with --sample, a few
inventory items and maintenance tasks to try the staff screens with.
"""

import argparse
import sys

from fixit.db.session import engine, SessionLocal, Base
from fixit.models import models  # register all models
from fixit.schemas.inventory_schemas import InventoryItemIn
from fixit.schemas.maintenance_schemas import MaintenanceTaskIn
from fixit.services.inventory_service import InventoryService
from fixit.services.maintenance_service import MaintenanceService
from fixit.services.user_service import UserService

SAMPLE_INVENTORY = [
    {"id": "INV-SAMPLE-1", "name": "เมาส์ USB", "stock": 12, "min_stock": 5},
    {"id": "INV-SAMPLE-2", "name": "หลอดโปรเจคเตอร์", "category": "อะไหล่โปรเจคเตอร์", "stock": 2, "unit": "หลอด", "min_stock": 3},
    {"id": "INV-SAMPLE-3", "name": "สาย HDMI 3 เมตร", "category": "สายสัญญาณ", "stock": 5, "unit": "เส้น", "min_stock": 5},
]

SAMPLE_MAINTENANCE = [
    {"id": "PM-SAMPLE-1", "title": "ล้างแอร์ห้องประชุม", "asset_name": "แอร์ (Air Condition)",
     "location": "ห้องประชุม 1", "next_date": "2025-01-15", "period": "Quarterly"},
    {"id": "PM-SAMPLE-2", "title": "ตรวจเช็คเครื่องเสียงหอประชุม", "asset_name": "ระบบเสียง (Sound System)",
     "location": "หอประชุม", "next_date": "2025-02-01", "period": "Monthly"},
]


def create_tables():
    print("[INFO] Creating database tables...")
    Base.metadata.create_all(bind=engine)
    print("[SUCCESS] Database tables created")


def init_users():
    db = SessionLocal()
    try:
        count = UserService.init_auth(db)
        if count:
            print(f"[SUCCESS] Seeded {count} initial users")
        else:
            print("[SKIP] Users already exist, skipping")
    finally:
        db.close()


def init_sample_data():
    db = SessionLocal()
    try:
        for item in SAMPLE_INVENTORY:
            InventoryService.save_item(db, InventoryItemIn(**item))
        for task in SAMPLE_MAINTENANCE:
            MaintenanceService.save_task(db, MaintenanceTaskIn(**task))
        print(f"[SUCCESS] Sample data written ({len(SAMPLE_INVENTORY)} items, {len(SAMPLE_MAINTENANCE)} tasks)")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Initialize the FixIt database")
    parser.add_argument("--sample", action="store_true", help="also write sample inventory and maintenance data")
    args = parser.parse_args(argv)

    print("=" * 60)
    print("Initializing FixIt database...")
    print("=" * 60)

    try:
        create_tables()
        init_users()
        if args.sample:
            init_sample_data()
    except Exception as e:
        print(f"[ERROR] Database initialization failed: {e}")
        return 1

    print("=" * 60)
    print("[SUCCESS] Database initialization complete")
    print("\nStart the application:")
    print("  python -m fixit.main")
    print("  or: uvicorn fixit.main:app --reload")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
