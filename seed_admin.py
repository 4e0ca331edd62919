#!/usr/bin/env python3
"""Create the database tables and the bootstrap admin account.

Usage:
    python seed_admin.py                       # uses ADMIN_NAME / ADMIN_REFERENCE_NUMBER
    python seed_admin.py "Jane Admin" ADM-001  # explicit name and reference number
"""
import sys

from dotenv import load_dotenv, find_dotenv

env_path = find_dotenv()
if env_path:
    load_dotenv(env_path, override=False)

from schoolvote.core.config import settings  # noqa: E402
from schoolvote.db import Base, engine, get_db_context  # noqa: E402
from schoolvote.services.users import ensure_admin_user  # noqa: E402

if len(sys.argv) not in (1, 3):
    print(__doc__)
    sys.exit(1)

name, reference_number = (sys.argv[1], sys.argv[2]) if len(sys.argv) == 3 else (
    settings.ADMIN_NAME,
    settings.ADMIN_REFERENCE_NUMBER,
)

Base.metadata.create_all(bind=engine)

with get_db_context() as db:
    admin = ensure_admin_user(db, name=name, reference_number=reference_number)

if admin.is_admin:
    print(f"✅ Admin ready: {admin.name} (reference number {admin.reference_number})")
else:
    print(f"❌ Reference number {reference_number} belongs to a non-admin user; pick another")
    sys.exit(1)
