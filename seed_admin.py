"""
seed_admin.py
─────────────
Creates the first event planner admin. Run once after `alembic upgrade head`:

    python seed_admin.py

Reads SEED_ADMIN_* from .env, falling back to the defaults below.
"""
import asyncio
import os
from dotenv import load_dotenv

load_dotenv()

ADMIN_NAME     = os.getenv("SEED_ADMIN_NAME",     "Event Admin")
ADMIN_EMAIL    = os.getenv("SEED_ADMIN_EMAIL",    "admin@example.org").strip().lower()
ADMIN_PASSWORD = os.getenv("SEED_ADMIN_PASSWORD", "ChangeMe@2026")


async def seed():
    from sqlalchemy import select
    from event_planner.core.database import AsyncSessionLocal, engine
    from event_planner.core.security import hash_password
    from event_planner.models.admin import Admin

    async with AsyncSessionLocal() as db:
        existing = (await db.execute(
            select(Admin).where(Admin.email == ADMIN_EMAIL)
        )).scalar_one_or_none()

        if existing:
            print(f"Admin already exists: {ADMIN_EMAIL}, nothing to do.")
            await engine.dispose()
            return

        admin = Admin(
            name=ADMIN_NAME,
            email=ADMIN_EMAIL,
            password_hash=hash_password(ADMIN_PASSWORD),
        )
        db.add(admin)
        await db.commit()
        await db.refresh(admin)

    await engine.dispose()

    print(f"Admin created: id={admin.id} email={admin.email}")
    print("Login with POST /api/auth/login, then change the password.")


if __name__ == "__main__":
    asyncio.run(seed())
