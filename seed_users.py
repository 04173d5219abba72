"""
Reset the users table to the sample rows.

Run this from the project root:

    (.venv) python seed_users.py

It creates the tables if needed, deletes every existing user and inserts
the three sample users. Point DATABASE_URL elsewhere to seed another DB.
"""

from sqlalchemy.exc import SQLAlchemyError

from users_api.db.init_db import init_db
from users_api.db.session import SessionLocal
from users_api.services.user_service import count_users, reset_and_seed


def main() -> int:
    init_db()

    db = SessionLocal()
    try:
        print(f"[INFO] Users before seeding: {count_users(db)}")
        try:
            created = reset_and_seed(db)
        except SQLAlchemyError as e:
            print(f"[ERROR] Seeding failed: {e}")
            return 1

        for user in created:
            print(f"[INFO] Created {user.name} <{user.email}> age={user.age} id={user.id}")
        print(f"[INFO] Users after seeding: {count_users(db)}")
        print("[INFO] Done.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    raise SystemExit(main())
