# File: users_api/services/user_service.py

"""
User seeding and querying.

Both operations take the SQLAlchemy session as their first argument; the
route layer supplies it through the get_db dependency.
"""

import logging
from typing import Literal, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from users_api.models.user import User
from users_api.schemas.user import UserCreate

logger = logging.getLogger(__name__)

SEED_USERS: tuple[UserCreate, ...] = (
    UserCreate(name="Kyle", email="kyle@test.com", age=25),
    UserCreate(name="Sally", email="sally@test.com", age=12),
    UserCreate(name="Sally", email="sally@test1.com", age=13),
)

ORDERABLE_COLUMNS = {
    "id": User.id,
    "name": User.name,
    "email": User.email,
    "age": User.age,
}


def reset_and_seed(
    db: Session,
    users: Sequence[UserCreate] = SEED_USERS,
) -> list[User]:
    """
    Delete every user, then insert `users` in order.

    This is a destructive reset, not an upsert. Everything happens in one
    transaction: if any statement fails the session is rolled back and the
    error is re-raised, so prior rows survive a failed seed.
    """
    try:
        deleted = db.execute(delete(User)).rowcount
        created = []
        for payload in users:
            row = User(**payload.model_dump())
            db.add(row)
            created.append(row)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Seeding users failed, rolled back")
        raise

    for row in created:
        db.refresh(row)

    logger.info("Seeded users: deleted=%s created=%d", deleted, len(created))
    return created


def list_users(
    db: Session,
    filter_name: str = "Sally",
    order_by: str = "age",
    direction: Literal["asc", "desc"] = "asc",
    skip: int = 1,
    take: int = 2,
) -> list[User]:
    """
    Users named `filter_name`, sorted by `order_by`, paginated by skip/take.

    Returns fewer than `take` rows (possibly none) when not enough users
    match; that is never an error.
    """
    column = ORDERABLE_COLUMNS.get(order_by)
    if column is None:
        raise ValueError(
            f"Cannot order by {order_by!r}; expected one of {sorted(ORDERABLE_COLUMNS)}"
        )
    if direction not in ("asc", "desc"):
        raise ValueError(f"direction must be 'asc' or 'desc', got {direction!r}")
    if skip < 0 or take < 0:
        raise ValueError(f"skip and take must be >= 0 (skip={skip}, take={take})")

    stmt = (
        select(User)
        .where(User.name == filter_name)
        .order_by(column.asc() if direction == "asc" else column.desc(), User.id)
        .offset(skip)
        .limit(take)
    )
    rows = list(db.scalars(stmt))
    logger.debug(
        "list_users name=%r order=%s %s skip=%d take=%d -> %d rows",
        filter_name, order_by, direction, skip, take, len(rows),
    )
    return rows


def count_users(db: Session) -> int:
    return db.scalar(select(func.count()).select_from(User)) or 0
