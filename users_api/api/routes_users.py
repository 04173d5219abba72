# File: users_api/api/routes_users.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from users_api.db.session import get_db
from users_api.core.config import settings
from users_api.schemas.user import SeedResult, UserRead
from users_api.services.user_service import list_users, reset_and_seed

router = APIRouter()


@router.get(
    "",
    response_model=list[UserRead],
    summary="List users matching the configured filter",
)
def get_users(db: Session = Depends(get_db)):
    """
    Filter, sort and pagination come from settings, not from the request.

    With the seed data and default settings this returns the single
    13-year-old Sally.
    """
    return list_users(
        db,
        filter_name=settings.users_filter_name,
        order_by=settings.users_order_by,
        direction=settings.users_direction,
        skip=settings.users_skip,
        take=settings.users_take,
    )


@router.post(
    "",
    response_model=SeedResult,
    summary="Reset the users table to the sample rows",
)
def create_users(db: Session = Depends(get_db)):
    reset_and_seed(db)
    return SeedResult(message="Users created")
