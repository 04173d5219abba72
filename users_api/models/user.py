# File: users_api/models/user.py

"""
User model.

The only persisted entity: a person with a name, an email and an age.
Rows are wiped and recreated by the seeder; ids keep increasing across
reseeds and are never reused.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from users_api.models.base import Base


class User(Base):
    __tablename__ = "users"
    # SQLite would otherwise hand out ids of deleted rows again after a reseed
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r}, age={self.age!r})"
