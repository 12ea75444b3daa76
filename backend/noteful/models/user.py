"""
Noteful API — User SQLAlchemy Model
====================================

What:  ORM model for the `users` table.

Notes:
    - password holds a passlib hash, never the plaintext
    - username is unique; a duplicate insert surfaces as IntegrityError,
      which UserService reports as "The username already exists"
"""

from datetime import datetime

from sqlalchemy import String, Text, TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base
from noteful.ids import new_object_id
from noteful.models.folder import utcnow


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=new_object_id)

    fullname: Mapped[str] = mapped_column(Text, nullable=False, default="")

    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

    password: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=utcnow
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
