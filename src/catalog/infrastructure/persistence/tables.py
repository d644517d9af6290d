"""Database tables.

These rows describe how entities are stored. They are kept apart from
the domain dataclasses; repositories translate between the two.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from sqlmodel import Field, Relationship, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RoleUserLink(SQLModel, table=True):
    __tablename__ = "role_user"

    role_id: Optional[int] = Field(default=None, foreign_key="roles.id", primary_key=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id", primary_key=True)


class UserRow(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True, index=True)

    roles: List["RoleRow"] = Relationship(back_populates="users", link_model=RoleUserLink)


class RoleRow(SQLModel, table=True):
    __tablename__ = "roles"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, unique=True, index=True)
    description: Optional[str] = Field(default=None, max_length=500)

    users: List[UserRow] = Relationship(back_populates="roles", link_model=RoleUserLink)


class CategoryRow(SQLModel, table=True):
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, index=True)


class ProductRow(SQLModel, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=2000)
    price: Decimal = Field(max_digits=8, decimal_places=2)
    image: Optional[str] = Field(default=None, max_length=255)
    category_id: int = Field(foreign_key="categories.id", index=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=_utcnow, index=True)
    updated_at: datetime = Field(default_factory=_utcnow)

    category: Optional[CategoryRow] = Relationship()
    owner: Optional[UserRow] = Relationship()
