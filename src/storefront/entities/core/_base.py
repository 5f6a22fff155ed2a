import re
import secrets
import time
from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

OBJECT_ID_PATTERN = re.compile(r"^[a-f\d]{24}$", re.IGNORECASE)


def new_object_id() -> str:
    """Generate a 24 character hex identifier: epoch seconds + 8 random bytes."""
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def is_valid_object_id(value: str) -> bool:
    return bool(OBJECT_ID_PATTERN.fullmatch(value))


class Entity(BaseModel):
    """Base entity class with an auto-generated object identifier."""

    id: str = PydanticField(
        default_factory=new_object_id,
        description="Unique identifier for the entity",
    )

    created_at: datetime = PydanticField(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = PydanticField(default_factory=lambda: datetime.now(UTC))


class EntityTable(SQLModel, table=False):
    """Base table class with an auto-generated object identifier."""

    id: str = Field(
        primary_key=True,
        default_factory=new_object_id,
        max_length=24,
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
