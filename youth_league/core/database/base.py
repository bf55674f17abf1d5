"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the centralized database layer using SQLModel.

Every table keeps the physical layout it was created with: upper snake case
column names, serial ``ID`` keys, and reference columns stored as ``TEXT``.
The helpers below declare those columns and the view-only relationships that
join a text reference to a serial key.
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict
from sqlalchemy import Column, Integer, Text
from sqlmodel import Field, Relationship, SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def serial_key() -> Any:
    """Field for the serial ``ID`` primary key."""
    return Field(default=None, sa_column=Column("ID", Integer, primary_key=True, autoincrement=True))


def text_field(name: str, *, nullable: bool = False, **kwargs: Any) -> Any:
    """Field stored in a ``TEXT`` column named ``name``."""
    if nullable:
        kwargs.setdefault("default", None)
    return Field(sa_column=Column(name, Text, nullable=nullable), **kwargs)


def reference(target_key: str, reference_column: str, **kwargs: Any) -> Any:
    """View-only relationship between a serial key and a text reference column.

    The serial key is rendered as TEXT inside the join, so a reference holding
    anything other than a number matches no row instead of failing a cast. The
    same join string declares both directions; SQLAlchemy infers many-to-one
    or one-to-many from the side the reference column lives on.

    Args:
        target_key: Serial key in ``Class.attribute`` form, e.g. ``"Team.id"``
        reference_column: Text column in ``Class.attribute`` form, e.g. ``"Player.team_id"``
    """
    return Relationship(
        sa_relationship_kwargs={
            "primaryjoin": f"cast({target_key}, Text) == foreign({reference_column})",
            "viewonly": True,
            **kwargs,
        }
    )


def as_reference(value: int | str) -> str:
    """Render a key the way reference columns store it."""
    return str(value)
