# models/base.py
import enum
from typing import Type

from sqlalchemy import Column, DateTime, Enum, func
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Table names are declared explicitly on every model.
     """


class TimestampMixin:
     """Adds created_at / updated_at columns maintained by the database."""

     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)


def enum_type(enum_cls: Type[enum.Enum], name: str) -> Enum:
     """
     Column type for a str-valued enum that stores the lowercase values
     ("available", "paid", ...) rather than the member names.
     """
     return Enum(
          enum_cls,
          name=name,
          create_constraint=True,
          values_callable=lambda members: [member.value for member in members],
     )
