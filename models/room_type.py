# models/room_type.py
from sqlalchemy import Column, Integer, String
from .base import Base, TimestampMixin


class RoomType(TimestampMixin, Base):
     """RoomType model - layout category of a unit (studio, 2BR, ...)."""
     __tablename__ = "room_types"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(150), nullable=False)

     def __repr__(self):
          return f"<RoomType(id={self.id}, name='{self.name}')>"
