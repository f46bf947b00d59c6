# models/facility.py
from sqlalchemy import Column, Integer, String
from .base import Base, TimestampMixin


class Facility(TimestampMixin, Base):
     """Facility model - amenity that can be attached to many units."""
     __tablename__ = "facilities"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(150), nullable=False)

     def __repr__(self):
          return f"<Facility(id={self.id}, name='{self.name}')>"
