# models/tower.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Tower(TimestampMixin, Base):
     """Tower model - a building that groups floors."""
     __tablename__ = "towers"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(150), nullable=False)

     # Relationships
     floors = relationship("Floor", back_populates="tower", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Tower(id={self.id}, name='{self.name}')>"
