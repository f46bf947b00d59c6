# models/floor.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Floor(TimestampMixin, Base):
     """
     Floor model - a level inside a tower.
     The floor plan image is a blob reference owned by the floor.
     """
     __tablename__ = "floors"

     id = Column(Integer, primary_key=True, autoincrement=True)
     tower_id = Column(Integer, ForeignKey("towers.id", ondelete="CASCADE"), nullable=False, index=True)
     label = Column(String(100), nullable=False)
     number = Column(Integer, nullable=False)
     floor_plan_image_url = Column(String(500), nullable=True)

     # Relationships
     tower = relationship("Tower", back_populates="floors")
     units = relationship("Unit", back_populates="floor", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Floor(id={self.id}, label='{self.label}', number={self.number})>"
