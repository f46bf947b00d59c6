# models/customer.py
from sqlalchemy import Column, Integer, String, Text
from .base import Base, TimestampMixin


class Customer(TimestampMixin, Base):
     """
     Customer model - buyer details captured with a reservation.
     One row per reservation; customers are not de-duplicated.
     """
     __tablename__ = "customers"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(200), nullable=False)

     # Identity documents (KTP: national ID card, NPWP: tax number)
     ktp_number = Column(String(50), nullable=False)
     npwp_number = Column(String(50), nullable=False)

     # Contact
     email = Column(String(255), nullable=False)
     phone_number = Column(String(50), nullable=False)

     # Address
     address = Column(Text, nullable=False)
     city = Column(String(100), nullable=False)
     province = Column(String(100), nullable=False)

     customer_source = Column(String(100), nullable=False)

     def __repr__(self):
          return f"<Customer(id={self.id}, name='{self.name}')>"
