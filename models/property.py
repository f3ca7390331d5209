from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base

MIN_YEAR = 1800
MAX_YEAR = 2024


class Property(Base):
     """
     Property model - a listed real-estate property.
     Table name resolves to 'properties'.
     """
     __table_args__ = (
          CheckConstraint("price > 0", name="ck_properties_price_positive"),
          CheckConstraint(f"year BETWEEN {MIN_YEAR} AND {MAX_YEAR}", name="ck_properties_year_range"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(255), nullable=False)
     address = Column(String(255), nullable=False)
     price = Column(Integer, nullable=False)
     code_internal = Column(String(100), nullable=False)
     year = Column(Integer, nullable=False)
     owner_id = Column(
          Integer,
          ForeignKey("owners.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )

     # Relationships
     property_images = relationship("PropertyImage", cascade="all")
     property_traces = relationship("PropertyTrace", cascade="all")

     def __repr__(self):
          return f"<Property(id={self.id}, name='{self.name}', price={self.price}, year={self.year})>"
