from sqlalchemy import Column, Integer, String, Date, ForeignKey, CheckConstraint
from .base import Base


class PropertyTrace(Base):
     """
     PropertyTrace model - a recorded sale of a property.

     Each trace keeps the sale date, the sale value and the tax paid on it.
     Table name resolves to 'property_traces'.
     """
     __table_args__ = (
          CheckConstraint("value > 0", name="ck_property_traces_value_positive"),
          CheckConstraint("tax > 0", name="ck_property_traces_tax_positive"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     date_sale = Column(Date, nullable=False)
     name = Column(String(255), nullable=False)
     value = Column(Integer, nullable=False)
     tax = Column(Integer, nullable=False)
     property_id = Column(
          Integer,
          ForeignKey("properties.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )

     def __repr__(self):
          return f"<PropertyTrace(id={self.id}, property_id={self.property_id}, value={self.value})>"
