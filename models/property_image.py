from sqlalchemy import Column, Integer, Boolean, LargeBinary, ForeignKey
from .base import Base


class PropertyImage(Base):
     """
     PropertyImage model - a photo attached to a property.
     Table name resolves to 'property_images'.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     file = Column(LargeBinary, nullable=True)
     enabled = Column(Boolean, default=True, nullable=False)
     property_id = Column(
          Integer,
          ForeignKey("properties.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )

     def __repr__(self):
          return f"<PropertyImage(id={self.id}, property_id={self.property_id}, enabled={self.enabled})>"
