from sqlalchemy import Column, Integer, String, Date, LargeBinary
from sqlalchemy.orm import relationship
from .base import Base


class Owner(Base):
     """
     Owner model - a person who owns one or more catalog properties.
     Table name resolves to 'owners'.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(255), nullable=False)
     address = Column(String(255), nullable=False)
     birthday = Column(Date, nullable=False)
     photo = Column(LargeBinary, nullable=True)

     # Parent side only; deleting an owner removes its properties in the same flush
     properties = relationship("Property", cascade="all")

     def __repr__(self):
          return f"<Owner(id={self.id}, name='{self.name}')>"
