# models/base.py
import re

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase, declared_attr

# Deterministic constraint names so Alembic can drop what it creates
NAMING_CONVENTION = {
     "ix": "ix_%(table_name)s_%(column_0_name)s",
     "uq": "uq_%(table_name)s_%(column_0_name)s",
     "fk": "fk_%(table_name)s_%(column_0_name)s",
     "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
     """
     Base class for all catalog models.
     Table names are derived from the class name.
     """
     metadata = MetaData(naming_convention=NAMING_CONVENTION)

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Example: PropertyImage -> property_images, Property -> properties
          """
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'
