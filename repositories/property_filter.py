"""
repositories/property_filter.py
-------------------------------
Translates a PropertyFilter into WHERE clauses on a Property query.

Each criterion that is set narrows the query (they combine with AND);
criteria left as None add nothing, so an empty filter leaves the query
untouched.
"""
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Query
from sqlalchemy.sql.elements import ColumnElement

import config
from models import Property
from schemas.property import PropertyFilter

# SQL Server's default collations ignore case, so LIKE needs an explicit one
MSSQL_CASE_SENSITIVE_COLLATION = "Latin1_General_CS_AS"


def name_condition(needle: str, case_sensitive: bool, dialect_name: str) -> ColumnElement:
     """
     Build the "name contains needle" clause for the given backend.

     LIKE wildcards in the needle match literally. Case-sensitive matching
     relies on ``PRAGMA case_sensitive_like`` on SQLite and on a
     case-sensitive collation on SQL Server.
     """
     if not case_sensitive:
          return func.lower(Property.name).contains(needle.lower(), autoescape=True)
     if dialect_name == "mssql":
          return Property.name.collate(MSSQL_CASE_SENSITIVE_COLLATION).contains(needle, autoescape=True)
     return Property.name.contains(needle, autoescape=True)


def apply_property_filter(
     query: Query,
     criteria: PropertyFilter,
     case_sensitive: Optional[bool] = None
) -> Query:
     """
     Apply the price range, year and name criteria to a Property query.

     Args:
          query: Query selecting Property rows, bound to a session
          criteria: Filter values; None fields are skipped
          case_sensitive: Name matching mode; defaults to PROPERTY_NAME_CASE_SENSITIVE

     Returns:
          The narrowed query
     """
     if case_sensitive is None:
          case_sensitive = config.PROPERTY_NAME_CASE_SENSITIVE

     if criteria.min_price is not None:
          query = query.filter(Property.price >= criteria.min_price)

     if criteria.max_price is not None:
          query = query.filter(Property.price <= criteria.max_price)

     if criteria.year is not None:
          query = query.filter(Property.year == criteria.year)

     # Blank names impose no constraint
     if criteria.name is not None and criteria.name.strip():
          dialect_name = query.session.get_bind().dialect.name
          query = query.filter(name_condition(criteria.name, case_sensitive, dialect_name))

     return query
