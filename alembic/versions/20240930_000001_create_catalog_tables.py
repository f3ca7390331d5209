"""Create catalog tables

Revision ID: 20240930_000001
Revises: None
Create Date: 2024-09-30

Creates owners, properties, property_images and property_traces with
cascading foreign keys down the ownership chain, and inserts the
bootstrap catalog.
"""
from datetime import date
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20240930_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Bootstrap rows as of this revision
OWNERS = [
    {'id': 1, 'name': 'John Doe', 'address': '123 Elm Street', 'birthday': date(1975, 8, 15), 'photo': None},
    {'id': 2, 'name': 'Jane Smith', 'address': '456 Oak Avenue', 'birthday': date(1980, 5, 22), 'photo': None},
]

PROPERTIES = [
    {
        'id': 1, 'name': 'Modern Villa', 'address': '789 Pine Road', 'price': 500000,
        'code_internal': 'MODV123', 'year': 2015, 'owner_id': 1,
    },
    {
        'id': 2, 'name': 'Beachfront Condo', 'address': '10 Ocean Drive', 'price': 300000,
        'code_internal': 'BFCD456', 'year': 2018, 'owner_id': 2,
    },
]

PROPERTY_IMAGES = [
    {'id': 1, 'file': None, 'enabled': True, 'property_id': 1},
    {'id': 2, 'file': None, 'enabled': True, 'property_id': 2},
]

PROPERTY_TRACES = [
    {'id': 1, 'date_sale': date(2020, 7, 15), 'name': 'Initial Sale', 'value': 450000, 'tax': 45000, 'property_id': 1},
    {'id': 2, 'date_sale': date(2021, 3, 10), 'name': 'Initial Sale', 'value': 280000, 'tax': 28000, 'property_id': 2},
]


def upgrade() -> None:
    """Create the catalog tables and load the seed rows."""
    owners = op.create_table(
        'owners',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=False),
        sa.Column('birthday', sa.Date(), nullable=False),
        sa.Column('photo', sa.LargeBinary(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_owners'),
    )

    properties = op.create_table(
        'properties',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('code_internal', sa.String(length=100), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_properties'),
        sa.ForeignKeyConstraint(
            ['owner_id'],
            ['owners.id'],
            name='fk_properties_owner_id',
            ondelete='CASCADE'
        ),
        sa.CheckConstraint('price > 0', name='ck_properties_price_positive'),
        sa.CheckConstraint('year BETWEEN 1800 AND 2024', name='ck_properties_year_range'),
    )

    property_images = op.create_table(
        'property_images',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('file', sa.LargeBinary(), nullable=True),
        sa.Column('enabled', sa.Boolean(), nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_property_images'),
        sa.ForeignKeyConstraint(
            ['property_id'],
            ['properties.id'],
            name='fk_property_images_property_id',
            ondelete='CASCADE'
        ),
    )

    property_traces = op.create_table(
        'property_traces',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date_sale', sa.Date(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('value', sa.Integer(), nullable=False),
        sa.Column('tax', sa.Integer(), nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_property_traces'),
        sa.ForeignKeyConstraint(
            ['property_id'],
            ['properties.id'],
            name='fk_property_traces_property_id',
            ondelete='CASCADE'
        ),
        sa.CheckConstraint('value > 0', name='ck_property_traces_value_positive'),
        sa.CheckConstraint('tax > 0', name='ck_property_traces_tax_positive'),
    )

    # Indexes for the foreign key lookups
    op.create_index('ix_properties_owner_id', 'properties', ['owner_id'])
    op.create_index('ix_property_images_property_id', 'property_images', ['property_id'])
    op.create_index('ix_property_traces_property_id', 'property_traces', ['property_id'])

    op.bulk_insert(owners, OWNERS)
    op.bulk_insert(properties, PROPERTIES)
    op.bulk_insert(property_images, PROPERTY_IMAGES)
    op.bulk_insert(property_traces, PROPERTY_TRACES)


def downgrade() -> None:
    """Drop the catalog tables, children first."""
    op.drop_index('ix_property_traces_property_id', table_name='property_traces')
    op.drop_index('ix_property_images_property_id', table_name='property_images')
    op.drop_index('ix_properties_owner_id', table_name='properties')
    op.drop_table('property_traces')
    op.drop_table('property_images')
    op.drop_table('properties')
    op.drop_table('owners')
