"""Create reservation back-office schema

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

Creates users, the building catalog (towers, floors, room types, facilities),
units with their images and facility links, customers and reservations.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create all tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column(
            'role',
            sa.Enum('admin', 'salesman', 'supervisor', name='user_role', create_constraint=True),
            nullable=False,
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    for table in ('towers', 'room_types', 'facilities'):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('name', sa.String(length=150), nullable=False),
            *_timestamps(),
            sa.PrimaryKeyConstraint('id'),
        )

    op.create_table(
        'floors',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('tower_id', sa.Integer(), nullable=False),
        sa.Column('label', sa.String(length=100), nullable=False),
        sa.Column('number', sa.Integer(), nullable=False),
        sa.Column('floor_plan_image_url', sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['tower_id'], ['towers.id'], name='fk_floors_tower_id', ondelete='CASCADE'),
    )
    op.create_index('ix_floors_tower_id', 'floors', ['tower_id'])

    op.create_table(
        'units',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('unit_code', sa.String(length=50), nullable=False),
        sa.Column('floor_id', sa.Integer(), nullable=False),
        sa.Column('room_type_id', sa.Integer(), nullable=False),
        sa.Column('price_offer', sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column('semi_gross_area', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column(
            'status',
            sa.Enum('available', 'reserved', 'booked', name='unit_status', create_constraint=True),
            nullable=False,
            server_default='available',
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['floor_id'], ['floors.id'], name='fk_units_floor_id', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['room_type_id'], ['room_types.id'], name='fk_units_room_type_id'),
    )
    op.create_index('ix_units_unit_code', 'units', ['unit_code'])
    op.create_index('ix_units_floor_id', 'units', ['floor_id'])
    op.create_index('ix_units_room_type_id', 'units', ['room_type_id'])
    op.create_index('ix_units_status', 'units', ['status'])

    op.create_table(
        'unit_images',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], name='fk_unit_images_unit_id', ondelete='CASCADE'),
    )
    op.create_index('ix_unit_images_unit_id', 'unit_images', ['unit_id'])

    op.create_table(
        'unit_facilities',
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('facility_id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('unit_id', 'facility_id'),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], name='fk_unit_facilities_unit_id', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(
            ['facility_id'],
            ['facilities.id'],
            name='fk_unit_facilities_facility_id',
            ondelete='CASCADE',
        ),
    )

    op.create_table(
        'customers',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('ktp_number', sa.String(length=50), nullable=False),
        sa.Column('npwp_number', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone_number', sa.String(length=50), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('province', sa.String(length=100), nullable=False),
        sa.Column('customer_source', sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'reservations',
        sa.Column('uuid', sa.String(length=36), nullable=False),
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('customer_id', sa.Integer(), nullable=False),
        sa.Column('salesman_id', sa.Integer(), nullable=False),
        sa.Column('media_source_category', sa.String(length=100), nullable=False),
        sa.Column('media_source_desc', sa.String(length=255), nullable=False),
        sa.Column('notes', sa.Text(), nullable=False),
        sa.Column(
            'payment_type',
            sa.Enum('cash', 'credit', 'installment', 'mortgage', name='payment_type', create_constraint=True),
            nullable=False,
        ),
        sa.Column(
            'status',
            sa.Enum('reserved', 'paid', 'booked', 'declined', name='reservation_status', create_constraint=True),
            nullable=False,
            server_default='reserved',
        ),
        sa.Column('payment_proof_url', sa.String(length=500), nullable=False, server_default=''),
        *_timestamps(),
        sa.PrimaryKeyConstraint('uuid'),
        sa.UniqueConstraint('customer_id', name='uq_reservations_customer_id'),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], name='fk_reservations_unit_id', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id'], name='fk_reservations_customer_id'),
        sa.ForeignKeyConstraint(['salesman_id'], ['users.id'], name='fk_reservations_salesman_id'),
    )
    op.create_index('ix_reservations_unit_id', 'reservations', ['unit_id'])
    op.create_index('ix_reservations_salesman_id', 'reservations', ['salesman_id'])
    op.create_index('ix_reservations_status', 'reservations', ['status'])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table('reservations')
    op.drop_table('customers')
    op.drop_table('unit_facilities')
    op.drop_table('unit_images')
    op.drop_table('units')
    op.drop_table('floors')
    for table in ('facilities', 'room_types', 'towers'):
        op.drop_table(table)
    op.drop_table('users')
