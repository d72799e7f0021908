"""create restaurant, hours and reservation tables

Revision ID: 20261017_1200
Revises: 
Create Date: 2026-10-17 12:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261017_1200"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "restaurants",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
    )

    op.create_table(
        "restaurant_hours",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("restaurant_id", sa.Integer(), nullable=False),
        sa.Column("day_of_week", sa.SmallInteger(), nullable=False),
        sa.Column("open_time", sa.Time(), nullable=False),
        sa.Column("close_time", sa.Time(), nullable=False),
        sa.ForeignKeyConstraint(["restaurant_id"], ["restaurants.id"]),
    )
    op.create_index(
        "ix_restaurant_hours_restaurant_id", "restaurant_hours", ["restaurant_id"]
    )

    op.create_table(
        "reservations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("restaurant_id", sa.Integer(), nullable=False),
        sa.Column("customer_name", sa.String(length=100), nullable=True),
        sa.Column("party_size", sa.Integer(), nullable=True),
        sa.Column("reservation_time", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["restaurant_id"], ["restaurants.id"]),
    )
    op.create_index("ix_reservations_restaurant_id", "reservations", ["restaurant_id"])


def downgrade() -> None:
    op.drop_index("ix_reservations_restaurant_id", table_name="reservations")
    op.drop_table("reservations")
    op.drop_index("ix_restaurant_hours_restaurant_id", table_name="restaurant_hours")
    op.drop_table("restaurant_hours")
    op.drop_table("restaurants")
