"""initial schema

Revision ID: 0001
Revises:
Create Date: 2025-01-15 10:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "clients",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("cnpj", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("cnpj"),
    )
    op.create_index(op.f("ix_clients_code"), "clients", ["code"], unique=True)

    op.create_table(
        "consultants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_consultants_code"), "consultants", ["code"], unique=True)

    op.create_table(
        "service_types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_service_types_code"), "service_types", ["code"], unique=True)

    op.create_table(
        "services",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("hourly_rate", sa.Numeric(10, 2), nullable=False),
        sa.Column("service_type_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"]),
        sa.ForeignKeyConstraint(["service_type_id"], ["service_types.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_services_code"), "services", ["code"], unique=True)
    op.create_index(op.f("ix_services_client_id"), "services", ["client_id"], unique=False)

    op.create_table(
        "sectors",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=True),
        sa.Column("description", sa.String(), nullable=False),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_sectors_code"), "sectors", ["code"], unique=True)
    op.create_index(op.f("ix_sectors_client_id"), "sectors", ["client_id"], unique=False)

    op.create_table(
        "time_entries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("date", sa.String(length=10), nullable=False),
        sa.Column("consultant_id", sa.Integer(), nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("service_id", sa.Integer(), nullable=False),
        sa.Column("sector_id", sa.Integer(), nullable=True),
        sa.Column("start_time", sa.String(length=5), nullable=False),
        sa.Column("end_time", sa.String(length=5), nullable=False),
        sa.Column("break_start_time", sa.String(length=5), nullable=True),
        sa.Column("break_end_time", sa.String(length=5), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("total_hours", sa.Numeric(5, 2), nullable=False),
        sa.Column("total_value", sa.Numeric(10, 2), nullable=False),
        sa.Column("activity_completed", sa.String(), nullable=True),
        sa.Column("delivery_forecast", sa.String(length=10), nullable=True),
        sa.Column("actual_delivery", sa.String(length=10), nullable=True),
        sa.Column("project", sa.String(), nullable=True),
        sa.Column("service_location", sa.String(), nullable=True),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"]),
        sa.ForeignKeyConstraint(["consultant_id"], ["consultants.id"]),
        sa.ForeignKeyConstraint(["sector_id"], ["sectors.id"]),
        sa.ForeignKeyConstraint(["service_id"], ["services.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_time_entries_date"), "time_entries", ["date"], unique=False)
    op.create_index(op.f("ix_time_entries_consultant_id"), "time_entries", ["consultant_id"], unique=False)
    op.create_index(op.f("ix_time_entries_client_id"), "time_entries", ["client_id"], unique=False)


def downgrade() -> None:
    op.drop_table("time_entries")
    op.drop_table("sectors")
    op.drop_table("services")
    op.drop_table("service_types")
    op.drop_table("consultants")
    op.drop_table("clients")
