"""create event planner tables

Revision ID: 001
Revises: 
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision  = "001"
down_revision = None
branch_labels = None
depends_on    = None


def upgrade() -> None:
    op.create_table(
        "admins",
        sa.Column("id",            sa.Integer(),               primary_key=True, autoincrement=True),
        sa.Column("name",          sa.String(255),             nullable=False),
        sa.Column("email",         sa.String(255),             nullable=False),
        sa.Column("password_hash", sa.Text(),                  nullable=False),
        sa.Column("is_active",     sa.Boolean(),               nullable=False, server_default="true"),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at",    sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_admins_email", "admins", ["email"], unique=True)

    op.create_table(
        "event_planner_events",
        sa.Column("id",                 sa.Integer(),     primary_key=True, autoincrement=True),
        sa.Column("event_name",         sa.String(255),   nullable=False),
        sa.Column("category",           sa.String(64),    nullable=False),
        sa.Column("registration_start", sa.BigInteger(),  nullable=False),
        sa.Column("registration_end",   sa.BigInteger(),  nullable=False),
        sa.Column("event_date",         sa.BigInteger(),  nullable=False),
        sa.Column("created",            sa.BigInteger(),  nullable=False),
    )
    op.create_index("ix_event_planner_events_category",   "event_planner_events", ["category"])
    op.create_index("ix_event_planner_events_event_date", "event_planner_events", ["event_date"])
    op.create_index(
        "ix_event_planner_events_window",
        "event_planner_events",
        ["registration_start", "registration_end"],
    )

    op.create_table(
        "event_planner_registrations",
        sa.Column("id",           sa.Integer(),    primary_key=True, autoincrement=True),
        sa.Column("event_id",     sa.Integer(),    nullable=False),
        sa.Column("full_name",    sa.String(255),  nullable=False),
        sa.Column("email",        sa.String(255),  nullable=False),
        sa.Column("college_name", sa.String(255),  nullable=False),
        sa.Column("department",   sa.String(255),  nullable=False),
        sa.Column("category",     sa.String(64),   nullable=False),
        sa.Column("event_date",   sa.BigInteger(), nullable=False),
        sa.Column("event_name",   sa.String(255),  nullable=False),
        sa.Column("created",      sa.BigInteger(), nullable=False),
        sa.UniqueConstraint("event_date", "email", name="uq_registration_event_date_email"),
    )
    op.create_index("ix_event_planner_registrations_event_id",   "event_planner_registrations", ["event_id"])
    op.create_index("ix_event_planner_registrations_event_date", "event_planner_registrations", ["event_date"])

    op.create_table(
        "event_planner_config",
        sa.Column("name", sa.String(128), primary_key=True),
        sa.Column("data", sa.JSON(),      nullable=False),
    )


def downgrade() -> None:
    op.drop_table("event_planner_config")
    op.drop_index("ix_event_planner_registrations_event_date", table_name="event_planner_registrations")
    op.drop_index("ix_event_planner_registrations_event_id",   table_name="event_planner_registrations")
    op.drop_table("event_planner_registrations")
    op.drop_index("ix_event_planner_events_window",     table_name="event_planner_events")
    op.drop_index("ix_event_planner_events_event_date", table_name="event_planner_events")
    op.drop_index("ix_event_planner_events_category",   table_name="event_planner_events")
    op.drop_table("event_planner_events")
    op.drop_index("ix_admins_email", table_name="admins")
    op.drop_table("admins")
