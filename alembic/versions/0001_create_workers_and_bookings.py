from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "workers",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("work_type", sa.String(), nullable=False),
        sa.Column("work_subcategories", sa.JSON(), nullable=True),
        sa.Column("years_experience", sa.Integer(), nullable=True),
        sa.Column("languages_spoken", sa.JSON(), nullable=True),
        sa.Column("preferred_areas", sa.JSON(), nullable=True),
        sa.Column("residential_address", sa.String(), nullable=True),
        sa.Column("working_hours", sa.String(), nullable=True),
        sa.Column("gender", sa.String(), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(), nullable=True),
        sa.Column("assigned_customer_id", sa.String(), nullable=True),
        sa.Column("trial_start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("trial_end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("scheduled_call_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("match_score", sa.Integer(), nullable=True),
    )
    op.create_index("ix_workers_phone", "workers", ["phone"], unique=False)
    op.create_index("ix_workers_work_type", "workers", ["work_type"], unique=False)
    op.create_index("ix_workers_status", "workers", ["status"], unique=False)
    op.create_index("ix_workers_assigned_customer_id", "workers", ["assigned_customer_id"], unique=False)

    op.create_table(
        "bookings",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("service_type", sa.String(), nullable=False),
        sa.Column("preferred_time", sa.String(), nullable=True),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("sub_services", sa.JSON(), nullable=True),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("assigned_worker_id", sa.String(), nullable=True),
        sa.Column("call_scheduled_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("call_status", sa.String(), nullable=True),
    )
    op.create_index("ix_bookings_status", "bookings", ["status"], unique=False)
    op.create_index("ix_bookings_assigned_worker_id", "bookings", ["assigned_worker_id"], unique=False)


def downgrade():
    op.drop_index("ix_bookings_assigned_worker_id", table_name="bookings")
    op.drop_index("ix_bookings_status", table_name="bookings")
    op.drop_table("bookings")
    op.drop_index("ix_workers_assigned_customer_id", table_name="workers")
    op.drop_index("ix_workers_status", table_name="workers")
    op.drop_index("ix_workers_work_type", table_name="workers")
    op.drop_index("ix_workers_phone", table_name="workers")
    op.drop_table("workers")
