"""
Initial schema: users, task_lists and todos.

Revision ID: 20261019_000000_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00
"""

import sqlalchemy as sa

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "20261019_000000_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="users_pkey"),
    )
    op.create_index("idx_users_email", "users", ["email"])

    op.create_table(
        "task_lists",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("created_at", sa.String(length=64), nullable=False),
        sa.Column("user_ids", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="task_lists_pkey"),
    )

    # No foreign key to task_lists: deleting a list orphans its to-dos
    op.create_table(
        "todos",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_completed", sa.Boolean(), nullable=False),
        sa.Column("task_list_id", sa.Uuid(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="todos_pkey"),
    )
    op.create_index("idx_todos_task_list_id", "todos", ["task_list_id"])


def downgrade() -> None:
    op.drop_index("idx_todos_task_list_id", table_name="todos")
    op.drop_table("todos")
    op.drop_table("task_lists")
    op.drop_index("idx_users_email", table_name="users")
    op.drop_table("users")
