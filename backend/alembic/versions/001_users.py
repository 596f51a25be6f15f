"""Users table.

Revision ID: 001_users
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_users"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

GENDER = sa.Enum("male", "female", "x", name="gender")
SENIORITY = sa.Enum("trainee", "jr", "ssr", "senior", name="seniority")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("gender", GENDER, nullable=False),
        sa.Column("seniority", SENIORITY, nullable=False),
        sa.Column("experience", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("users")
    GENDER.drop(op.get_bind(), checkfirst=True)
    SENIORITY.drop(op.get_bind(), checkfirst=True)
